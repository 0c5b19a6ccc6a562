"""Users pagination policy: lenient page parsing, fixed page size."""

from typing import Any

from time_tracker.application.dtos.pagination import PageRequest
from time_tracker.core.constants import DEFAULT_PAGE, USERS_PAGE_SIZE


def _coerce_page(page: Any) -> int:
    if page is None or isinstance(page, bool):
        return DEFAULT_PAGE
    try:
        value = int(str(page).strip())
    except ValueError:
        return DEFAULT_PAGE
    return value if value >= 1 else DEFAULT_PAGE


def paginate(page: Any = None, filter: str | None = None) -> PageRequest:
    """Map a 1-based page and free-text filter to a limit/offset request.

    Absent, unparsable or < 1 pages fall back to page 1; this never raises.
    There is no upper bound: a page past the end just yields no rows.
    The filter is passed through unchanged (storage adds wildcards).
    """
    number = _coerce_page(page)
    return PageRequest(
        page=number,
        limit=USERS_PAGE_SIZE,
        offset=(number - 1) * USERS_PAGE_SIZE,
        filter=filter or "",
    )
