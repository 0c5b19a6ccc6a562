"""DTO for a normalized users page request."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageRequest:
    """1-based page with its limit/offset and the free-text filter (unmodified)."""

    page: int
    limit: int
    offset: int
    filter: str = ""
