"""Identifier and date validation (pure functions, no state)."""

import re
import uuid
from datetime import datetime

from time_tracker.shared.utils.datetime import ensure_utc

# RFC3339 date-time: full date, 'T' (or space/lowercase t), time with optional
# fraction, mandatory offset ('Z' or ±hh:mm).
_RFC3339_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


def is_valid_uuid(value: str | None) -> bool:
    """Return True if value parses as a UUID (canonical, hyphenless, braced or urn form)."""
    if not value:
        return False
    try:
        uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        return False
    return True


def parse_rfc3339(value: str | None) -> datetime | None:
    """Parse an RFC3339 timestamp into a UTC-aware datetime.

    Returns None when value is empty, lacks a timezone offset, or is not a
    valid calendar date/time.
    """
    if not value or not _RFC3339_RE.match(value):
        return None
    normalized = value[:-1] + "+00:00" if value[-1] in "Zz" else value
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError:
        return None
    return ensure_utc(parsed)
