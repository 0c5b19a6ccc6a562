"""Validation and normalization of a user's task range query."""

from time_tracker.application.services.validation import is_valid_uuid, parse_rfc3339
from time_tracker.domain.exceptions import (
    InvalidDateException,
    InvalidDateRangeException,
    InvalidUUIDException,
)
from time_tracker.domain.value_objects.core import DateRange


def plan_range_query(user_id: str, start_date: str, end_date: str) -> DateRange:
    """Validate user_id and the RFC3339 bounds; return the closed range.

    Checks run in order: user id, start date, end date, ordering.
    start == end is a valid (instant) range.

    Raises:
        InvalidUUIDException: user_id is not a UUID.
        InvalidDateException: a bound does not parse as RFC3339.
        InvalidDateRangeException: start is after end.
    """
    if not is_valid_uuid(user_id):
        raise InvalidUUIDException(user_id, field="user_id")
    start = parse_rfc3339(start_date)
    if start is None:
        raise InvalidDateException(start_date, field="start_date")
    end = parse_rfc3339(end_date)
    if end is None:
        raise InvalidDateException(end_date, field="end_date")
    if start > end:
        raise InvalidDateRangeException(start_date, end_date)
    return DateRange(start=start, end=end)
