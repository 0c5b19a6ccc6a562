"""Pure application services: validation, pagination, patch building, range planning."""

from time_tracker.application.services.pagination import paginate
from time_tracker.application.services.range_query_planner import plan_range_query
from time_tracker.application.services.user_patch_builder import build_user_patch
from time_tracker.application.services.validation import is_valid_uuid, parse_rfc3339

__all__ = [
    "build_user_patch",
    "is_valid_uuid",
    "paginate",
    "parse_rfc3339",
    "plan_range_query",
]
