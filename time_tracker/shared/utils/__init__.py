"""Shared utilities: datetime, generators."""

from time_tracker.shared.utils.datetime import ensure_utc, utc_now
from time_tracker.shared.utils.generators import generate_uuid

__all__ = [
    "generate_uuid",
    "utc_now",
    "ensure_utc",
]
