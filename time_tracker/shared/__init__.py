"""Shared utilities: request context, logging, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from time_tracker.shared.context import (
    clear_request_id,
    get_request_id,
    set_request_id,
)
from time_tracker.shared.utils import ensure_utc, generate_uuid, utc_now

__all__ = [
    "set_request_id",
    "get_request_id",
    "clear_request_id",
    "generate_uuid",
    "utc_now",
    "ensure_utc",
]
