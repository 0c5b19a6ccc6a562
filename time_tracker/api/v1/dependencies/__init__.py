"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB-backed repositories and application services.
Routes depend only on these dependencies, not on infrastructure directly;
tests override get_task_service / get_user_service with in-memory fakes.
"""

from time_tracker.api.v1.dependencies.identity import get_identity_provider
from time_tracker.api.v1.dependencies.task import (
    get_task_service,
    get_task_service_for_read,
)
from time_tracker.api.v1.dependencies.user import (
    get_user_service,
    get_user_service_for_read,
)

__all__ = [
    "get_identity_provider",
    "get_task_service",
    "get_task_service_for_read",
    "get_user_service",
    "get_user_service_for_read",
]
