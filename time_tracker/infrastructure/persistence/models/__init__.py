"""Persistence models: ORM entities and mixins."""

from time_tracker.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    TimestampMixin,
    UuidMixin,
)
from time_tracker.infrastructure.persistence.models.task import Task
from time_tracker.infrastructure.persistence.models.user import User

__all__ = [
    "Task",
    "User",
    "CreatedAtMixin",
    "TimestampMixin",
    "UuidMixin",
]
