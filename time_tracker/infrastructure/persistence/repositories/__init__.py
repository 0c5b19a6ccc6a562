"""Persistence repositories. Re-exports for dependency injection."""

from time_tracker.infrastructure.persistence.repositories.base import BaseRepository
from time_tracker.infrastructure.persistence.repositories.task_repo import TaskRepository
from time_tracker.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "TaskRepository",
    "UserRepository",
]
