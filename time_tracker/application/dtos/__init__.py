"""Application DTOs (no dependency on ORM)."""

from time_tracker.application.dtos.pagination import PageRequest
from time_tracker.application.dtos.task import TaskResult
from time_tracker.application.dtos.user import (
    NewUser,
    UserInfo,
    UserPatch,
    UserResult,
    UserUpdate,
)

__all__ = [
    "NewUser",
    "PageRequest",
    "TaskResult",
    "UserInfo",
    "UserPatch",
    "UserResult",
    "UserUpdate",
]
