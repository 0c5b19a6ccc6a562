"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Implementations translate storage errors: missing rows raise the domain
not-found exceptions, duplicates raise UserAlreadyExistsException, anything
else raises StorageException.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from time_tracker.application.dtos.task import TaskResult
    from time_tracker.application.dtos.user import NewUser, UserPatch, UserResult


class ITaskRepository(Protocol):
    """Protocol for task repository (DIP)."""

    async def find_task(self, task_id: str) -> TaskResult:
        """Return task by id; raise TaskNotFoundException if absent."""

    async def create_task(
        self, user_id: str, title: str, description: str
    ) -> TaskResult:
        """Insert a not-started task for user; raise UserNotFoundException if user is absent."""

    async def start_task(self, task_id: str, started_at: datetime) -> TaskResult:
        """Set started_at only if the task has not been started (single conditional update).

        Raises TaskNotFoundException if the row is gone, InvalidTransitionException
        if it is no longer in the not-started state.
        """

    async def finish_task(self, task_id: str, done_at: datetime) -> TaskResult:
        """Set done, done_at and duration only if the task is running (single conditional update).

        Raises TaskNotFoundException if the row is gone, InvalidTransitionException
        if it is not running.
        """

    async def get_tasks_in_range(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[TaskResult]:
        """Return user's tasks created within [start, end], longest duration first."""


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by id or None."""

    async def get_by_passport(
        self, passport_serie: int, passport_number: int
    ) -> UserResult | None:
        """Return user with this passport or None."""

    async def get_users(
        self, limit: int, offset: int, filter: str
    ) -> list[UserResult]:
        """Return a page of users matching filter (substring, case-insensitive), ordered by id."""

    async def create_user(self, user: NewUser) -> UserResult:
        """Insert user; raise UserAlreadyExistsException on duplicate passport."""

    async def update_user(self, patch: UserPatch) -> UserResult:
        """Apply patch assignments; raise UserNotFoundException if no row matched."""

    async def remove_user(self, user_id: str) -> None:
        """Delete user (and their tasks); raise UserNotFoundException if absent."""
