"""Task repository: lifecycle transitions as conditional updates, range queries."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, func, literal, nulls_last, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from time_tracker.application.dtos.task import TaskResult
from time_tracker.core.constants import SECONDS_PER_HOUR
from time_tracker.domain.entities.task import state_from_columns
from time_tracker.domain.exceptions import (
    InvalidTransitionException,
    TaskNotFoundException,
    UserNotFoundException,
)
from time_tracker.infrastructure.persistence.models.task import Task
from time_tracker.infrastructure.persistence.models.user import User
from time_tracker.infrastructure.persistence.repositories.base import (
    BaseRepository,
    translate_storage_errors,
)
from time_tracker.shared.utils.datetime import ensure_utc


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO (status derived from the lifecycle columns)."""
    state = state_from_columns(
        started_at=t.started_at,
        done=t.done,
        done_at=t.done_at,
        duration=t.duration,
    )
    return TaskResult(
        id=t.id,
        user_id=t.user_id,
        title=t.title,
        description=t.description,
        done=t.done,
        status=state.status,
        created_at=ensure_utc(t.created_at),
        started_at=ensure_utc(t.started_at),
        done_at=ensure_utc(t.done_at),
        duration=t.duration,
    )


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def _transition_failed(self, task_id: str, action: str) -> None:
        """Explain why a conditional update matched no row: gone, or in another state."""
        task = await self._get(task_id)
        if task is None:
            raise TaskNotFoundException(task_id)
        raise InvalidTransitionException(task_id, _to_result(task).status.value, action)

    @translate_storage_errors("task.find")
    async def find_task(self, task_id: str) -> TaskResult:
        task = await self._get(task_id)
        if task is None:
            raise TaskNotFoundException(task_id)
        return _to_result(task)

    @translate_storage_errors("task.create")
    async def create_task(
        self, user_id: str, title: str, description: str
    ) -> TaskResult:
        owner = await self.db.execute(select(User.id).where(User.id == user_id))
        if owner.scalar_one_or_none() is None:
            raise UserNotFoundException(user_id)
        task = await self._create(
            Task(user_id=user_id, title=title, description=description)
        )
        return _to_result(task)

    @translate_storage_errors("task.start")
    async def start_task(self, task_id: str, started_at: datetime) -> TaskResult:
        """Set started_at only while the task is not started (start-if-not-started)."""
        stmt = (
            update(Task)
            .where(
                Task.id == task_id,
                Task.started_at.is_(None),
                Task.done.is_(False),
            )
            .values(started_at=started_at)
            .returning(Task)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        task = result.scalars().first()
        if task is None:
            await self._transition_failed(task_id, "start")
        return _to_result(task)

    @translate_storage_errors("task.finish")
    async def finish_task(self, task_id: str, done_at: datetime) -> TaskResult:
        """Mark done with duration in hours only while running (finish-if-running)."""
        done_at_param = literal(done_at, DateTime(timezone=True))
        stmt = (
            update(Task)
            .where(
                Task.id == task_id,
                Task.started_at.is_not(None),
                Task.done.is_(False),
            )
            .values(
                done=True,
                done_at=done_at_param,
                duration=func.extract("epoch", done_at_param - Task.started_at)
                / SECONDS_PER_HOUR,
            )
            .returning(Task)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        task = result.scalars().first()
        if task is None:
            await self._transition_failed(task_id, "finish")
        return _to_result(task)

    @translate_storage_errors("task.get_in_range")
    async def get_tasks_in_range(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[TaskResult]:
        """Tasks created within [start, end]; longest first, unfinished last, then oldest first."""
        stmt = (
            select(Task)
            .where(
                Task.user_id == user_id,
                Task.created_at >= start,
                Task.created_at <= end,
            )
            .order_by(nulls_last(Task.duration.desc()), Task.created_at, Task.id)
        )
        result = await self.db.execute(stmt)
        return [_to_result(t) for t in result.scalars().all()]
