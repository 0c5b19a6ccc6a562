"""Task operations: create, get, start, finish, range query (delegate to ITaskRepository)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from time_tracker.application.dtos.task import TaskResult
from time_tracker.application.interfaces.repositories import ITaskRepository
from time_tracker.application.services.range_query_planner import plan_range_query
from time_tracker.application.services.validation import is_valid_uuid
from time_tracker.domain.entities.task import TaskEntity, state_from_columns
from time_tracker.domain.exceptions import InvalidUUIDException, ValidationException
from time_tracker.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


def _to_entity(task: TaskResult) -> TaskEntity:
    """Build the lifecycle entity from a task read-model."""
    return TaskEntity(
        id=task.id,
        user_id=task.user_id,
        title=task.title,
        description=task.description,
        created_at=task.created_at,
        state=state_from_columns(
            started_at=task.started_at,
            done=task.done,
            done_at=task.done_at,
            duration=task.duration,
        ),
    )


class TaskService:
    """Task lifecycle (start/finish with duration accounting) and range queries.

    Start and finish read the task, check the transition on the entity, then
    ask storage for a conditional update. The two calls are not wrapped in a
    transaction of their own: a concurrent delete or finish between them
    surfaces as TaskNotFoundException or InvalidTransitionException from
    storage. Callers retry; this service does not.
    """

    def __init__(
        self,
        task_repo: ITaskRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.task_repo = task_repo
        self.clock = clock

    @staticmethod
    def _require_uuid(value: str, field: str) -> None:
        if not is_valid_uuid(value):
            raise InvalidUUIDException(value, field=field)

    async def create_task(
        self, user_id: str, title: str, description: str = ""
    ) -> TaskResult:
        """Create a not-started task owned by user_id."""
        self._require_uuid(user_id, "user_id")
        if not title or not title.strip():
            raise ValidationException("Task title is required", field="title")
        logger.debug("Creating task for user %s", user_id)
        return await self.task_repo.create_task(
            user_id=user_id, title=title.strip(), description=description or ""
        )

    async def get_task(self, task_id: str) -> TaskResult:
        """Return task by id; raise TaskNotFoundException if absent."""
        self._require_uuid(task_id, "task_id")
        return await self.task_repo.find_task(task_id)

    async def start_task(self, task_id: str) -> TaskResult:
        """Record now as the task's start time.

        Already-running tasks are returned unchanged. Finished tasks cannot be
        restarted (InvalidTransitionException).
        """
        self._require_uuid(task_id, "task_id")
        logger.debug("Checking task %s exists before start", task_id)
        current = await self.task_repo.find_task(task_id)
        entity = _to_entity(current)
        now = self.clock()
        if not entity.start(now):
            logger.info("Task %s already running since %s", task_id, current.started_at)
            return current
        task = await self.task_repo.start_task(task_id, now)
        logger.info("Task %s started at %s", task_id, now.isoformat())
        return task

    async def finish_task(self, task_id: str) -> TaskResult:
        """Finish a running task now; storage persists done, done_at and duration (hours)."""
        self._require_uuid(task_id, "task_id")
        logger.debug("Checking task %s exists before finish", task_id)
        current = await self.task_repo.find_task(task_id)
        entity = _to_entity(current)
        now = self.clock()
        finished = entity.finish(now)
        task = await self.task_repo.finish_task(task_id, now)
        logger.info(
            "Task %s finished at %s after %.4f hours",
            task_id,
            now.isoformat(),
            finished.duration,
        )
        return task

    async def get_tasks_in_range(
        self, user_id: str, start_date: str, end_date: str
    ) -> list[TaskResult]:
        """Return user's tasks created within [start_date, end_date] (RFC3339).

        All validation happens before storage is queried. An empty list is a
        normal result.
        """
        date_range = plan_range_query(user_id, start_date, end_date)
        logger.debug(
            "Fetching tasks for user %s between %s and %s",
            user_id,
            date_range.start.isoformat(),
            date_range.end.isoformat(),
        )
        return await self.task_repo.get_tasks_in_range(
            user_id, date_range.start, date_range.end
        )
