"""Task domain entity and its explicit lifecycle state.

A task is NotStarted, Running (since started_at) or Finished (started_at,
done_at, duration in hours). Persistence keeps nullable columns; from_columns
converts them and rejects combinations that match no state.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from time_tracker.core.constants import SECONDS_PER_HOUR
from time_tracker.domain.enums import TaskStatus
from time_tracker.domain.exceptions import InvalidTransitionException


def hours_between(start: datetime, end: datetime) -> float:
    """Return (end - start) in fractional hours."""
    return (end - start).total_seconds() / SECONDS_PER_HOUR


@dataclass(frozen=True)
class NotStarted:
    """Task exists but has not been started."""

    status: TaskStatus = TaskStatus.NOT_STARTED


@dataclass(frozen=True)
class Running:
    """Task started at started_at and not yet finished."""

    started_at: datetime
    status: TaskStatus = TaskStatus.RUNNING


@dataclass(frozen=True)
class Finished:
    """Task finished at done_at; duration is hours since started_at."""

    started_at: datetime
    done_at: datetime
    duration: float
    status: TaskStatus = TaskStatus.FINISHED

    def __post_init__(self) -> None:
        if self.done_at < self.started_at:
            raise ValueError("done_at must not be earlier than started_at")


TaskState = NotStarted | Running | Finished


def state_from_columns(
    started_at: datetime | None,
    done: bool,
    done_at: datetime | None,
    duration: float | None,
) -> TaskState:
    """Build the explicit state from persisted nullable columns.

    Raises:
        ValueError: If the combination is not a legal lifecycle state
            (e.g. done without done_at, or done_at without started_at).
    """
    if (done_at is None) != (duration is None):
        raise ValueError("done_at and duration must be both set or both empty")
    if done:
        if started_at is None or done_at is None or duration is None:
            raise ValueError("finished task requires started_at, done_at and duration")
        return Finished(started_at=started_at, done_at=done_at, duration=duration)
    if done_at is not None:
        raise ValueError("task with done_at must be marked done")
    if started_at is not None:
        return Running(started_at=started_at)
    return NotStarted()


@dataclass
class TaskEntity:
    """Task with its lifecycle rules (independent of persistence)."""

    id: str
    user_id: str
    title: str
    description: str
    created_at: datetime
    state: TaskState

    @property
    def status(self) -> TaskStatus:
        return self.state.status

    def start(self, now: datetime) -> bool:
        """Start the task.

        NotStarted moves to Running(now). A Running task is left as is
        (idempotent; the original start time is kept).

        Returns:
            True if the state changed, False if the task was already running.

        Raises:
            InvalidTransitionException: If the task is finished.
        """
        if isinstance(self.state, Finished):
            raise InvalidTransitionException(self.id, self.status.value, "start")
        if isinstance(self.state, Running):
            return False
        self.state = Running(started_at=now)
        return True

    def finish(self, now: datetime) -> Finished:
        """Finish a running task at now and compute its duration in hours.

        Raises:
            InvalidTransitionException: If the task was never started or is
                already finished.
        """
        if not isinstance(self.state, Running):
            raise InvalidTransitionException(self.id, self.status.value, "finish")
        started_at = self.state.started_at
        finished = Finished(
            started_at=started_at,
            done_at=now,
            duration=hours_between(started_at, now),
        )
        self.state = finished
        return finished
