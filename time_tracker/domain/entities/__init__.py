"""Domain entities."""

from time_tracker.domain.entities.task import (
    Finished,
    NotStarted,
    Running,
    TaskEntity,
    TaskState,
    hours_between,
    state_from_columns,
)

__all__ = [
    "Finished",
    "NotStarted",
    "Running",
    "TaskEntity",
    "TaskState",
    "hours_between",
    "state_from_columns",
]
