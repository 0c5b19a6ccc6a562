"""DTOs for task use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from time_tracker.domain.enums import TaskStatus


@dataclass(frozen=True)
class TaskResult:
    """Task read-model returned by repositories and services.

    done_at and duration are both None until the task is finished.
    """

    id: str
    user_id: str
    title: str
    description: str
    done: bool
    status: TaskStatus
    created_at: datetime
    started_at: datetime | None = None
    done_at: datetime | None = None
    duration: float | None = None
