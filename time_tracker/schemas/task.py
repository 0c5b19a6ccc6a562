"""Task API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from time_tracker.domain.enums import TaskStatus


class TaskCreateRequest(BaseModel):
    """Request body for creating a task for a user."""

    title: str = Field(..., min_length=1, max_length=500)
    description: str = Field(default="", max_length=10_000)


class TaskResponse(BaseModel):
    """Task response. done_at and duration (hours) are null until finished."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    description: str
    done: bool
    status: str
    created_at: datetime
    started_at: datetime | None = None
    done_at: datetime | None = None
    duration: float | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _status_to_str(cls, v: TaskStatus | str) -> str:
        """Accept TaskStatus from DTO; serialize to str for JSON."""
        return v.value if isinstance(v, TaskStatus) else v
