"""Task ORM model. Lifecycle is stored as nullable columns (see domain.entities.task)."""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Index,
    String,
    Text,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from time_tracker.infrastructure.persistence.database import Base
from time_tracker.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    UuidMixin,
)


class Task(UuidMixin, CreatedAtMixin, Base):
    """Task owned by a user. Table: task."""

    __tablename__ = "task"

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    done: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )
    started_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    done_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    # Hours between started_at and done_at.
    duration: Mapped[float | None] = mapped_column(Float, nullable=True)

    __table_args__ = (
        Index("ix_task_user_created", "user_id", "created_at"),
        CheckConstraint(
            "(done_at IS NULL) = (duration IS NULL)", name="ck_task_done_at_duration"
        ),
        CheckConstraint(
            "done = (done_at IS NOT NULL)", name="ck_task_done_flag"
        ),
        CheckConstraint(
            "done_at IS NULL OR started_at IS NOT NULL", name="ck_task_started_before_done"
        ),
    )
