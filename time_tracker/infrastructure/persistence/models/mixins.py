"""SQLAlchemy mixins for common model patterns (DRY).

Provides: UuidMixin, CreatedAtMixin, TimestampMixin.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from time_tracker.shared.utils.generators import generate_uuid


class UuidMixin:
    """Mixin for models keyed by a UUID string assigned on insert."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String(36), primary_key=True, default=generate_uuid)


class CreatedAtMixin:
    """Mixin for an immutable created_at (server default, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )


class TimestampMixin(CreatedAtMixin):
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )
