"""User ORM model. Passport series + number is unique."""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from time_tracker.infrastructure.persistence.database import Base
from time_tracker.infrastructure.persistence.models.mixins import (
    TimestampMixin,
    UuidMixin,
)


class User(UuidMixin, TimestampMixin, Base):
    """User model. Table: app_user."""

    __tablename__ = "app_user"

    name: Mapped[str] = mapped_column(String(255), nullable=False, default="", server_default="")
    surname: Mapped[str] = mapped_column(String(255), nullable=False, default="", server_default="")
    patronymic: Mapped[str] = mapped_column(String(255), nullable=False, default="", server_default="")
    address: Mapped[str] = mapped_column(String(500), nullable=False, default="", server_default="")
    passport_serie: Mapped[int] = mapped_column(Integer, nullable=False)
    passport_number: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("passport_serie", "passport_number", name="uq_user_passport"),
    )
