"""User repository. Interface methods return application DTOs."""

from __future__ import annotations

from sqlalchemy import String, cast, delete, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from time_tracker.application.dtos.user import NewUser, UserPatch, UserResult
from time_tracker.domain.exceptions import (
    UserAlreadyExistsException,
    UserNotFoundException,
)
from time_tracker.infrastructure.persistence.models.user import User
from time_tracker.infrastructure.persistence.repositories.base import (
    BaseRepository,
    translate_storage_errors,
)


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(
        id=u.id,
        name=u.name,
        surname=u.surname,
        patronymic=u.patronymic,
        address=u.address,
        passport_serie=u.passport_serie,
        passport_number=u.passport_number,
    )


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class UserRepository(BaseRepository[User]):
    """User repository. Implements IUserRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    @translate_storage_errors("user.get_by_id")
    async def get_by_id(self, user_id: str) -> UserResult | None:
        user = await self._get(user_id)
        return _user_to_result(user) if user else None

    @translate_storage_errors("user.get_by_passport")
    async def get_by_passport(
        self, passport_serie: int, passport_number: int
    ) -> UserResult | None:
        result = await self.db.execute(
            select(User).where(
                User.passport_serie == passport_serie,
                User.passport_number == passport_number,
            )
        )
        user = result.scalar_one_or_none()
        return _user_to_result(user) if user else None

    @translate_storage_errors("user.get_users")
    async def get_users(
        self, limit: int, offset: int, filter: str
    ) -> list[UserResult]:
        """Page of users whose text fields or passport digits contain filter (ILIKE)."""
        pattern = f"%{_escape_like(filter)}%"
        stmt = (
            select(User)
            .where(
                or_(
                    User.name.ilike(pattern, escape="\\"),
                    User.surname.ilike(pattern, escape="\\"),
                    User.patronymic.ilike(pattern, escape="\\"),
                    User.address.ilike(pattern, escape="\\"),
                    cast(User.passport_serie, String).ilike(pattern, escape="\\"),
                    cast(User.passport_number, String).ilike(pattern, escape="\\"),
                )
            )
            .order_by(User.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(stmt)
        return [_user_to_result(u) for u in result.scalars().all()]

    @translate_storage_errors("user.create")
    async def create_user(self, user: NewUser) -> UserResult:
        """Create user; raise UserAlreadyExistsException on unique constraint violation."""
        obj = User(
            name=user.info.name,
            surname=user.info.surname,
            patronymic=user.info.patronymic,
            address=user.info.address,
            passport_serie=user.passport_serie,
            passport_number=user.passport_number,
        )
        try:
            async with self.db.begin_nested():
                created = await self._create(obj)
        except IntegrityError as e:
            raise UserAlreadyExistsException(
                user.passport_serie, user.passport_number
            ) from e
        return _user_to_result(created)

    @translate_storage_errors("user.update")
    async def update_user(self, patch: UserPatch) -> UserResult:
        """Apply only the patch columns (single UPDATE ... RETURNING)."""
        stmt = (
            update(User)
            .where(User.id == patch.user_id)
            .values(**patch.as_dict())
            .returning(User)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        user = result.scalars().first()
        if user is None:
            raise UserNotFoundException(patch.user_id)
        return _user_to_result(user)

    @translate_storage_errors("user.remove")
    async def remove_user(self, user_id: str) -> None:
        result = await self.db.execute(delete(User).where(User.id == user_id))
        if result.rowcount == 0:
            raise UserNotFoundException(user_id)
