"""User operations: create via identity lookup, list, get, partial update, remove."""

from __future__ import annotations

import logging
from typing import Any

from time_tracker.application.dtos.user import NewUser, UserResult, UserUpdate
from time_tracker.application.interfaces.repositories import IUserRepository
from time_tracker.application.interfaces.services import IIdentityProvider
from time_tracker.application.services.pagination import paginate
from time_tracker.application.services.user_patch_builder import build_user_patch
from time_tracker.application.services.validation import is_valid_uuid
from time_tracker.domain.exceptions import (
    InvalidUUIDException,
    UserAlreadyExistsException,
    UserNotFoundException,
    ValidationException,
)
from time_tracker.domain.value_objects.core import Passport

logger = logging.getLogger(__name__)


class UserService:
    """Create users from a passport (enriched by the identity provider) and manage them."""

    def __init__(
        self,
        user_repo: IUserRepository,
        identity_provider: IIdentityProvider | None = None,
    ) -> None:
        self.user_repo = user_repo
        self.identity_provider = identity_provider

    @staticmethod
    def _require_uuid(user_id: str) -> None:
        if not is_valid_uuid(user_id):
            raise InvalidUUIDException(user_id, field="user_id")

    async def create_user(self, passport_number: str) -> UserResult:
        """Create a user from "SSSS NNNNNN".

        Duplicate passports are rejected before the external lookup; a
        duplicate inserted concurrently is still rejected by storage.
        """
        try:
            passport = Passport.parse(passport_number)
        except ValueError as e:
            raise ValidationException(str(e), field="passportNumber") from e
        existing = await self.user_repo.get_by_passport(passport.serie, passport.number)
        if existing:
            raise UserAlreadyExistsException(passport.serie, passport.number)
        if self.identity_provider is None:
            raise RuntimeError("UserService.create_user requires an identity provider")
        logger.debug("Resolving passport %s via identity provider", passport)
        info = await self.identity_provider.get_user_info(passport.serie, passport.number)
        user = await self.user_repo.create_user(
            NewUser(
                passport_serie=passport.serie,
                passport_number=passport.number,
                info=info,
            )
        )
        logger.info("User %s created", user.id)
        return user

    async def list_users(self, page: Any = None, filter: str | None = None) -> list[UserResult]:
        """Return one page (10 users) matching filter; bad page values mean page 1."""
        request = paginate(page, filter)
        logger.debug(
            "Listing users page=%d offset=%d filter=%r",
            request.page,
            request.offset,
            request.filter,
        )
        return await self.user_repo.get_users(
            limit=request.limit, offset=request.offset, filter=request.filter
        )

    async def get_user(self, user_id: str) -> UserResult:
        self._require_uuid(user_id)
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundException(user_id)
        return user

    async def update_user(self, user_id: str, update: UserUpdate) -> UserResult:
        """Apply only the fields set in update. Raises EmptyPatchException if none are set."""
        self._require_uuid(user_id)
        patch = build_user_patch(user_id, update)
        logger.debug(
            "Patching user %s fields=%s",
            user_id,
            [user_field.value for user_field in patch.fields],
        )
        return await self.user_repo.update_user(patch)

    async def remove_user(self, user_id: str) -> None:
        """Delete user and their tasks; raise UserNotFoundException if absent."""
        self._require_uuid(user_id)
        await self.user_repo.remove_user(user_id)
        logger.info("User %s removed", user_id)
