"""User service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from time_tracker.api.v1.dependencies.identity import get_identity_provider
from time_tracker.application.use_cases.users import UserService
from time_tracker.infrastructure.external.identity import PeopleInfoClient
from time_tracker.infrastructure.persistence.database import get_db, get_db_transactional
from time_tracker.infrastructure.persistence.repositories import UserRepository


async def get_user_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    identity_provider: Annotated[PeopleInfoClient, Depends(get_identity_provider)],
) -> UserService:
    """User service for create/update/delete (transactional, with people-info lookup)."""
    return UserService(UserRepository(db), identity_provider=identity_provider)


async def get_user_service_for_read(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserService:
    """User service for list/get (read-only session)."""
    return UserService(UserRepository(db))
