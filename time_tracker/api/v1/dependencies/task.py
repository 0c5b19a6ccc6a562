"""Task service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from time_tracker.application.use_cases.tasks import TaskService
from time_tracker.infrastructure.persistence.database import get_db, get_db_transactional
from time_tracker.infrastructure.persistence.repositories import TaskRepository


async def get_task_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskService:
    """Task service for create/start/finish (transactional)."""
    return TaskService(TaskRepository(db))


async def get_task_service_for_read(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskService:
    """Task service for get and range queries (read-only session)."""
    return TaskService(TaskRepository(db))
