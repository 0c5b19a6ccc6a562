"""Base repository: generic get/create and storage error translation."""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic, ParamSpec, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from time_tracker.domain.exceptions import StorageException, TimeTrackerException
from time_tracker.infrastructure.persistence.database import Base

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")
ModelType = TypeVar("ModelType", bound=Base)


def translate_storage_errors(
    operation: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Wrap driver errors as StorageException(operation) so they never leak past the repository.

    Domain exceptions raised inside the method pass through unchanged.
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await func(*args, **kwargs)
            except TimeTrackerException:
                raise
            except SQLAlchemyError as e:
                logger.error(
                    "Storage operation %s failed: %s", operation, e.__class__.__name__
                )
                raise StorageException(operation, e.__class__.__name__) from e

        return wrapper

    return decorator


class BaseRepository(Generic[ModelType]):
    """Base repository with primary-key lookup and create.

    Subclasses add domain-specific queries and map ORM rows to application DTOs.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _get(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def _create(self, obj: ModelType) -> ModelType:
        """Persist a new record and reload server defaults."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj
