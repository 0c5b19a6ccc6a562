"""Pytest configuration and fixtures for time-tracker.

HTTP tests use time_tracker.main:app with the service dependencies overridden
by in-memory fakes (tests.fakes), so they need neither Postgres nor the
people-info API. Repository tests use the db_session fixture and are marked
requires_db.
"""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from time_tracker.api.v1.dependencies import (
    get_task_service,
    get_task_service_for_read,
    get_user_service,
    get_user_service_for_read,
)
from time_tracker.application.use_cases.tasks import TaskService
from time_tracker.application.use_cases.users import UserService
from time_tracker.core.limiter import limiter
from time_tracker.infrastructure.persistence import database
from time_tracker.main import app
from tests.fakes import (
    FakeBackend,
    FakeClock,
    FakeIdentityProvider,
    InMemoryTaskRepository,
    InMemoryUserRepository,
)

# Rate limits are per client address; every ASGI test request shares one.
limiter.enabled = False


@pytest.fixture
def backend() -> FakeBackend:
    clock = FakeClock()
    users = InMemoryUserRepository()
    return FakeBackend(
        users=users,
        tasks=InMemoryTaskRepository(users=users, clock=clock),
        identity=FakeIdentityProvider(),
        clock=clock,
    )


@pytest.fixture
async def client(backend: FakeBackend) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI) with fake services."""

    def task_service() -> TaskService:
        return TaskService(backend.tasks, clock=backend.clock)

    def user_service() -> UserService:
        return UserService(backend.users, identity_provider=backend.identity)

    app.dependency_overrides[get_task_service] = task_service
    app.dependency_overrides[get_task_service_for_read] = task_service
    app.dependency_overrides[get_user_service] = user_service
    app.dependency_overrides[get_user_service_for_read] = user_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL pointing at a migrated Postgres. Skips when it is not
    configured. Run without DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
    await database.dispose_engine()
