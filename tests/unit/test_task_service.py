"""TaskService with the in-memory task repository and a fixed clock."""

from datetime import UTC, datetime

import pytest

from time_tracker.application.use_cases.tasks import TaskService
from time_tracker.domain.enums import TaskStatus
from time_tracker.domain.exceptions import (
    InvalidDateException,
    InvalidDateRangeException,
    InvalidTransitionException,
    InvalidUUIDException,
    TaskNotFoundException,
    UserNotFoundException,
    ValidationException,
)
from tests.fakes import FakeClock, InMemoryTaskRepository, InMemoryUserRepository

MISSING_ID = "0b6c9d1e-8f3a-4c2b-9d7e-1a2b3c4d5e6f"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 1, 9, 0, tzinfo=UTC))


@pytest.fixture
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def repo(users: InMemoryUserRepository, clock: FakeClock) -> InMemoryTaskRepository:
    return InMemoryTaskRepository(users=users, clock=clock)


@pytest.fixture
def service(repo: InMemoryTaskRepository, clock: FakeClock) -> TaskService:
    return TaskService(repo, clock=clock)


@pytest.fixture
def user_id(users: InMemoryUserRepository) -> str:
    return users.add().id


async def test_create_task_is_not_started(service: TaskService, user_id: str) -> None:
    task = await service.create_task(user_id, "  Write report  ", "Q1")
    assert task.title == "Write report"
    assert task.status is TaskStatus.NOT_STARTED
    assert task.started_at is None
    assert task.done is False


async def test_create_task_requires_title(service: TaskService, user_id: str) -> None:
    with pytest.raises(ValidationException):
        await service.create_task(user_id, "   ")


async def test_create_task_for_unknown_user(service: TaskService) -> None:
    with pytest.raises(UserNotFoundException):
        await service.create_task(MISSING_ID, "Write report")


async def test_start_then_finish_records_duration_in_hours(
    service: TaskService, clock: FakeClock, user_id: str
) -> None:
    """Started at 09:00, finished at 11:30: 2.5 hours."""
    task = await service.create_task(user_id, "Write report")
    started = await service.start_task(task.id)
    assert started.status is TaskStatus.RUNNING
    assert started.started_at == datetime(2024, 1, 1, 9, 0, tzinfo=UTC)

    clock.advance(hours=2, minutes=30)
    finished = await service.finish_task(task.id)
    assert finished.done is True
    assert finished.status is TaskStatus.FINISHED
    assert finished.done_at == datetime(2024, 1, 1, 11, 30, tzinfo=UTC)
    assert finished.duration == 2.5


async def test_start_running_task_is_idempotent(
    service: TaskService, repo: InMemoryTaskRepository, clock: FakeClock, user_id: str
) -> None:
    task = await service.create_task(user_id, "Write report")
    first = await service.start_task(task.id)
    clock.advance(minutes=10)
    second = await service.start_task(task.id)
    assert second.started_at == first.started_at
    assert repo.start_calls == 1


async def test_start_finished_task_is_rejected(
    service: TaskService, repo: InMemoryTaskRepository, user_id: str
) -> None:
    task = await service.create_task(user_id, "Write report")
    await service.start_task(task.id)
    await service.finish_task(task.id)
    with pytest.raises(InvalidTransitionException):
        await service.start_task(task.id)
    assert repo.start_calls == 1


async def test_finish_not_started_task_is_rejected_without_writing(
    service: TaskService, repo: InMemoryTaskRepository, user_id: str
) -> None:
    task = await service.create_task(user_id, "Write report")
    with pytest.raises(InvalidTransitionException):
        await service.finish_task(task.id)
    assert repo.finish_calls == 0


async def test_finish_twice_is_rejected(service: TaskService, user_id: str) -> None:
    task = await service.create_task(user_id, "Write report")
    await service.start_task(task.id)
    await service.finish_task(task.id)
    with pytest.raises(InvalidTransitionException):
        await service.finish_task(task.id)


async def test_unknown_task(service: TaskService) -> None:
    with pytest.raises(TaskNotFoundException):
        await service.start_task(MISSING_ID)
    with pytest.raises(TaskNotFoundException):
        await service.finish_task(MISSING_ID)
    with pytest.raises(TaskNotFoundException):
        await service.get_task(MISSING_ID)


async def test_malformed_task_id(service: TaskService) -> None:
    with pytest.raises(InvalidUUIDException) as exc_info:
        await service.start_task("not-a-uuid")
    assert exc_info.value.details["field"] == "task_id"


async def test_range_orders_longest_first_and_unfinished_last(
    service: TaskService, clock: FakeClock, user_id: str
) -> None:
    short = await service.create_task(user_id, "short")
    long = await service.create_task(user_id, "long")
    pending = await service.create_task(user_id, "pending")
    await service.start_task(short.id)
    await service.start_task(long.id)
    clock.advance(hours=1)
    await service.finish_task(short.id)
    clock.advance(hours=2)
    await service.finish_task(long.id)

    tasks = await service.get_tasks_in_range(
        user_id, "2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z"
    )
    assert [t.id for t in tasks] == [long.id, short.id, pending.id]
    assert tasks[0].duration == 3.0
    assert tasks[1].duration == 1.0
    assert tasks[2].duration is None


async def test_range_excludes_tasks_created_outside(
    service: TaskService, clock: FakeClock, user_id: str
) -> None:
    await service.create_task(user_id, "january")
    clock.advance(days=40)
    february = await service.create_task(user_id, "february")
    tasks = await service.get_tasks_in_range(
        user_id, "2024-02-01T00:00:00Z", "2024-03-01T00:00:00Z"
    )
    assert [t.id for t in tasks] == [february.id]


async def test_range_query_is_repeatable(
    service: TaskService, clock: FakeClock, user_id: str
) -> None:
    """Two identical queries over unchanged storage return the same sequence."""
    for title in ("a", "b", "c"):
        await service.create_task(user_id, title)
    finished = await service.create_task(user_id, "d")
    await service.start_task(finished.id)
    clock.advance(hours=1)
    await service.finish_task(finished.id)

    args = (user_id, "2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z")
    first = await service.get_tasks_in_range(*args)
    second = await service.get_tasks_in_range(*args)
    assert len(first) == 4
    assert first == second


async def test_range_empty_is_normal(service: TaskService, user_id: str) -> None:
    assert await service.get_tasks_in_range(
        user_id, "2030-01-01T00:00:00Z", "2030-01-02T00:00:00Z"
    ) == []


async def test_inverted_range_is_rejected(service: TaskService, user_id: str) -> None:
    with pytest.raises(InvalidDateRangeException):
        await service.get_tasks_in_range(
            user_id, "2024-02-01T00:00:00Z", "2024-01-01T00:00:00Z"
        )


async def test_range_with_bad_date(service: TaskService, user_id: str) -> None:
    with pytest.raises(InvalidDateException):
        await service.get_tasks_in_range(user_id, "2024-01-01", "2024-02-01T00:00:00Z")
