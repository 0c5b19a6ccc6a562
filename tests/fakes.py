"""In-memory fakes for repositories, the identity provider and the clock.

They follow the repository contracts in time_tracker.application.interfaces,
including the conditional start/finish updates, so services and routes can be
tested without Postgres or the people-info API.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import UTC, datetime, timedelta

from time_tracker.application.dtos.task import TaskResult
from time_tracker.application.dtos.user import NewUser, UserInfo, UserPatch, UserResult
from time_tracker.domain.entities.task import hours_between
from time_tracker.domain.enums import TaskStatus
from time_tracker.domain.exceptions import (
    InvalidTransitionException,
    TaskNotFoundException,
    UserAlreadyExistsException,
    UserNotFoundException,
)
from time_tracker.shared.utils.generators import generate_uuid


class FakeClock:
    """Deterministic clock; call it to read the time, advance() to move it."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime(2024, 1, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


class InMemoryUserRepository:
    """IUserRepository backed by a dict keyed by user id."""

    def __init__(self) -> None:
        self.users: dict[str, UserResult] = {}

    def add(self, serie: int = 1234, number: int = 567890, **info: str) -> UserResult:
        """Insert a user directly (test setup helper)."""
        user = UserResult(
            id=generate_uuid(),
            name=info.get("name", ""),
            surname=info.get("surname", ""),
            patronymic=info.get("patronymic", ""),
            address=info.get("address", ""),
            passport_serie=serie,
            passport_number=number,
        )
        self.users[user.id] = user
        return user

    async def get_by_id(self, user_id: str) -> UserResult | None:
        return self.users.get(user_id)

    async def get_by_passport(
        self, passport_serie: int, passport_number: int
    ) -> UserResult | None:
        for user in self.users.values():
            if (user.passport_serie, user.passport_number) == (
                passport_serie,
                passport_number,
            ):
                return user
        return None

    async def get_users(self, limit: int, offset: int, filter: str) -> list[UserResult]:
        needle = filter.lower()

        def matches(u: UserResult) -> bool:
            haystack = (
                u.name,
                u.surname,
                u.patronymic,
                u.address,
                str(u.passport_serie),
                str(u.passport_number),
            )
            return any(needle in value.lower() for value in haystack)

        found = sorted((u for u in self.users.values() if matches(u)), key=lambda u: u.id)
        return found[offset : offset + limit]

    async def create_user(self, user: NewUser) -> UserResult:
        if await self.get_by_passport(user.passport_serie, user.passport_number):
            raise UserAlreadyExistsException(user.passport_serie, user.passport_number)
        return self.add(
            user.passport_serie,
            user.passport_number,
            name=user.info.name,
            surname=user.info.surname,
            patronymic=user.info.patronymic,
            address=user.info.address,
        )

    async def update_user(self, patch: UserPatch) -> UserResult:
        user = self.users.get(patch.user_id)
        if user is None:
            raise UserNotFoundException(patch.user_id)
        updated = replace(user, **patch.as_dict())
        self.users[user.id] = updated
        return updated

    async def remove_user(self, user_id: str) -> None:
        if self.users.pop(user_id, None) is None:
            raise UserNotFoundException(user_id)


class InMemoryTaskRepository:
    """ITaskRepository backed by a dict; start/finish only apply from the expected state."""

    def __init__(
        self,
        users: InMemoryUserRepository | None = None,
        clock: FakeClock | None = None,
    ) -> None:
        self.users = users or InMemoryUserRepository()
        self.clock = clock or FakeClock()
        self.tasks: dict[str, TaskResult] = {}
        self.start_calls = 0
        self.finish_calls = 0

    async def find_task(self, task_id: str) -> TaskResult:
        task = self.tasks.get(task_id)
        if task is None:
            raise TaskNotFoundException(task_id)
        return task

    async def create_task(self, user_id: str, title: str, description: str) -> TaskResult:
        if user_id not in self.users.users:
            raise UserNotFoundException(user_id)
        task = TaskResult(
            id=generate_uuid(),
            user_id=user_id,
            title=title,
            description=description,
            done=False,
            status=TaskStatus.NOT_STARTED,
            created_at=self.clock(),
        )
        self.tasks[task.id] = task
        return task

    async def start_task(self, task_id: str, started_at: datetime) -> TaskResult:
        self.start_calls += 1
        task = await self.find_task(task_id)
        if task.status is not TaskStatus.NOT_STARTED:
            raise InvalidTransitionException(task_id, task.status.value, "start")
        started = replace(task, started_at=started_at, status=TaskStatus.RUNNING)
        self.tasks[task_id] = started
        return started

    async def finish_task(self, task_id: str, done_at: datetime) -> TaskResult:
        self.finish_calls += 1
        task = await self.find_task(task_id)
        if task.status is not TaskStatus.RUNNING or task.started_at is None:
            raise InvalidTransitionException(task_id, task.status.value, "finish")
        finished = replace(
            task,
            done=True,
            done_at=done_at,
            duration=hours_between(task.started_at, done_at),
            status=TaskStatus.FINISHED,
        )
        self.tasks[task_id] = finished
        return finished

    async def get_tasks_in_range(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[TaskResult]:
        found = [
            t
            for t in self.tasks.values()
            if t.user_id == user_id and start <= t.created_at <= end
        ]
        return sorted(
            found,
            key=lambda t: (t.duration is None, -(t.duration or 0.0), t.created_at, t.id),
        )


class FakeIdentityProvider:
    """IIdentityProvider returning a fixed UserInfo (or raising error); records calls."""

    def __init__(
        self,
        info: UserInfo | None = None,
        error: Exception | None = None,
    ) -> None:
        self.info = info or UserInfo(
            name="Ivan", surname="Ivanov", patronymic="Ivanovich", address="Moscow"
        )
        self.error = error
        self.calls: list[tuple[int, int]] = []

    async def get_user_info(self, passport_serie: int, passport_number: int) -> UserInfo:
        self.calls.append((passport_serie, passport_number))
        if self.error is not None:
            raise self.error
        return self.info


@dataclass
class FakeBackend:
    """The fakes behind one API test client."""

    users: InMemoryUserRepository
    tasks: InMemoryTaskRepository
    identity: FakeIdentityProvider
    clock: FakeClock
