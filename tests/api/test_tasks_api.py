"""Task endpoints: creation, start/finish lifecycle and range queries."""

from httpx import AsyncClient

from tests.fakes import FakeBackend

MISSING_ID = "0b6c9d1e-8f3a-4c2b-9d7e-1a2b3c4d5e6f"


async def _create_task(client: AsyncClient, user_id: str, title: str = "Write report") -> dict:
    response = await client.post(f"/api/v1/users/{user_id}/tasks", json={"title": title})
    assert response.status_code == 201
    return response.json()


async def test_create_task(client: AsyncClient, backend: FakeBackend) -> None:
    user = backend.users.add()
    task = await _create_task(client, user.id)
    assert task["user_id"] == user.id
    assert task["status"] == "not_started"
    assert task["done"] is False
    assert task["duration"] is None


async def test_create_task_empty_title_returns_422(
    client: AsyncClient, backend: FakeBackend
) -> None:
    user = backend.users.add()
    response = await client.post(f"/api/v1/users/{user.id}/tasks", json={"title": ""})
    assert response.status_code == 422


async def test_create_task_for_missing_user_returns_404(client: AsyncClient) -> None:
    response = await client.post(f"/api/v1/users/{MISSING_ID}/tasks", json={"title": "x"})
    assert response.status_code == 404


async def test_start_and_finish(client: AsyncClient, backend: FakeBackend) -> None:
    """Start at 09:00, finish at 11:30: duration 2.5 hours."""
    user = backend.users.add()
    task = await _create_task(client, user.id)

    started = await client.post(f"/api/v1/tasks/{task['id']}/start")
    assert started.status_code == 200
    assert started.json()["status"] == "running"

    backend.clock.advance(hours=2, minutes=30)
    finished = await client.post(f"/api/v1/tasks/{task['id']}/finish")
    assert finished.status_code == 200
    data = finished.json()
    assert data["status"] == "finished"
    assert data["done"] is True
    assert data["duration"] == 2.5

    fetched = await client.get(f"/api/v1/tasks/{task['id']}")
    assert fetched.json()["duration"] == 2.5


async def test_start_twice_keeps_first_start(client: AsyncClient, backend: FakeBackend) -> None:
    user = backend.users.add()
    task = await _create_task(client, user.id)
    first = await client.post(f"/api/v1/tasks/{task['id']}/start")
    backend.clock.advance(minutes=5)
    second = await client.post(f"/api/v1/tasks/{task['id']}/start")
    assert second.status_code == 200
    assert second.json()["started_at"] == first.json()["started_at"]


async def test_finish_not_started_returns_409(client: AsyncClient, backend: FakeBackend) -> None:
    user = backend.users.add()
    task = await _create_task(client, user.id)
    response = await client.post(f"/api/v1/tasks/{task['id']}/finish")
    assert response.status_code == 409
    body = response.json()
    assert body["error"] == "INVALID_TRANSITION"
    assert body["details"]["state"] == "not_started"


async def test_restart_finished_returns_409(client: AsyncClient, backend: FakeBackend) -> None:
    user = backend.users.add()
    task = await _create_task(client, user.id)
    await client.post(f"/api/v1/tasks/{task['id']}/start")
    await client.post(f"/api/v1/tasks/{task['id']}/finish")
    response = await client.post(f"/api/v1/tasks/{task['id']}/start")
    assert response.status_code == 409


async def test_unknown_task_returns_404(client: AsyncClient) -> None:
    for path in (f"/api/v1/tasks/{MISSING_ID}/start", f"/api/v1/tasks/{MISSING_ID}/finish"):
        response = await client.post(path)
        assert response.status_code == 404


async def test_malformed_task_id_returns_400(client: AsyncClient) -> None:
    response = await client.post("/api/v1/tasks/42/start")
    assert response.status_code == 400
    assert response.json()["details"]["field"] == "task_id"


async def test_range_query_orders_by_duration(
    client: AsyncClient, backend: FakeBackend
) -> None:
    user = backend.users.add()
    short = await _create_task(client, user.id, "short")
    long = await _create_task(client, user.id, "long")
    await client.post(f"/api/v1/tasks/{short['id']}/start")
    await client.post(f"/api/v1/tasks/{long['id']}/start")
    backend.clock.advance(minutes=30)
    await client.post(f"/api/v1/tasks/{short['id']}/finish")
    backend.clock.advance(hours=1)
    await client.post(f"/api/v1/tasks/{long['id']}/finish")

    response = await client.get(
        f"/api/v1/users/{user.id}/tasks",
        params={"start_date": "2024-01-01T00:00:00Z", "end_date": "2024-01-31T23:59:59Z"},
    )
    assert response.status_code == 200
    assert [t["title"] for t in response.json()] == ["long", "short"]


async def test_range_query_missing_param_returns_422(
    client: AsyncClient, backend: FakeBackend
) -> None:
    user = backend.users.add()
    response = await client.get(
        f"/api/v1/users/{user.id}/tasks", params={"start_date": "2024-01-01T00:00:00Z"}
    )
    assert response.status_code == 422


async def test_range_query_bad_date_returns_400(
    client: AsyncClient, backend: FakeBackend
) -> None:
    user = backend.users.add()
    response = await client.get(
        f"/api/v1/users/{user.id}/tasks",
        params={"start_date": "01.01.2024", "end_date": "2024-01-31T00:00:00Z"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_DATE"


async def test_range_query_inverted_returns_400(
    client: AsyncClient, backend: FakeBackend
) -> None:
    user = backend.users.add()
    response = await client.get(
        f"/api/v1/users/{user.id}/tasks",
        params={"start_date": "2024-02-01T00:00:00Z", "end_date": "2024-01-01T00:00:00Z"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_DATE_RANGE"
