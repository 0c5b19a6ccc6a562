"""Task API: lifecycle routes under /tasks and per-user routes under /users/{user_id}/tasks."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from time_tracker.api.v1.dependencies import get_task_service, get_task_service_for_read
from time_tracker.application.use_cases.tasks import TaskService
from time_tracker.core.limiter import limit_writes
from time_tracker.schemas.task import TaskCreateRequest, TaskResponse

router = APIRouter()
user_tasks_router = APIRouter()


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    task_svc: Annotated[TaskService, Depends(get_task_service_for_read)],
):
    task = await task_svc.get_task(task_id)
    return TaskResponse.model_validate(task)


@router.post("/{task_id}/start", response_model=TaskResponse)
@limit_writes
async def start_task(
    request: Request,
    task_id: str,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Start the task now. Starting a running task returns it unchanged."""
    task = await task_svc.start_task(task_id)
    return TaskResponse.model_validate(task)


@router.post("/{task_id}/finish", response_model=TaskResponse)
@limit_writes
async def finish_task(
    request: Request,
    task_id: str,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Finish a running task now and record its duration in hours."""
    task = await task_svc.finish_task(task_id)
    return TaskResponse.model_validate(task)


@user_tasks_router.post("/{user_id}/tasks", response_model=TaskResponse, status_code=201)
@limit_writes
async def create_task(
    request: Request,
    user_id: str,
    body: TaskCreateRequest,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    task = await task_svc.create_task(user_id, body.title, body.description)
    return TaskResponse.model_validate(task)


@user_tasks_router.get("/{user_id}/tasks", response_model=list[TaskResponse])
async def get_tasks_in_range(
    user_id: str,
    task_svc: Annotated[TaskService, Depends(get_task_service_for_read)],
    start_date: Annotated[str, Query(description="RFC3339, e.g. 2024-01-01T00:00:00Z")],
    end_date: Annotated[str, Query(description="RFC3339, e.g. 2024-02-01T00:00:00Z")],
):
    """User's tasks created between start_date and end_date, longest first."""
    tasks = await task_svc.get_tasks_in_range(user_id, start_date, end_date)
    return [TaskResponse.model_validate(t) for t in tasks]
