"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from time_tracker.api.v1.dependencies.
"""

from fastapi import APIRouter

from time_tracker.api.v1.endpoints import health, tasks, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(tasks.user_tasks_router, prefix="/users", tags=["tasks"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
