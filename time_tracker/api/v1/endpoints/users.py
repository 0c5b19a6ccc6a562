"""User API: thin routes delegating to UserService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from time_tracker.api.v1.dependencies import get_user_service, get_user_service_for_read
from time_tracker.application.dtos.user import UserUpdate as UserUpdateDTO
from time_tracker.application.use_cases.users import UserService
from time_tracker.core.limiter import limit_create_user, limit_writes
from time_tracker.schemas.common import MessageResponse
from time_tracker.schemas.user import UserCreateRequest, UserResponse, UserUpdate

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=201)
@limit_create_user
async def create_user(
    request: Request,
    body: UserCreateRequest,
    user_svc: Annotated[UserService, Depends(get_user_service)],
):
    """Create a user from a passport number; name/address come from the people-info API."""
    user = await user_svc.create_user(body.passport_number)
    return UserResponse.model_validate(user)


@router.get("", response_model=list[UserResponse])
async def list_users(
    user_svc: Annotated[UserService, Depends(get_user_service_for_read)],
    page: Annotated[str | None, Query(description="1-based page; invalid values mean 1")] = None,
    filter: Annotated[str | None, Query(description="Substring to match in any field")] = None,
):
    """List users, 10 per page, optionally filtered."""
    users = await user_svc.list_users(page=page, filter=filter)
    return [UserResponse.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    user_svc: Annotated[UserService, Depends(get_user_service_for_read)],
):
    user = await user_svc.get_user(user_id)
    return UserResponse.model_validate(user)


@router.patch("/{user_id}", response_model=UserResponse)
@limit_writes
async def update_user(
    request: Request,
    user_id: str,
    body: UserUpdate,
    user_svc: Annotated[UserService, Depends(get_user_service)],
):
    """Update only the fields present (and non-empty) in the body."""
    user = await user_svc.update_user(
        user_id,
        UserUpdateDTO(
            name=body.name,
            surname=body.surname,
            patronymic=body.patronymic,
            address=body.address,
        ),
    )
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", response_model=MessageResponse)
@limit_writes
async def delete_user(
    request: Request,
    user_id: str,
    user_svc: Annotated[UserService, Depends(get_user_service)],
):
    """Delete a user and their tasks."""
    await user_svc.remove_user(user_id)
    return MessageResponse(message="User removed successfully")
