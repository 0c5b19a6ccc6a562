"""User API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    """Request body for creating a user from a passport ("1234 567890")."""

    model_config = ConfigDict(populate_by_name=True)

    passport_number: str = Field(
        ...,
        alias="passportNumber",
        min_length=3,
        max_length=64,
        examples=["1234 567890"],
    )


class UserUpdate(BaseModel):
    """Request body for a partial user update; omitted or empty fields are left unchanged."""

    name: str | None = Field(default=None, max_length=255)
    surname: str | None = Field(default=None, max_length=255)
    patronymic: str | None = Field(default=None, max_length=255)
    address: str | None = Field(default=None, max_length=500)


class UserResponse(BaseModel):
    """User response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    surname: str
    patronymic: str
    address: str
    passport_serie: int
    passport_number: int
