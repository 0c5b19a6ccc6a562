"""Shared API schemas."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement (e.g. after delete)."""

    status: str = Field(default="ok")
    message: str
