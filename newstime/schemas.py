"""Shared response schemas."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Schema for a mutation acknowledgement."""

    message: str


class CreatedResponse(MessageResponse):
    """Schema for a create acknowledgement."""

    id: int
