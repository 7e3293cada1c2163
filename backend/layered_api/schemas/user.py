"""
Layered API — User Entity and DTOs
===================================

User is the simplest entity: its wire shape equals its domain shape, so the
request and response DTOs carry the same two fields as the entity.
"""

from pydantic import BaseModel, Field


class User(BaseModel):
    """Domain entity. Identity is `id`."""

    id: int = Field(description="Unique identifier for the user")
    name: str = Field(description="User's full name")

    model_config = {"from_attributes": True}


class CreateUserRequest(BaseModel):
    """Body of POST /api/users."""

    id: int
    name: str


class UpdateUserRequest(BaseModel):
    """Body of PUT /api/users/{id}. Full replace of the stored user."""

    id: int
    name: str


class UserResponse(BaseModel):
    """User as returned to clients."""

    id: int
    name: str
