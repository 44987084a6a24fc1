"""Pydantic DTOs for users. Password hashes never leave the service."""

from pydantic import BaseModel, Field

from commerce_api.domain.entities import Role


class UserCreate(BaseModel):
    email: str = Field(..., max_length=255, examples=["jane@example.com"])
    password: str = Field(..., max_length=72)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    role: Role = Role.CLIENT


class UserResponse(BaseModel):
    id: str
    email: str
    first_name: str | None
    last_name: str | None
    role: Role
    role_with_prefix: str

    model_config = {"from_attributes": True}
