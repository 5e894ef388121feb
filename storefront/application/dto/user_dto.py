"""
User DTO
========

Pydantic models for user API requests and responses.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from storefront.domain.models.user import User


class UserCreateRequest(BaseModel):
    """DTO for creating a user."""
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address, unique across users")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Joana", "email": "j@example.com"}
        }
    )

    def to_entity(self) -> User:
        return User(name=self.name, email=self.email)


class UserUpdateRequest(BaseModel):
    """
    DTO for updating a user.

    On PUT, fields left null keep their current value. On PATCH, only the
    fields actually sent are applied.
    """
    name: Optional[str] = Field(None, description="New display name")
    email: Optional[str] = Field(None, description="New email address")


class UserResponse(BaseModel):
    """DTO for user data."""
    id: int
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, email=user.email)
