"""Pydantic DTOs for authentication and user administration."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.application.schemas._base import PartialUpdate
from app.domain.entities import UserRole


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserCreate(BaseModel):
    """Schema for creating a local account. The password is hashed before storage."""

    username: str = Field(..., min_length=3, max_length=100, examples=["editor1"])
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=8, max_length=256)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    profile_image_url: str | None = None
    role: UserRole = UserRole.USER
    is_active: bool = True


class UserUpdate(PartialUpdate):
    non_nullable = frozenset({"username", "email", "password", "role", "is_active"})

    username: str | None = Field(None, min_length=3, max_length=100)
    email: str | None = Field(None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str | None = Field(None, min_length=8, max_length=256)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    profile_image_url: str | None = None
    role: UserRole | None = None
    is_active: bool | None = None


class UserResponse(BaseModel):
    """Public view of a user — never includes the password hash."""

    id: str
    username: str
    email: str
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    role: UserRole
    is_active: bool
    last_login_at: datetime | None
    created_at: datetime

    model_config = {"from_attributes": True}
