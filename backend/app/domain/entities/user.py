"""Domain entity for back-office users."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    EDITOR = "editor"
    MODERATOR = "moderator"
    USER = "user"


@dataclass
class User:
    """A local account. ``password_hash`` must never leave the service layer."""

    username: str
    email: str
    password_hash: str
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    role: UserRole = UserRole.USER
    is_active: bool = True
    last_login_at: datetime | None = None
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def has_role(self, *roles: UserRole) -> bool:
        return self.role in roles
