"""Application service (use case) for local accounts and sign-in."""

import logging
from datetime import datetime, timezone

from app.application.interfaces import CatalogStore
from app.application.schemas import UserCreate, UserUpdate
from app.application.services.lookups import ensure_unique
from app.domain.entities import User, UserRole
from app.domain.exceptions import EntityNotFoundError, SelfDeletionError
from app.infrastructure.security import PasswordHasher

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates user administration and password checks."""

    def __init__(self, store: CatalogStore, hasher: PasswordHasher):
        self._users = store.users
        self._hasher = hasher

    async def authenticate(self, username: str, password: str) -> User | None:
        """Return the user for valid credentials, ``None`` otherwise."""
        user = await self._users.find_one(username=username)
        if user is None or not user.is_active:
            return None
        if not self._hasher.verify(password, user.password_hash):
            logger.info("Failed sign-in for '%s'", username)
            return None
        return await self._users.update(user.id, {"last_login_at": datetime.now(timezone.utc)})

    async def list_users(self) -> list[User]:
        return await self._users.list(order_by="created_at")

    async def get_user(self, user_id: str) -> User:
        user = await self._users.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(self._users.entity_name, user_id)
        return user

    async def create_user(self, data: UserCreate) -> User:
        await ensure_unique(self._users, "username", data.username)
        await ensure_unique(self._users, "email", data.email)
        values = data.model_dump()
        password = values.pop("password")
        user = await self._users.create(
            User(password_hash=self._hasher.hash(password), **values)
        )
        logger.info("Created user '%s' with role %s", user.username, user.role.value)
        return user

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        changes = data.changes()
        for field in ("username", "email"):
            if field in changes:
                await ensure_unique(self._users, field, changes[field], exclude_id=user_id)
        if "password" in changes:
            changes["password_hash"] = self._hasher.hash(changes.pop("password"))
        return await self._users.update(user_id, changes)

    async def delete_user(self, user_id: str, acting_user_id: str) -> None:
        if user_id == acting_user_id:
            raise SelfDeletionError(user_id)
        await self._users.delete(user_id)

    async def ensure_admin(self, username: str, email: str, password: str) -> User | None:
        """Create the bootstrap administrator unless credentials are unset or it exists."""
        if not (username and email and password):
            logger.warning(
                "No bootstrap admin configured (ADMIN_USERNAME/ADMIN_EMAIL/ADMIN_PASSWORD)"
            )
            return None
        existing = await self._users.find_one(username=username)
        if existing is not None:
            return existing
        admin = await self._users.create(
            User(
                username=username,
                email=email,
                password_hash=self._hasher.hash(password),
                role=UserRole.ADMIN,
            )
        )
        logger.info("Created bootstrap admin '%s'", username)
        return admin
