"""Unit tests for password hashing and the UserService."""

import pytest

from app.application.schemas import UserCreate, UserUpdate
from app.application.services import UserService
from app.domain.entities import UserRole
from app.domain.exceptions import DuplicateEntityError, SelfDeletionError
from app.infrastructure.security import PasswordHasher


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(iterations=1_000)


@pytest.fixture
def service(store, hasher) -> UserService:
    return UserService(store, hasher)


def _user(**overrides) -> UserCreate:
    values = {"username": "editor1", "email": "editor1@example.com", "password": "s3cret-pass"}
    values.update(overrides)
    return UserCreate(**values)


# ── PasswordHasher ──


def test_hash_is_salted_and_verifiable(hasher: PasswordHasher):
    first = hasher.hash("s3cret-pass")
    second = hasher.hash("s3cret-pass")

    assert first != second
    assert first.startswith("pbkdf2_sha256$1000$")
    assert hasher.verify("s3cret-pass", first)
    assert not hasher.verify("wrong", first)


def test_verify_rejects_malformed_hashes(hasher: PasswordHasher):
    assert not hasher.verify("x", "")
    assert not hasher.verify("x", "plain-text")
    assert not hasher.verify("x", "md5$1$zz$zz")


def test_verify_uses_iterations_from_hash():
    stored = PasswordHasher(iterations=500).hash("pw")
    assert PasswordHasher(iterations=2_000).verify("pw", stored)


# ── UserService ──


@pytest.mark.asyncio
async def test_create_user_hashes_password(service: UserService, hasher: PasswordHasher):
    user = await service.create_user(_user(role=UserRole.EDITOR))

    assert user.role is UserRole.EDITOR
    assert user.password_hash != "s3cret-pass"
    assert hasher.verify("s3cret-pass", user.password_hash)


@pytest.mark.asyncio
async def test_username_and_email_are_unique(service: UserService):
    await service.create_user(_user())

    with pytest.raises(DuplicateEntityError):
        await service.create_user(_user(email="other@example.com"))
    with pytest.raises(DuplicateEntityError):
        await service.create_user(_user(username="someone"))


@pytest.mark.asyncio
async def test_authenticate(service: UserService):
    await service.create_user(_user())

    user = await service.authenticate("editor1", "s3cret-pass")

    assert user is not None
    assert user.last_login_at is not None
    assert await service.authenticate("editor1", "wrong-pass") is None
    assert await service.authenticate("nobody", "s3cret-pass") is None


@pytest.mark.asyncio
async def test_inactive_user_cannot_authenticate(service: UserService):
    user = await service.create_user(_user())
    await service.update_user(user.id, UserUpdate(is_active=False))

    assert await service.authenticate("editor1", "s3cret-pass") is None


@pytest.mark.asyncio
async def test_update_password_rehashes(service: UserService):
    user = await service.create_user(_user())

    await service.update_user(user.id, UserUpdate(password="brand-new-pass"))

    assert await service.authenticate("editor1", "s3cret-pass") is None
    assert await service.authenticate("editor1", "brand-new-pass") is not None


@pytest.mark.asyncio
async def test_cannot_delete_self(service: UserService):
    admin = await service.create_user(_user(role=UserRole.ADMIN))
    other = await service.create_user(_user(username="other", email="other@example.com"))

    with pytest.raises(SelfDeletionError):
        await service.delete_user(admin.id, acting_user_id=admin.id)

    await service.delete_user(other.id, acting_user_id=admin.id)
    assert [u.username for u in await service.list_users()] == ["editor1"]


@pytest.mark.asyncio
async def test_ensure_admin(service: UserService):
    assert await service.ensure_admin("", "", "") is None

    admin = await service.ensure_admin("admin", "admin@example.com", "admin-pass")
    again = await service.ensure_admin("admin", "admin@example.com", "admin-pass")

    assert admin.role is UserRole.ADMIN
    assert again.id == admin.id
    assert len(await service.list_users()) == 1
