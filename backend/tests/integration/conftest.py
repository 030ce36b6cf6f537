"""API test harness — the app wired to a fresh in-memory store per test."""

from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.application.interfaces import CatalogStore
from app.application.schemas import UserCreate
from app.application.services import AttachmentService, CatalogSeeder, UserService
from app.domain.entities import UserRole
from app.infrastructure.dependencies import (
    get_attachment_service,
    get_catalog_store,
    get_chat_provider,
    get_password_hasher,
)
from app.infrastructure.memory import build_memory_store
from app.infrastructure.security import PasswordHasher
from app.infrastructure.storage.local_file_storage import LocalFileStorage
from app.main import app

FAST_HASHER = PasswordHasher(iterations=1_000)

ACCOUNTS = {
    UserRole.ADMIN: ("admin", "admin-pass-1"),
    UserRole.EDITOR: ("editor", "editor-pass-1"),
    UserRole.USER: ("viewer", "viewer-pass-1"),
}


@pytest_asyncio.fixture
async def api_store(seed_file: Path, tmp_path: Path) -> AsyncIterator[CatalogStore]:
    """Seeded store with one account per role, installed as the app's storage."""
    store = build_memory_store()
    await CatalogSeeder(store).seed(seed_file)
    users = UserService(store, FAST_HASHER)
    for role, (username, password) in ACCOUNTS.items():
        await users.create_user(
            UserCreate(username=username, email=f"{username}@example.com", password=password, role=role)
        )

    async def _store():
        yield store

    async def _attachments():
        yield AttachmentService(
            store, LocalFileStorage(upload_dir=str(tmp_path)), max_upload_size_mb=1
        )

    app.dependency_overrides[get_catalog_store] = _store
    app.dependency_overrides[get_attachment_service] = _attachments
    app.dependency_overrides[get_password_hasher] = lambda: FAST_HASHER
    app.dependency_overrides[get_chat_provider] = lambda: None
    yield store
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(api_store: CatalogStore) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def login(client: AsyncClient) -> Callable[[UserRole], Awaitable[dict]]:
    """Sign the shared client in as the account holding ``role``."""

    async def _login(role: UserRole = UserRole.ADMIN) -> dict:
        username, password = ACCOUNTS[role]
        response = await client.post(
            "/api/v1/auth/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _login
