"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status

from app.config import get_settings
from app.application.interfaces import CatalogStore, ChatProvider
from app.application.services import (
    AttachmentService,
    BlogService,
    CatalogService,
    ChatContextAssembler,
    ChatQuotaTracker,
    ChatbotService,
    NavigationService,
    UserService,
)
from app.domain.entities import User, UserRole
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.database.repositories import build_sqlalchemy_store
from app.infrastructure.database.session import async_session_factory
from app.infrastructure.memory import build_memory_store
from app.infrastructure.openrouter import OpenRouterClient
from app.infrastructure.security import PasswordHasher
from app.infrastructure.storage.local_file_storage import LocalFileStorage

SESSION_USER_KEY = "user_id"


# ── Storage ─────────────────────────────────────────────────────────


@lru_cache
def get_memory_store() -> CatalogStore:
    """Process-wide in-memory store (used when STORAGE_BACKEND=memory)."""
    return build_memory_store()


@asynccontextmanager
async def open_catalog_store() -> AsyncIterator[CatalogStore]:
    """Yield the configured store; database sessions commit on success."""
    if not get_settings().uses_database:
        yield get_memory_store()
        return

    async with async_session_factory() as session:
        try:
            yield build_sqlalchemy_store(session)
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_catalog_store() -> AsyncGenerator[CatalogStore, None]:
    """FastAPI dependency — one store per request."""
    async with open_catalog_store() as store:
        yield store


# ── Services ────────────────────────────────────────────────────────


async def get_catalog_service(
    store: CatalogStore = Depends(get_catalog_store),
) -> AsyncGenerator[CatalogService, None]:
    yield CatalogService(store)


async def get_blog_service(
    store: CatalogStore = Depends(get_catalog_store),
) -> AsyncGenerator[BlogService, None]:
    yield BlogService(store)


async def get_navigation_service(
    store: CatalogStore = Depends(get_catalog_store),
) -> AsyncGenerator[NavigationService, None]:
    yield NavigationService(store)


async def get_attachment_service(
    store: CatalogStore = Depends(get_catalog_store),
) -> AsyncGenerator[AttachmentService, None]:
    """Provides an AttachmentService writing under the configured upload dir."""
    settings = get_settings()
    yield AttachmentService(
        store,
        LocalFileStorage(upload_dir=settings.upload_dir),
        max_upload_size_mb=settings.max_upload_size_mb,
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(iterations=get_settings().password_hash_iterations)


async def get_user_service(
    store: CatalogStore = Depends(get_catalog_store),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AsyncGenerator[UserService, None]:
    yield UserService(store, hasher)


def get_chat_provider() -> ChatProvider | None:
    """OpenRouter client, or ``None`` when no API key is configured."""
    settings = get_settings()
    api_key = settings.openrouter_api_key.strip()
    if not api_key:
        return None
    return OpenRouterClient(
        api_key=api_key,
        base_url=settings.openrouter_base_url,
        app_name=settings.openrouter_app_name,
    )


async def get_chatbot_service(
    store: CatalogStore = Depends(get_catalog_store),
    provider: ChatProvider | None = Depends(get_chat_provider),
) -> AsyncGenerator[ChatbotService, None]:
    """Provides a ChatbotService with quota tracking and catalog context."""
    settings = get_settings()
    yield ChatbotService(
        quota=ChatQuotaTracker(store.chat_sessions, daily_limit=settings.chatbot_daily_limit),
        context_assembler=ChatContextAssembler(CatalogService(store)),
        provider=provider,
        model=settings.chatbot_model,
        max_tokens=settings.chatbot_max_tokens,
        temperature=settings.chatbot_temperature,
    )


# ── Auth ────────────────────────────────────────────────────────────


async def get_current_user(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> User:
    """The signed-in, active user — 401 otherwise."""
    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    try:
        user = await service.get_user(user_id)
    except EntityNotFoundError:
        request.session.clear()
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Account is disabled")
    return user


def require_role(*roles: UserRole):
    """Build a dependency that admits only users holding one of ``roles``."""

    async def dependency(user: User = Depends(get_current_user)) -> User:
        if not user.has_role(*roles):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions"
            )
        return user

    return dependency


require_admin = require_role(UserRole.ADMIN)
require_editor = require_role(UserRole.ADMIN, UserRole.EDITOR)
