"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from app.config import get_settings
from app.application.services import CatalogSeeder, UserService
from app.infrastructure.database import create_tables, engine
from app.infrastructure.dependencies import get_password_hasher, open_catalog_store
from app.infrastructure.logging.log_config import setup_logging
from app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    prefix = "sqlite:///"
    if not database_url.startswith(prefix):
        return
    db_path = database_url[len(prefix):]
    if not db_path or db_path == ":memory:":
        return
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)


async def _bootstrap_store() -> None:
    """Load sample content and make sure the bootstrap admin exists."""
    settings = get_settings()

    async with open_catalog_store() as store:
        if settings.seed_sample_data:
            loaded = await CatalogSeeder(store).seed(settings.seed_path)
            logger.info("Seeded %d catalog records from %s", loaded, settings.seed_path)

        await UserService(store, get_password_hasher()).ensure_admin(
            username=settings.admin_username,
            email=settings.admin_email,
            password=settings.admin_password,
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables, seed content, prepare uploads."""
    settings = get_settings()
    setup_logging()

    # 1. Create database tables when the SQL backend is selected
    if settings.uses_database:
        _ensure_sqlite_directory(settings.database_url)
        await create_tables()
        logger.info("Storage backend: database")
    else:
        logger.info("Storage backend: memory (content is lost on restart)")

    # 2. Seed sample data and the bootstrap admin
    await _bootstrap_store()

    # 3. Ensure upload directory exists
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)

    yield

    # Shutdown
    if settings.uses_database:
        await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Signed cookie sessions for login
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        max_age=settings.session_max_age,
        https_only=settings.session_https_only,
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
