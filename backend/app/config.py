from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "AI Catalog Platform API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5000"]

    # Storage: "memory" (process-local, default) or "database" (SQLAlchemy)
    storage_backend: str = "memory"
    database_url: str = "sqlite:///./data/catalog.db"
    database_echo: bool = False

    # Seed data
    seed_sample_data: bool = True
    seed_file: str = "data/seed/catalog.yaml"

    # Sessions & auth
    session_secret: str = "change-me-in-production"
    session_max_age: int = 7 * 24 * 60 * 60   # one week, in seconds
    session_https_only: bool = False
    password_hash_iterations: int = 260_000
    admin_username: str = ""
    admin_email: str = ""
    admin_password: str = ""

    # OpenRouter configuration
    openrouter_api_key: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_app_name: str = "AI Catalog Platform"

    # Chatbot
    chatbot_model: str = "openai/gpt-4o"
    chatbot_daily_limit: int = 5
    chatbot_max_tokens: int = 300
    chatbot_temperature: float = 0.7

    # File upload & storage
    upload_dir: str = "uploads"
    max_upload_size_mb: int = 10

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine, SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore, outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_chatbot: str = "INFO"          # Chatbot orchestration & quota
    log_level_openrouter: str = "INFO"       # OpenRouter LLM client

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def uses_database(self) -> bool:
        return self.storage_backend.strip().lower() == "database"

    @property
    def seed_path(self) -> Path:
        """Seed file path; relative paths resolve against the backend directory."""
        path = Path(self.seed_file)
        return path if path.is_absolute() else _BACKEND_DIR / path


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
