"""Unit tests for application settings configuration."""

from pathlib import Path

from app.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_memory_storage_is_the_default():
    settings = Settings(_env_file=None)
    assert settings.uses_database is False


def test_database_storage_is_opt_in():
    settings = Settings(_env_file=None, storage_backend=" Database ")
    assert settings.uses_database is True


def test_chatbot_defaults():
    settings = Settings(_env_file=None)
    assert settings.chatbot_daily_limit == 5
    assert settings.chatbot_max_tokens == 300
    assert settings.chatbot_temperature == 0.7


def test_relative_seed_file_resolves_against_backend_dir():
    backend_dir = Path(__file__).resolve().parents[2]

    relative = Settings(_env_file=None, seed_file="data/seed/catalog.yaml")
    absolute = Settings(_env_file=None, seed_file=str(backend_dir / "elsewhere.yaml"))

    assert relative.seed_path == backend_dir / "data" / "seed" / "catalog.yaml"
    assert absolute.seed_path == backend_dir / "elsewhere.yaml"
