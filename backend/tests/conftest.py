"""Shared fixtures — a fresh in-memory store and the bundled sample catalog."""

from pathlib import Path

import pytest

from app.application.interfaces import CatalogStore
from app.infrastructure.memory import build_memory_store

SEED_FILE = Path(__file__).resolve().parents[1] / "data" / "seed" / "catalog.yaml"


@pytest.fixture
def store() -> CatalogStore:
    return build_memory_store()


@pytest.fixture
def seed_file() -> Path:
    return SEED_FILE
