"""Loads the sample catalog from YAML into an empty (or partial) store."""

import dataclasses
import logging
from datetime import date, datetime, time, timezone
from pathlib import Path

import yaml

from app.application.interfaces import CatalogStore
from app.domain.entities import (
    BlogCategory,
    BlogPost,
    Category,
    Domain,
    NavigationItem,
    Product,
)

logger = logging.getLogger(__name__)

# YAML section → (store attribute, entity class), in parent-before-child order
_SECTIONS: tuple[tuple[str, str, type], ...] = (
    ("domains", "domains", Domain),
    ("categories", "categories", Category),
    ("products", "products", Product),
    ("blog_categories", "blog_categories", BlogCategory),
    ("blog_posts", "blog_posts", BlogPost),
    ("navigation_items", "navigation_items", NavigationItem),
)


class CatalogSeeder:
    """Idempotent seeding: records whose ``id`` already exists are skipped."""

    def __init__(self, store: CatalogStore):
        self._store = store

    async def seed(self, path: str | Path) -> int:
        """Insert every missing record from ``path`` and return how many were added."""
        path = Path(path)
        if not path.exists():
            logger.warning("Seed file not found: %s — skipping sample data", path)
            return 0

        data = self._load_yaml(path)
        if not data:
            return 0

        total = 0
        for section, attribute, entity_cls in _SECTIONS:
            repository = getattr(self._store, attribute)
            added = 0
            for entry in data.get(section) or []:
                if await repository.get_by_id(str(entry["id"])) is not None:
                    continue
                await repository.create(_build(entity_cls, entry))
                added += 1
            if added:
                logger.debug("Seeded %d %s", added, section)
            total += added

        logger.info("Seeded %d sample records from %s", total, path.name)
        return total

    def _load_yaml(self, path: Path) -> dict | None:
        """Load and parse a YAML file, returning None on error."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except Exception:
            logger.exception("Failed to parse YAML file: %s", path)
            return None


def _build(entity_cls: type, entry: dict):
    names = {f.name for f in dataclasses.fields(entity_cls)}
    values = {k: _coerce(v) for k, v in entry.items() if k in names}
    values["id"] = str(entry["id"])
    return entity_cls(**values)


def _coerce(value):
    """YAML dates become midnight UTC datetimes; naive datetimes are taken as UTC."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=timezone.utc)
    return value
