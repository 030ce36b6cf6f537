"""Lookup helpers shared by the services — NotFound / uniqueness checks."""

from typing import Any, TypeVar

from app.application.interfaces import EntityRepository
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError

T = TypeVar("T")


async def require_entity(repository: EntityRepository[T], key: str) -> T:
    """Fetch by ID or slug, raising ``EntityNotFoundError`` when absent."""
    entity = await repository.get_by_key(key)
    if entity is None:
        raise EntityNotFoundError(repository.entity_name, key)
    return entity


async def ensure_unique(
    repository: EntityRepository[Any],
    field: str,
    value: Any,
    exclude_id: str | None = None,
) -> None:
    """Raise ``DuplicateEntityError`` if another record already holds ``value``."""
    existing = await repository.find_one(**{field: value})
    if existing is not None and existing.id != exclude_id:
        raise DuplicateEntityError(repository.entity_name, field, value)
