"""Generic table port — CRUD plus scoped listing for any catalog entity."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class EntityRepository(ABC, Generic[T]):
    """Port for keyed entity storage — implemented in the infrastructure layer.

    The repository has no knowledge of business rules: it never enforces
    slug/username uniqueness, active flags, or parent existence, and
    deletes never cascade. Those concerns belong to the services.
    """

    entity_name: str = "Entity"

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Assign a fresh id, stamp ``created_at``/``updated_at`` and store a copy."""
        ...

    @abstractmethod
    async def get_by_id(self, entity_id: str) -> T | None:
        """Retrieve a single entity by its ID."""
        ...

    @abstractmethod
    async def get_by_key(self, key: str) -> T | None:
        """Retrieve an entity by ID or slug, whichever matches."""
        ...

    @abstractmethod
    async def find_one(self, **criteria: Any) -> T | None:
        """Return the first entity whose fields equal every criterion."""
        ...

    @abstractmethod
    async def update(self, entity_id: str, changes: dict[str, Any]) -> T:
        """Merge ``changes`` over the stored entity and refresh ``updated_at``.

        Raises:
            EntityNotFoundError: If no entity has this ID.
        """
        ...

    @abstractmethod
    async def delete(self, entity_id: str) -> None:
        """Delete an entity. Deleting a missing ID is not an error."""
        ...

    @abstractmethod
    async def list(
        self,
        filters: dict[str, Any] | None = None,
        *,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[T]:
        """Return matching entities as a fresh list.

        Defaults to ascending ``sort_order`` (or ``position``) when the
        entity has one; ties keep insertion order.
        """
        ...

    @abstractmethod
    async def count(self, filters: dict[str, Any] | None = None) -> int:
        """Return the number of entities matching ``filters``."""
        ...
