"""Application service (use case) for the navigation menu."""

import logging

from app.application.interfaces import CatalogStore
from app.application.schemas import (
    NavigationItemCreate,
    NavigationItemUpdate,
    NavigationReorderItem,
)
from app.domain.entities import NavigationItem
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class NavigationService:
    """Orchestrates navigation menu logic. Depends on the store ports (DI)."""

    def __init__(self, store: CatalogStore):
        self._items = store.navigation_items

    async def get_navigation_items(self, visible_only: bool = False) -> list[NavigationItem]:
        filters = {"is_visible": True} if visible_only else None
        return await self._items.list(filters)

    async def get_navigation_item(self, item_id: str) -> NavigationItem:
        item = await self._items.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(self._items.entity_name, item_id)
        return item

    async def create_navigation_item(self, data: NavigationItemCreate) -> NavigationItem:
        return await self._items.create(NavigationItem(**data.model_dump()))

    async def update_navigation_item(
        self, item_id: str, data: NavigationItemUpdate
    ) -> NavigationItem:
        return await self._items.update(item_id, data.changes())

    async def delete_navigation_item(self, item_id: str) -> None:
        await self._items.delete(item_id)

    async def reorder_navigation_items(self, items: list[NavigationReorderItem]) -> int:
        """Apply each ``(id, position)`` pair as its own update.

        Unknown ids are skipped. The batch is not atomic: pairs applied
        before a failure stay applied.

        Returns:
            The number of items actually updated.
        """
        updated = 0
        for entry in items:
            try:
                await self._items.update(entry.id, {"position": entry.position})
            except EntityNotFoundError:
                logger.debug("Reorder skipped unknown navigation item %s", entry.id)
                continue
            updated += 1
        logger.info("Reordered %d of %d navigation items", updated, len(items))
        return updated
