"""Unit tests for the NavigationService."""

import pytest

from app.application.schemas import (
    NavigationItemCreate,
    NavigationItemUpdate,
    NavigationReorderItem,
)
from app.application.services import NavigationService
from app.domain.exceptions import EntityNotFoundError


@pytest.fixture
def service(store) -> NavigationService:
    return NavigationService(store)


async def _make(service: NavigationService, label: str, position: int, visible: bool = True):
    return await service.create_navigation_item(
        NavigationItemCreate(label=label, href=f"/{label.lower()}", position=position, is_visible=visible)
    )


@pytest.mark.asyncio
async def test_items_listed_by_position(service: NavigationService):
    await _make(service, "Blog", 3)
    await _make(service, "Home", 1)
    await _make(service, "Tools", 2, visible=False)

    assert [i.label for i in await service.get_navigation_items()] == ["Home", "Tools", "Blog"]
    assert [i.label for i in await service.get_navigation_items(visible_only=True)] == [
        "Home", "Blog",
    ]


@pytest.mark.asyncio
async def test_update_item(service: NavigationService):
    item = await _make(service, "Blog", 1)

    updated = await service.update_navigation_item(item.id, NavigationItemUpdate(label="News"))

    assert updated.label == "News"
    assert updated.href == "/blog"


@pytest.mark.asyncio
async def test_get_missing_item_raises(service: NavigationService):
    with pytest.raises(EntityNotFoundError):
        await service.get_navigation_item("missing")


@pytest.mark.asyncio
async def test_reorder_applies_positions_and_skips_unknown_ids(service: NavigationService):
    home = await _make(service, "Home", 1)
    blog = await _make(service, "Blog", 2)

    updated = await service.reorder_navigation_items([
        NavigationReorderItem(id=blog.id, position=1),
        NavigationReorderItem(id="ghost", position=5),
        NavigationReorderItem(id=home.id, position=2),
    ])

    assert updated == 2
    assert [i.label for i in await service.get_navigation_items()] == ["Blog", "Home"]


@pytest.mark.asyncio
async def test_reorder_allows_duplicate_positions(service: NavigationService):
    home = await _make(service, "Home", 1)
    blog = await _make(service, "Blog", 2)

    await service.reorder_navigation_items([
        NavigationReorderItem(id=home.id, position=7),
        NavigationReorderItem(id=blog.id, position=7),
    ])

    assert {i.position for i in await service.get_navigation_items()} == {7}


@pytest.mark.asyncio
async def test_delete_item(service: NavigationService):
    item = await _make(service, "Home", 1)

    await service.delete_navigation_item(item.id)
    await service.delete_navigation_item(item.id)

    assert await service.get_navigation_items() == []
