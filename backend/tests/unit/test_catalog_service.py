"""Unit tests for the CatalogService."""

import pytest

from app.application.schemas import (
    CategoryCreate,
    DomainCreate,
    DomainUpdate,
    ProductCreate,
    ProductUpdate,
)
from app.application.services import CatalogSeeder, CatalogService
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError


@pytest.fixture
def service(store) -> CatalogService:
    return CatalogService(store)


async def _seed(store, seed_file) -> None:
    await CatalogSeeder(store).seed(seed_file)


# ── Domains & categories ──


@pytest.mark.asyncio
async def test_create_domain_rejects_duplicate_slug(service: CatalogService):
    await service.create_domain(DomainCreate(name="MCP", slug="mcp"))

    with pytest.raises(DuplicateEntityError):
        await service.create_domain(DomainCreate(name="Other", slug="mcp"))


@pytest.mark.asyncio
async def test_get_domain_by_id_or_slug(service: CatalogService):
    created = await service.create_domain(DomainCreate(name="MCP", slug="mcp"))

    assert (await service.get_domain("mcp")).id == created.id
    assert (await service.get_domain(created.id)).slug == "mcp"
    with pytest.raises(EntityNotFoundError):
        await service.get_domain("unknown")


@pytest.mark.asyncio
async def test_update_domain_is_partial(service: CatalogService):
    created = await service.create_domain(
        DomainCreate(name="MCP", slug="mcp", description="servers", sort_order=4)
    )

    updated = await service.update_domain(created.id, DomainUpdate(name="MCP Servers"))

    assert updated.name == "MCP Servers"
    assert updated.description == "servers"
    assert updated.sort_order == 4


@pytest.mark.asyncio
async def test_update_domain_ignores_null_for_required_fields(service: CatalogService):
    created = await service.create_domain(DomainCreate(name="MCP", slug="mcp", icon="Server"))

    updated = await service.update_domain(
        created.id, DomainUpdate.model_validate({"name": None, "icon": None})
    )

    assert updated.name == "MCP"
    assert updated.icon is None


@pytest.mark.asyncio
async def test_update_domain_slug_conflict(service: CatalogService):
    await service.create_domain(DomainCreate(name="A", slug="a"))
    b = await service.create_domain(DomainCreate(name="B", slug="b"))

    with pytest.raises(DuplicateEntityError):
        await service.update_domain(b.id, DomainUpdate(slug="a"))
    # Re-saving its own slug is not a conflict
    assert (await service.update_domain(b.id, DomainUpdate(slug="b"))).slug == "b"


@pytest.mark.asyncio
async def test_inactive_domains_only_listed_for_admin(service: CatalogService):
    await service.create_domain(DomainCreate(name="A", slug="a"))
    await service.create_domain(DomainCreate(name="B", slug="b", is_active=False))

    assert [d.slug for d in await service.get_domains()] == ["a"]
    assert len(await service.get_domains(include_inactive=True)) == 2


@pytest.mark.asyncio
async def test_inactive_domain_is_still_fetched_directly(service: CatalogService):
    hidden = await service.create_domain(DomainCreate(name="Hidden", slug="hidden", is_active=False))

    assert hidden.id not in {d.id for d in await service.get_domains()}
    assert (await service.get_domain(hidden.id)).slug == "hidden"
    assert (await service.get_domain("hidden")).id == hidden.id


@pytest.mark.asyncio
async def test_categories_scoped_to_domain(service: CatalogService, store, seed_file):
    await _seed(store, seed_file)

    categories = await service.get_categories(domain_id="domain-1")

    assert [c.slug for c in categories] == ["code-generation", "development-tools"]


@pytest.mark.asyncio
async def test_delete_domain_does_not_cascade(service: CatalogService):
    domain = await service.create_domain(DomainCreate(name="A", slug="a"))
    await service.create_category(CategoryCreate(domain_id=domain.id, name="C", slug="c"))

    await service.delete_domain(domain.id)

    assert len(await service.get_categories(domain_id=domain.id)) == 1


# ── Products ──


@pytest.mark.asyncio
async def test_create_product_derives_slug_from_name(service: CatalogService):
    product = await service.create_product(
        ProductCreate(category_id="cat-1", name="Database Sync Pro!")
    )
    assert product.slug == "database-sync-pro"


@pytest.mark.asyncio
async def test_create_product_suffixes_colliding_slug(service: CatalogService):
    first = await service.create_product(ProductCreate(category_id="cat-1", name="Tool"))
    second = await service.create_product(ProductCreate(category_id="cat-1", name="Tool"))
    third = await service.create_product(
        ProductCreate(category_id="cat-1", name="Other", slug="tool")
    )

    assert [first.slug, second.slug, third.slug] == ["tool", "tool-1", "tool-2"]


@pytest.mark.asyncio
async def test_create_product_with_unsluggable_name(service: CatalogService):
    product = await service.create_product(ProductCreate(category_id="cat-1", name="???"))
    assert product.slug == "product"


@pytest.mark.asyncio
async def test_update_product_keeps_own_slug(service: CatalogService):
    product = await service.create_product(ProductCreate(category_id="cat-1", name="Tool"))

    updated = await service.update_product(product.id, ProductUpdate(slug="tool", rating=42))

    assert updated.slug == "tool"
    assert updated.rating == 42
    assert updated.rating_stars == 4.2


@pytest.mark.asyncio
async def test_update_product_suffixes_taken_slug(service: CatalogService):
    await service.create_product(ProductCreate(category_id="cat-1", name="Tool"))
    other = await service.create_product(ProductCreate(category_id="cat-1", name="Other"))

    updated = await service.update_product(other.id, ProductUpdate(slug="tool"))

    assert updated.slug == "tool-1"


@pytest.mark.asyncio
async def test_update_missing_product_raises(service: CatalogService):
    with pytest.raises(EntityNotFoundError):
        await service.update_product("nope", ProductUpdate(name="x"))


@pytest.mark.asyncio
async def test_featured_products(service: CatalogService, store, seed_file):
    await _seed(store, seed_file)

    featured = await service.get_featured_products()

    assert {p.id for p in featured} == {"prod-1", "prod-2", "prod-3", "prod-5"}


@pytest.mark.asyncio
async def test_search_matches_name_description_and_tags(
    service: CatalogService, store, seed_file
):
    await _seed(store, seed_file)

    assert {p.id for p in await service.search_products("DEBUG")} == {"prod-1", "prod-4"}
    assert {p.id for p in await service.search_products("mcp")} == {
        "prod-2", "prod-7", "prod-9",
    }
    assert await service.search_products("no-such-thing") == []


@pytest.mark.asyncio
async def test_search_skips_inactive_products(service: CatalogService, store, seed_file):
    await _seed(store, seed_file)
    await service.update_product("prod-4", ProductUpdate(is_active=False))

    assert {p.id for p in await service.search_products("debug")} == {"prod-1"}


@pytest.mark.asyncio
async def test_stats_over_sample_catalog(service: CatalogService, store, seed_file):
    await _seed(store, seed_file)

    stats = await service.get_stats()

    assert (stats.domains, stats.categories, stats.products) == (3, 3, 10)
    assert stats.downloads == 11680


@pytest.mark.asyncio
async def test_stats_follow_download_count_changes(service: CatalogService, store, seed_file):
    await _seed(store, seed_file)
    before = await service.get_stats()

    await service.update_product("prod-1", ProductUpdate(download_count=1210))

    assert (await service.get_stats()).downloads == before.downloads + 10


@pytest.mark.asyncio
async def test_new_active_product_raises_downloads_by_its_count(
    service: CatalogService, store, seed_file
):
    await _seed(store, seed_file)
    before = await service.get_stats()

    await service.create_product(
        ProductCreate(category_id="cat-1", name="Fresh Tool", download_count=10)
    )

    after = await service.get_stats()
    assert after.downloads == before.downloads + 10
    assert after.products == before.products + 1


@pytest.mark.asyncio
async def test_stats_leave_out_inactive_products(service: CatalogService, store, seed_file):
    await _seed(store, seed_file)
    before = await service.get_stats()

    await service.create_product(
        ProductCreate(category_id="cat-1", name="Retired", download_count=500, is_active=False)
    )
    await service.update_product("prod-1", ProductUpdate(is_active=False))

    after = await service.get_stats()
    assert after.products == before.products - 1
    assert after.downloads == before.downloads - 1200
