"""Unit tests for loading the sample catalog from YAML."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from app.application.services import CatalogSeeder


@pytest.mark.asyncio
async def test_seed_loads_every_section(store, seed_file):
    added = await CatalogSeeder(store).seed(seed_file)

    assert added == 24
    assert await store.domains.count() == 3
    assert await store.categories.count() == 3
    assert await store.products.count() == 10
    assert await store.blog_categories.count() == 2
    assert await store.blog_posts.count() == 1
    assert await store.navigation_items.count() == 5


@pytest.mark.asyncio
async def test_seed_keeps_ids_and_slugs(store, seed_file):
    await CatalogSeeder(store).seed(seed_file)

    product = await store.products.get_by_key("autocode-pro")

    assert product.id == "prod-3"
    assert product.rating == 48
    assert product.tags == ["automation", "templates", "testing", "documentation"]


@pytest.mark.asyncio
async def test_seed_turns_dates_into_utc_datetimes(store, seed_file):
    await CatalogSeeder(store).seed(seed_file)

    post = await store.blog_posts.get_by_id("blog-1")

    assert post.published_at == datetime(2024, 12, 15, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_seed_is_idempotent(store, seed_file):
    seeder = CatalogSeeder(store)
    await seeder.seed(seed_file)

    assert await seeder.seed(seed_file) == 0
    assert await store.products.count() == 10


@pytest.mark.asyncio
async def test_seed_missing_file_is_skipped(store, tmp_path: Path):
    assert await CatalogSeeder(store).seed(tmp_path / "absent.yaml") == 0


@pytest.mark.asyncio
async def test_seed_invalid_yaml_is_skipped(store, tmp_path: Path):
    broken = tmp_path / "broken.yaml"
    broken.write_text("domains: [unclosed", encoding="utf-8")

    assert await CatalogSeeder(store).seed(broken) == 0
