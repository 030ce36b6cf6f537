"""Application service (use case) for the Domain → Category → Product catalog."""

import logging
from typing import Any

from app.application.interfaces import CatalogStore
from app.application.schemas import (
    CategoryCreate,
    CategoryUpdate,
    DomainCreate,
    DomainUpdate,
    ProductCreate,
    ProductUpdate,
)
from app.application.services.lookups import ensure_unique, require_entity
from app.domain.entities import CatalogStats, Category, Domain, Product
from app.domain.slug import generate_slug, unique_slug

logger = logging.getLogger(__name__)

_FALLBACK_PRODUCT_SLUG = "product"


class CatalogService:
    """Orchestrates catalog business logic. Depends on the store ports (DI).

    Public listings only include active records; the admin screens pass
    ``include_inactive=True``. Deletes never cascade to children.
    """

    def __init__(self, store: CatalogStore):
        self._domains = store.domains
        self._categories = store.categories
        self._products = store.products

    # ── Domains ─────────────────────────────────────────────────────

    async def get_domains(self, include_inactive: bool = False) -> list[Domain]:
        return await self._domains.list(_active_filter(include_inactive))

    async def get_domain(self, key: str) -> Domain:
        return await require_entity(self._domains, key)

    async def create_domain(self, data: DomainCreate) -> Domain:
        await ensure_unique(self._domains, "slug", data.slug)
        domain = await self._domains.create(Domain(**data.model_dump()))
        logger.info("Created domain '%s' (%s)", domain.slug, domain.id)
        return domain

    async def update_domain(self, domain_id: str, data: DomainUpdate) -> Domain:
        changes = data.changes()
        if "slug" in changes:
            await ensure_unique(self._domains, "slug", changes["slug"], exclude_id=domain_id)
        return await self._domains.update(domain_id, changes)

    async def delete_domain(self, domain_id: str) -> None:
        await self._domains.delete(domain_id)

    # ── Categories ──────────────────────────────────────────────────

    async def get_categories(
        self, domain_id: str | None = None, include_inactive: bool = False
    ) -> list[Category]:
        filters = _active_filter(include_inactive)
        if domain_id is not None:
            filters["domain_id"] = domain_id
        return await self._categories.list(filters)

    async def get_category(self, key: str) -> Category:
        return await require_entity(self._categories, key)

    async def create_category(self, data: CategoryCreate) -> Category:
        await ensure_unique(self._categories, "slug", data.slug)
        category = await self._categories.create(Category(**data.model_dump()))
        logger.info("Created category '%s' (%s)", category.slug, category.id)
        return category

    async def update_category(self, category_id: str, data: CategoryUpdate) -> Category:
        changes = data.changes()
        if "slug" in changes:
            await ensure_unique(self._categories, "slug", changes["slug"], exclude_id=category_id)
        return await self._categories.update(category_id, changes)

    async def delete_category(self, category_id: str) -> None:
        await self._categories.delete(category_id)

    # ── Products ────────────────────────────────────────────────────

    async def get_products(
        self, category_id: str | None = None, include_inactive: bool = False
    ) -> list[Product]:
        """Products, newest first, optionally scoped to one category."""
        filters = _active_filter(include_inactive)
        if category_id is not None:
            filters["category_id"] = category_id
        return await self._products.list(filters, order_by="created_at", descending=True)

    async def get_featured_products(self) -> list[Product]:
        return await self._products.list(
            {"is_active": True, "is_featured": True},
            order_by="created_at",
            descending=True,
        )

    async def get_product(self, key: str) -> Product:
        return await require_entity(self._products, key)

    async def create_product(self, data: ProductCreate) -> Product:
        values = data.model_dump()
        base = values.pop("slug") or generate_slug(data.name) or _FALLBACK_PRODUCT_SLUG
        slug = unique_slug(base, await self._taken_product_slugs())
        product = await self._products.create(Product(slug=slug, **values))
        logger.info("Created product '%s' (%s)", product.slug, product.id)
        return product

    async def update_product(self, product_id: str, data: ProductUpdate) -> Product:
        """Partial update. A supplied slug that is taken gets a numeric suffix."""
        changes = data.changes()
        if "slug" in changes:
            base = changes["slug"]
            if not base:
                current = await self.get_product(product_id)
                name = changes.get("name") or current.name
                base = generate_slug(name) or _FALLBACK_PRODUCT_SLUG
            taken = await self._taken_product_slugs(exclude_id=product_id)
            changes["slug"] = unique_slug(base, taken)
        return await self._products.update(product_id, changes)

    async def delete_product(self, product_id: str) -> None:
        await self._products.delete(product_id)

    async def search_products(self, query: str) -> list[Product]:
        """Case-insensitive substring match over active products, unranked."""
        products = await self._products.list({"is_active": True})
        return [p for p in products if p.matches(query)]

    # ── Aggregates ──────────────────────────────────────────────────

    async def get_stats(self) -> CatalogStats:
        active = {"is_active": True}
        products = await self._products.list(active)
        return CatalogStats(
            domains=await self._domains.count(active),
            categories=await self._categories.count(active),
            products=len(products),
            downloads=sum(p.download_count or 0 for p in products),
        )

    # ── Helpers ─────────────────────────────────────────────────────

    async def _taken_product_slugs(self, exclude_id: str | None = None) -> set[str]:
        return {p.slug for p in await self._products.list() if p.id != exclude_id}


def _active_filter(include_inactive: bool) -> dict[str, Any]:
    return {} if include_inactive else {"is_active": True}

