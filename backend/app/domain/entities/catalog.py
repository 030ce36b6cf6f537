"""Catalog hierarchy entities — Domain → Category → Product."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Domain:
    """Broad topic at the top of the catalog (e.g. "MCP Servers")."""

    name: str
    slug: str
    description: str | None = None
    hero_image: str | None = None
    icon: str | None = None
    sort_order: int = 0
    is_active: bool = True
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class Category:
    """Grouping of products inside a single domain.

    ``domain_id`` is not checked for existence when a category is stored.
    """

    domain_id: str
    name: str
    slug: str
    description: str | None = None
    sort_order: int = 0
    is_active: bool = True
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class Product:
    """An individual catalog resource (agent, server, tool…).

    ``rating`` is stored on a 0–50 integer scale and displayed as 0–5 stars.
    """

    category_id: str
    name: str
    slug: str = ""
    subtitle: str | None = None
    description: str | None = None
    thumbnail: str | None = None
    tags: list[str] = field(default_factory=list)
    rating: int = 0
    download_count: int = 0
    is_featured: bool = False
    is_active: bool = True
    author: str | None = None
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def rating_stars(self) -> float:
        return self.rating / 10

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name, description or any tag."""
        needle = term.lower()
        if needle in self.name.lower():
            return True
        if self.description and needle in self.description.lower():
            return True
        return any(needle in tag.lower() for tag in self.tags or [])


@dataclass
class CatalogStats:
    """Aggregate counters shown on the landing page."""

    domains: int = 0
    categories: int = 0
    products: int = 0
    downloads: int = 0
