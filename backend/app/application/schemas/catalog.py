"""Pydantic DTOs for the catalog hierarchy — domains, categories, products."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.application.schemas._base import PartialUpdate
from app.application.schemas.attachment import AttachmentResponse


# ── Domains ─────────────────────────────────────────────────────────


class DomainCreate(BaseModel):
    """Schema for creating a domain. The slug is mandatory and globally unique."""

    name: str = Field(..., min_length=1, max_length=255, examples=["MCP Servers"])
    slug: str = Field(..., min_length=1, max_length=255, examples=["mcp-servers"])
    description: str | None = None
    hero_image: str | None = None
    icon: str | None = Field(None, max_length=100, examples=["Server"])
    sort_order: int = 0
    is_active: bool = True


class DomainUpdate(PartialUpdate):
    non_nullable = frozenset({"name", "slug", "sort_order", "is_active"})

    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    hero_image: str | None = None
    icon: str | None = Field(None, max_length=100)
    sort_order: int | None = None
    is_active: bool | None = None


class DomainResponse(BaseModel):
    id: str
    name: str
    slug: str
    description: str | None
    hero_image: str | None
    icon: str | None
    sort_order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


# ── Categories ──────────────────────────────────────────────────────


class CategoryCreate(BaseModel):
    """Schema for creating a category inside a domain (parent is not verified)."""

    domain_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255, examples=["Code Generation"])
    slug: str = Field(..., min_length=1, max_length=255, examples=["code-generation"])
    description: str | None = None
    sort_order: int = 0
    is_active: bool = True


class CategoryUpdate(PartialUpdate):
    non_nullable = frozenset({"domain_id", "name", "slug", "sort_order", "is_active"})

    domain_id: str | None = Field(None, min_length=1)
    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    sort_order: int | None = None
    is_active: bool | None = None


class CategoryResponse(BaseModel):
    id: str
    domain_id: str
    name: str
    slug: str
    description: str | None
    sort_order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


# ── Products ────────────────────────────────────────────────────────


class ProductCreate(BaseModel):
    """Schema for creating a product.

    ``slug`` is optional: when omitted it is derived from ``name`` and any
    collision is resolved with a numeric suffix. ``rating`` uses a 0–50
    integer scale (tenths of a star).
    """

    category_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255, examples=["Database Sync Pro"])
    slug: str | None = Field(None, max_length=255)
    subtitle: str | None = Field(None, max_length=500)
    description: str | None = None
    thumbnail: str | None = None
    tags: list[str] = Field(default_factory=list, examples=[["database", "sync"]])
    rating: int = Field(0, ge=0, le=50)
    download_count: int = Field(0, ge=0)
    is_featured: bool = False
    is_active: bool = True
    author: str | None = Field(None, max_length=255)


class ProductUpdate(PartialUpdate):
    non_nullable = frozenset({
        "category_id", "name", "slug", "tags", "rating",
        "download_count", "is_featured", "is_active",
    })

    category_id: str | None = Field(None, min_length=1)
    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    subtitle: str | None = Field(None, max_length=500)
    description: str | None = None
    thumbnail: str | None = None
    tags: list[str] | None = None
    rating: int | None = Field(None, ge=0, le=50)
    download_count: int | None = Field(None, ge=0)
    is_featured: bool | None = None
    is_active: bool | None = None
    author: str | None = Field(None, max_length=255)


class ProductResponse(BaseModel):
    id: str
    category_id: str
    name: str
    slug: str
    subtitle: str | None
    description: str | None
    thumbnail: str | None
    tags: list[str]
    rating: int
    rating_stars: float
    download_count: int
    is_featured: bool
    is_active: bool
    author: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CatalogStatsResponse(BaseModel):
    """Landing-page counters over active records."""

    domains: int
    categories: int
    products: int
    downloads: int

    model_config = {"from_attributes": True}


class ProductDetailResponse(ProductResponse):
    """Single-product view including its attachments."""

    attachments: list[AttachmentResponse] = []
