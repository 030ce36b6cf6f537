"""Pydantic DTOs for the blog — categories and posts."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.application.schemas._base import PartialUpdate, UtcDatetime


class BlogCategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Tutorials"])
    slug: str = Field(..., min_length=1, max_length=255, examples=["tutorials"])
    description: str | None = None
    sort_order: int = 0


class BlogCategoryUpdate(PartialUpdate):
    non_nullable = frozenset({"name", "slug", "sort_order"})

    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    sort_order: int | None = None


class BlogCategoryResponse(BaseModel):
    id: str
    name: str
    slug: str
    description: str | None
    sort_order: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class BlogPostCreate(BaseModel):
    """Schema for creating a post. The author is the signed-in user.

    ``read_time`` (minutes) is estimated from the content when omitted.
    """

    category_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=500)
    slug: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    excerpt: str | None = None
    cover_image: str | None = None
    tags: list[str] = Field(default_factory=list)
    read_time: int | None = Field(None, ge=1)
    is_published: bool = False
    published_at: UtcDatetime | None = None


class BlogPostUpdate(PartialUpdate):
    non_nullable = frozenset({
        "category_id", "title", "slug", "content", "tags", "read_time", "is_published",
    })

    category_id: str | None = Field(None, min_length=1)
    title: str | None = Field(None, min_length=1, max_length=500)
    slug: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)
    excerpt: str | None = None
    cover_image: str | None = None
    tags: list[str] | None = None
    read_time: int | None = Field(None, ge=1)
    is_published: bool | None = None
    published_at: UtcDatetime | None = None


class BlogPostResponse(BaseModel):
    id: str
    category_id: str
    title: str
    slug: str
    content: str
    excerpt: str | None
    cover_image: str | None
    tags: list[str]
    author_id: str
    read_time: int
    is_published: bool
    published_at: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
