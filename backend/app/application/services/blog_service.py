"""Application service (use case) for blog categories and posts."""

import logging
import math
from datetime import datetime, timezone

from app.application.interfaces import CatalogStore
from app.application.schemas import (
    BlogCategoryCreate,
    BlogCategoryUpdate,
    BlogPostCreate,
    BlogPostUpdate,
)
from app.application.services.lookups import ensure_unique, require_entity
from app.domain.entities import BlogCategory, BlogPost

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
DEFAULT_READ_TIME = 5


def estimate_read_time(content: str) -> int:
    """Minutes needed to read ``content`` at 200 words per minute (at least 1)."""
    words = len(content.split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


class BlogService:
    """Orchestrates blog business logic. Depends on the store ports (DI)."""

    def __init__(self, store: CatalogStore):
        self._categories = store.blog_categories
        self._posts = store.blog_posts

    # ── Categories ──────────────────────────────────────────────────

    async def get_blog_categories(self) -> list[BlogCategory]:
        return await self._categories.list()

    async def get_blog_category(self, key: str) -> BlogCategory:
        return await require_entity(self._categories, key)

    async def create_blog_category(self, data: BlogCategoryCreate) -> BlogCategory:
        await ensure_unique(self._categories, "slug", data.slug)
        return await self._categories.create(BlogCategory(**data.model_dump()))

    async def update_blog_category(
        self, category_id: str, data: BlogCategoryUpdate
    ) -> BlogCategory:
        changes = data.changes()
        if "slug" in changes:
            await ensure_unique(self._categories, "slug", changes["slug"], exclude_id=category_id)
        return await self._categories.update(category_id, changes)

    async def delete_blog_category(self, category_id: str) -> None:
        await self._categories.delete(category_id)

    # ── Posts ───────────────────────────────────────────────────────

    async def get_blog_posts(
        self, category_id: str | None = None, include_unpublished: bool = False
    ) -> list[BlogPost]:
        """Posts ordered by ``published_at`` descending; drafts last when included."""
        filters = {} if include_unpublished else {"is_published": True}
        if category_id is not None:
            filters["category_id"] = category_id
        return await self._posts.list(filters, order_by="published_at", descending=True)

    async def get_blog_post(self, key: str) -> BlogPost:
        return await require_entity(self._posts, key)

    async def create_blog_post(self, data: BlogPostCreate, author_id: str) -> BlogPost:
        await ensure_unique(self._posts, "slug", data.slug)
        values = data.model_dump()
        if values["read_time"] is None:
            values["read_time"] = estimate_read_time(data.content)
        if values["is_published"] and values["published_at"] is None:
            values["published_at"] = datetime.now(timezone.utc)
        post = await self._posts.create(BlogPost(author_id=author_id, **values))
        logger.info("Created blog post '%s' (published=%s)", post.slug, post.is_published)
        return post

    async def update_blog_post(self, post_id: str, data: BlogPostUpdate) -> BlogPost:
        changes = data.changes()
        current = await require_entity(self._posts, post_id)
        if "slug" in changes:
            await ensure_unique(self._posts, "slug", changes["slug"], exclude_id=current.id)
        if "content" in changes and "read_time" not in changes:
            changes["read_time"] = estimate_read_time(changes["content"])
        becomes_published = changes.get("is_published") and not current.is_published
        if becomes_published and changes.get("published_at") is None:
            changes["published_at"] = datetime.now(timezone.utc)
        return await self._posts.update(current.id, changes)

    async def delete_blog_post(self, post_id: str) -> None:
        await self._posts.delete(post_id)
