"""In-memory storage backend."""

from app.application.interfaces import CatalogStore

from .in_memory_repository import InMemoryChatSessionRepository, InMemoryEntityRepository


def build_memory_store() -> CatalogStore:
    """Create an empty process-local store — one table per entity type."""
    return CatalogStore(
        users=InMemoryEntityRepository("User", slug_field=None),
        domains=InMemoryEntityRepository("Domain", default_order="sort_order"),
        categories=InMemoryEntityRepository("Category", default_order="sort_order"),
        products=InMemoryEntityRepository("Product"),
        attachments=InMemoryEntityRepository("Attachment", slug_field=None),
        blog_categories=InMemoryEntityRepository("BlogCategory", default_order="sort_order"),
        blog_posts=InMemoryEntityRepository("BlogPost"),
        navigation_items=InMemoryEntityRepository(
            "NavigationItem", default_order="position", slug_field=None
        ),
        chat_sessions=InMemoryChatSessionRepository(),
    )


__all__ = [
    "InMemoryChatSessionRepository",
    "InMemoryEntityRepository",
    "build_memory_store",
]
