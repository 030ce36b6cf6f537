"""The set of tables the application services work against."""

from dataclasses import dataclass

from app.application.interfaces.chat_session_repository import ChatSessionRepository
from app.application.interfaces.entity_repository import EntityRepository
from app.domain.entities import (
    Attachment,
    BlogCategory,
    BlogPost,
    Category,
    Domain,
    NavigationItem,
    Product,
    User,
)


@dataclass
class CatalogStore:
    """Bundle of one repository per table.

    Built once at startup for the in-memory backend, or once per request
    (bound to a database session) for the SQLAlchemy backend.
    """

    users: EntityRepository[User]
    domains: EntityRepository[Domain]
    categories: EntityRepository[Category]
    products: EntityRepository[Product]
    attachments: EntityRepository[Attachment]
    blog_categories: EntityRepository[BlogCategory]
    blog_posts: EntityRepository[BlogPost]
    navigation_items: EntityRepository[NavigationItem]
    chat_sessions: ChatSessionRepository
