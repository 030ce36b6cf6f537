from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import CatalogStore
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
from app.infrastructure.database.models import (
    AttachmentModel,
    BlogCategoryModel,
    BlogPostModel,
    CategoryModel,
    DomainModel,
    NavigationItemModel,
    ProductModel,
    UserModel,
)

from .entity_repository import SQLAlchemyChatSessionRepository, SQLAlchemyEntityRepository


def build_sqlalchemy_store(session: AsyncSession) -> CatalogStore:
    """Bind one repository per table to ``session``."""
    return CatalogStore(
        users=SQLAlchemyEntityRepository(session, User, UserModel, slug_field=None),
        domains=SQLAlchemyEntityRepository(session, Domain, DomainModel, default_order="sort_order"),
        categories=SQLAlchemyEntityRepository(
            session, Category, CategoryModel, default_order="sort_order"
        ),
        products=SQLAlchemyEntityRepository(session, Product, ProductModel),
        attachments=SQLAlchemyEntityRepository(
            session, Attachment, AttachmentModel, slug_field=None
        ),
        blog_categories=SQLAlchemyEntityRepository(
            session, BlogCategory, BlogCategoryModel, default_order="sort_order"
        ),
        blog_posts=SQLAlchemyEntityRepository(session, BlogPost, BlogPostModel),
        navigation_items=SQLAlchemyEntityRepository(
            session, NavigationItem, NavigationItemModel, default_order="position", slug_field=None
        ),
        chat_sessions=SQLAlchemyChatSessionRepository(session),
    )


__all__ = [
    "SQLAlchemyChatSessionRepository",
    "SQLAlchemyEntityRepository",
    "build_sqlalchemy_store",
]
