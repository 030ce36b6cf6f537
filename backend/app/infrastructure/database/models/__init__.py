from .catalog_models import AttachmentModel, CategoryModel, DomainModel, ProductModel
from .content_models import BlogCategoryModel, BlogPostModel, NavigationItemModel
from .user_models import ChatSessionModel, UserModel

__all__ = [
    "AttachmentModel",
    "CategoryModel",
    "DomainModel",
    "ProductModel",
    "BlogCategoryModel",
    "BlogPostModel",
    "NavigationItemModel",
    "ChatSessionModel",
    "UserModel",
]
