from .attachment import Attachment, AttachmentFileType
from .blog import BlogCategory, BlogPost
from .catalog import CatalogStats, Category, Domain, Product
from .chat_message import ChatMessage, TokenUsage, ChatCompletionResult
from .chat_session import ChatAnswer, ChatOutcome, ChatSession
from .navigation_item import NavigationItem
from .user import User, UserRole

__all__ = [
    "Attachment",
    "AttachmentFileType",
    "BlogCategory",
    "BlogPost",
    "CatalogStats",
    "Category",
    "Domain",
    "Product",
    "ChatMessage",
    "TokenUsage",
    "ChatCompletionResult",
    "ChatAnswer",
    "ChatOutcome",
    "ChatSession",
    "NavigationItem",
    "User",
    "UserRole",
]
