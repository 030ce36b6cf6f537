from .attachment_service import AttachmentService
from .blog_service import BlogService
from .catalog_seeder import CatalogSeeder
from .catalog_service import CatalogService
from .chat_context_assembler import ChatContextAssembler
from .chat_quota_tracker import ChatQuotaTracker
from .chatbot_service import ChatbotService
from .navigation_service import NavigationService
from .user_service import UserService

__all__ = [
    "AttachmentService",
    "BlogService",
    "CatalogSeeder",
    "CatalogService",
    "ChatContextAssembler",
    "ChatQuotaTracker",
    "ChatbotService",
    "NavigationService",
    "UserService",
]
