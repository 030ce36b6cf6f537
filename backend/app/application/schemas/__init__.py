from .attachment import AttachmentResponse
from .blog import (
    BlogCategoryCreate,
    BlogCategoryResponse,
    BlogCategoryUpdate,
    BlogPostCreate,
    BlogPostResponse,
    BlogPostUpdate,
)
from .catalog import (
    CatalogStatsResponse,
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    DomainCreate,
    DomainResponse,
    DomainUpdate,
    ProductCreate,
    ProductDetailResponse,
    ProductResponse,
    ProductUpdate,
)
from .chatbot import (
    ChatbotAnswerResponse,
    ChatbotAskRequest,
    ChatbotQuestionsResponse,
    ChatbotQuotaExceededResponse,
    ChatbotRemainingResponse,
)
from .navigation import (
    NavigationItemCreate,
    NavigationItemResponse,
    NavigationItemUpdate,
    NavigationReorderItem,
    NavigationReorderRequest,
    NavigationReorderResponse,
)
from .user import LoginRequest, UserCreate, UserResponse, UserUpdate

__all__ = [
    "AttachmentResponse",
    "BlogCategoryCreate",
    "BlogCategoryResponse",
    "BlogCategoryUpdate",
    "BlogPostCreate",
    "BlogPostResponse",
    "BlogPostUpdate",
    "CatalogStatsResponse",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "DomainCreate",
    "DomainResponse",
    "DomainUpdate",
    "ProductCreate",
    "ProductDetailResponse",
    "ProductResponse",
    "ProductUpdate",
    "ChatbotAnswerResponse",
    "ChatbotAskRequest",
    "ChatbotQuestionsResponse",
    "ChatbotQuotaExceededResponse",
    "ChatbotRemainingResponse",
    "NavigationItemCreate",
    "NavigationItemResponse",
    "NavigationItemUpdate",
    "NavigationReorderItem",
    "NavigationReorderRequest",
    "NavigationReorderResponse",
    "LoginRequest",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
]
