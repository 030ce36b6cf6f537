from .entity_repository import EntityRepository
from .chat_session_repository import ChatSessionRepository
from .catalog_store import CatalogStore
from .chat_provider import ChatProvider

__all__ = [
    "EntityRepository",
    "ChatSessionRepository",
    "CatalogStore",
    "ChatProvider",
]
