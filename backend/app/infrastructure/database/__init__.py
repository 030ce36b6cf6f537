from .base import Base
from .session import engine, async_session_factory, create_tables

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "create_tables",
]
