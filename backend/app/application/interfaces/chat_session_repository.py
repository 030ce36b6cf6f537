"""Abstract repository interface for the chatbot session log."""

from abc import ABC, abstractmethod
from datetime import datetime

from app.domain.entities import ChatSession


class ChatSessionRepository(ABC):
    """Port — append-only log of answered chatbot questions."""

    @abstractmethod
    async def create(self, session: ChatSession) -> ChatSession:
        """Append a new session.

        Returns:
            The stored session with its assigned ID.
        """
        ...

    @abstractmethod
    async def count_for_device(
        self, device_id: str, start: datetime, end: datetime
    ) -> int:
        """Count a device's sessions with ``start <= timestamp < end``."""
        ...

    @abstractmethod
    async def list_for_device(self, device_id: str) -> list[ChatSession]:
        """Return a device's sessions, oldest first."""
        ...
