"""Domain entities for the catalog chatbot — answered questions and outcomes."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


@dataclass
class ChatSession:
    """One answered chatbot question.

    The log of sessions is append-only; counting a device's sessions inside
    the current calendar day yields its used quota.
    """

    device_id: str
    question: str
    response: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: str | None = None


class ChatOutcome(str, Enum):
    ANSWERED = "answered"
    QUOTA_EXCEEDED = "quota_exceeded"
    UNAVAILABLE = "unavailable"  # LLM failed or is not configured


@dataclass
class ChatAnswer:
    """Result of a single chatbot request."""

    outcome: ChatOutcome
    response: str
    remaining: int

    @property
    def answered(self) -> bool:
        return self.outcome is ChatOutcome.ANSWERED
