"""Per-device daily quota for the catalog chatbot.

Used quota is never stored as a counter: it is the number of answered
sessions a device has in the current calendar day, counted from the
append-only session log. The day runs from local midnight to the next
local midnight in the clock's time zone.
"""

import logging
from collections.abc import Callable
from datetime import date, datetime, time, timedelta, timezone, tzinfo

from app.application.interfaces import ChatSessionRepository
from app.domain.entities import ChatSession

logger = logging.getLogger(__name__)

DEFAULT_DAILY_LIMIT = 5


def _local_now() -> datetime:
    return datetime.now().astimezone()


def _midnight(day: date, tz: tzinfo | None) -> datetime:
    naive = datetime.combine(day, time())
    # astimezone() on a naive value applies the system zone rules for that instant
    return naive.replace(tzinfo=tz) if tz is not None else naive.astimezone()


def quota_window(now: datetime, tz: tzinfo | None = None) -> tuple[datetime, datetime]:
    """Return the half-open ``[midnight, next midnight)`` window containing ``now``.

    ``tz`` defaults to the system zone. Both bounds are real local midnights,
    so the window is 23 or 25 hours long on days the clocks change.
    """
    day = now.astimezone(tz).date()
    return _midnight(day, tz), _midnight(day + timedelta(days=1), tz)


class ChatQuotaTracker:
    """Answers "may this device ask again today?" from the session log."""

    def __init__(
        self,
        repository: ChatSessionRepository,
        daily_limit: int = DEFAULT_DAILY_LIMIT,
        clock: Callable[[], datetime] = _local_now,
        tz: tzinfo | None = None,
    ):
        self._repository = repository
        self._daily_limit = daily_limit
        self._clock = clock
        self._tz = tz

    @property
    def daily_limit(self) -> int:
        return self._daily_limit

    async def _used_today(self, device_id: str) -> int:
        start, end = quota_window(self._clock(), self._tz)
        return await self._repository.count_for_device(device_id, start, end)

    async def check_rate_limit(self, device_id: str) -> bool:
        """True while the device has answered questions left today."""
        return await self._used_today(device_id) < self._daily_limit

    async def get_remaining_questions(self, device_id: str) -> int:
        return max(0, self._daily_limit - await self._used_today(device_id))

    async def record_session(
        self, device_id: str, question: str, response: str
    ) -> ChatSession:
        """Log an answered question — the only operation that consumes quota."""
        session = ChatSession(
            device_id=device_id,
            question=question,
            response=response,
            timestamp=self._clock().astimezone(timezone.utc),
        )
        stored = await self._repository.create(session)
        logger.debug("Recorded chat session %s for device %s", stored.id, device_id)
        return stored
