"""In-memory repository implementations — the default, process-local store.

Each table is an insertion-ordered ``id → entity`` map plus a ``slug → id``
index kept in step on every write. Callers only ever see deep copies, so the
stored records change exclusively through ``create``/``update``.
"""

import copy
import dataclasses
from datetime import datetime, timezone
from typing import Any, TypeVar
from uuid import uuid4

from app.application.interfaces import ChatSessionRepository, EntityRepository
from app.domain.entities import ChatSession
from app.domain.exceptions import EntityNotFoundError

T = TypeVar("T")

_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


class InMemoryEntityRepository(EntityRepository[T]):
    """Implements the EntityRepository port with plain dictionaries."""

    def __init__(
        self,
        entity_name: str,
        *,
        default_order: str | None = None,
        slug_field: str | None = "slug",
    ):
        self.entity_name = entity_name
        self._default_order = default_order
        self._slug_field = slug_field
        self._rows: dict[str, T] = {}
        self._slug_index: dict[str, str] = {}

    # ── Index maintenance ───────────────────────────────────────────

    def _slug_of(self, entity: T) -> str | None:
        if self._slug_field is None:
            return None
        return getattr(entity, self._slug_field, None) or None

    def _index(self, entity: T) -> None:
        slug = self._slug_of(entity)
        if slug is not None:
            self._slug_index[slug] = entity.id  # type: ignore[attr-defined]

    def _unindex(self, entity: T) -> None:
        slug = self._slug_of(entity)
        if slug is None or self._slug_index.get(slug) != entity.id:  # type: ignore[attr-defined]
            return
        del self._slug_index[slug]
        # Another row may still carry the same slug (the store does not enforce uniqueness)
        for other in self._rows.values():
            if other is not entity and self._slug_of(other) == slug:
                self._slug_index[slug] = other.id  # type: ignore[attr-defined]
                break

    # ── CRUD ────────────────────────────────────────────────────────

    async def create(self, entity: T) -> T:
        now = datetime.now(timezone.utc)
        stored = copy.deepcopy(entity)
        if getattr(stored, "id", None) is None:
            stored.id = str(uuid4())  # type: ignore[attr-defined]
        stored.created_at = now  # type: ignore[attr-defined]
        stored.updated_at = now  # type: ignore[attr-defined]
        self._rows[stored.id] = stored  # type: ignore[attr-defined]
        self._index(stored)
        return copy.deepcopy(stored)

    async def get_by_id(self, entity_id: str) -> T | None:
        row = self._rows.get(entity_id)
        return copy.deepcopy(row) if row is not None else None

    async def get_by_key(self, key: str) -> T | None:
        row = self._rows.get(key)
        if row is None and key in self._slug_index:
            row = self._rows.get(self._slug_index[key])
        return copy.deepcopy(row) if row is not None else None

    async def find_one(self, **criteria: Any) -> T | None:
        for row in self._rows.values():
            if _matches(row, criteria):
                return copy.deepcopy(row)
        return None

    async def update(self, entity_id: str, changes: dict[str, Any]) -> T:
        existing = self._rows.get(entity_id)
        if existing is None:
            raise EntityNotFoundError(self.entity_name, entity_id)

        fields = {k: v for k, v in changes.items() if k not in _IMMUTABLE_FIELDS}
        fields["updated_at"] = datetime.now(timezone.utc)
        updated = dataclasses.replace(existing, **copy.deepcopy(fields))

        self._unindex(existing)
        self._rows[entity_id] = updated
        self._index(updated)
        return copy.deepcopy(updated)

    async def delete(self, entity_id: str) -> None:
        row = self._rows.pop(entity_id, None)
        if row is not None:
            self._unindex(row)

    async def list(
        self,
        filters: dict[str, Any] | None = None,
        *,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[T]:
        rows = [row for row in self._rows.values() if _matches(row, filters or {})]
        key = order_by or self._default_order
        if key is not None:
            rows = _sorted_by(rows, key, descending)
        return [copy.deepcopy(row) for row in rows]

    async def count(self, filters: dict[str, Any] | None = None) -> int:
        return sum(1 for row in self._rows.values() if _matches(row, filters or {}))


class InMemoryChatSessionRepository(ChatSessionRepository):
    """Implements the ChatSessionRepository port with an append-only list."""

    def __init__(self):
        self._sessions: list[ChatSession] = []

    async def create(self, session: ChatSession) -> ChatSession:
        stored = copy.deepcopy(session)
        stored.id = str(uuid4())
        self._sessions.append(stored)
        return copy.deepcopy(stored)

    async def count_for_device(
        self, device_id: str, start: datetime, end: datetime
    ) -> int:
        return sum(
            1
            for s in self._sessions
            if s.device_id == device_id and start <= s.timestamp < end
        )

    async def list_for_device(self, device_id: str) -> list[ChatSession]:
        return [copy.deepcopy(s) for s in self._sessions if s.device_id == device_id]


# ── Helpers ─────────────────────────────────────────────────────────


def _matches(row: Any, criteria: dict[str, Any]) -> bool:
    return all(getattr(row, name) == value for name, value in criteria.items())


def _sorted_by(rows: list[T], key: str, descending: bool) -> list[T]:
    """Stable sort on ``key``; rows whose value is ``None`` go last."""
    present = [r for r in rows if getattr(r, key) is not None]
    missing = [r for r in rows if getattr(r, key) is None]
    present.sort(key=lambda r: getattr(r, key), reverse=descending)
    return present + missing
