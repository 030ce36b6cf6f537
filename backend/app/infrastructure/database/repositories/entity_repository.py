"""Generic SQLAlchemy repository — one instance per (entity, ORM model) pair.

Entities and models share field names, so mapping is driven by the
entity's dataclass fields. Enum values are stored as their string value
and datetimes are normalised to UTC on the way out (SQLite hands back
naive values).
"""

import dataclasses
from datetime import datetime, timezone
from enum import Enum, EnumMeta
from typing import Any, TypeVar
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ChatSessionRepository, EntityRepository
from app.domain.entities import ChatSession
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.database.base import Base
from app.infrastructure.database.models import ChatSessionModel

T = TypeVar("T")

_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


class SQLAlchemyEntityRepository(EntityRepository[T]):
    """Implements the EntityRepository port using SQLAlchemy async sessions."""

    def __init__(
        self,
        session: AsyncSession,
        entity_cls: type[T],
        model_cls: type[Base],
        *,
        default_order: str | None = None,
        slug_field: str | None = "slug",
    ):
        self._session = session
        self._entity_cls = entity_cls
        self._model_cls = model_cls
        self._fields = {f.name: f for f in dataclasses.fields(entity_cls)}
        self._default_order = default_order
        self._slug_field = slug_field
        self.entity_name = entity_cls.__name__

    # ── Mapping ─────────────────────────────────────────────────────

    def _to_entity(self, model: Base) -> T:
        """Map ORM model → domain entity."""
        values = {}
        for name, spec in self._fields.items():
            value = getattr(model, name)
            if isinstance(spec.type, EnumMeta) and value is not None:
                value = spec.type(value)
            elif isinstance(value, datetime):
                value = _as_utc(value)
            elif isinstance(value, list):
                value = list(value)
            values[name] = value
        return self._entity_cls(**values)

    def _to_model(self, entity: T) -> Base:
        """Map domain entity → ORM model (for creation)."""
        return self._model_cls(
            **{name: _to_column(getattr(entity, name)) for name in self._fields}
        )

    def _column(self, name: str):
        if name not in self._fields:
            raise TypeError(f"{self.entity_name} has no field '{name}'")
        return getattr(self._model_cls, name)

    def _filtered(self, stmt, filters: dict[str, Any] | None):
        for name, value in (filters or {}).items():
            stmt = stmt.where(self._column(name) == _to_column(value))
        return stmt

    # ── CRUD ────────────────────────────────────────────────────────

    async def create(self, entity: T) -> T:
        now = datetime.now(timezone.utc)
        stored = dataclasses.replace(entity, created_at=now, updated_at=now)  # type: ignore[type-var]
        if stored.id is None:  # type: ignore[attr-defined]
            stored.id = str(uuid4())  # type: ignore[attr-defined]
        model = self._to_model(stored)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def get_by_id(self, entity_id: str) -> T | None:
        result = await self._session.get(self._model_cls, entity_id)
        return self._to_entity(result) if result else None

    async def get_by_key(self, key: str) -> T | None:
        found = await self.get_by_id(key)
        if found is not None or self._slug_field is None:
            return found
        return await self.find_one(**{self._slug_field: key})

    async def find_one(self, **criteria: Any) -> T | None:
        stmt = self._filtered(select(self._model_cls), criteria)
        stmt = stmt.order_by(self._model_cls.created_at, self._model_cls.id).limit(1)
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def update(self, entity_id: str, changes: dict[str, Any]) -> T:
        model = await self._session.get(self._model_cls, entity_id)
        if model is None:
            raise EntityNotFoundError(self.entity_name, entity_id)

        for name, value in changes.items():
            if name in _IMMUTABLE_FIELDS:
                continue
            self._column(name)
            setattr(model, name, _to_column(value))
        model.updated_at = datetime.now(timezone.utc)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, entity_id: str) -> None:
        model = await self._session.get(self._model_cls, entity_id)
        if model is None:
            return
        await self._session.delete(model)
        await self._session.flush()

    async def list(
        self,
        filters: dict[str, Any] | None = None,
        *,
        order_by: str | None = None,
        descending: bool = False,
    ):
        stmt = self._filtered(select(self._model_cls), filters)
        key = order_by or self._default_order
        if key is not None:
            column = self._column(key)
            column = column.desc() if descending else column.asc()
            stmt = stmt.order_by(column.nulls_last())
        stmt = stmt.order_by(self._model_cls.created_at, self._model_cls.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(self, filters: dict[str, Any] | None = None) -> int:
        stmt = self._filtered(select(func.count()).select_from(self._model_cls), filters)
        result = await self._session.execute(stmt)
        return result.scalar_one()


class SQLAlchemyChatSessionRepository(ChatSessionRepository):
    """Implements the ChatSessionRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ChatSessionModel) -> ChatSession:
        return ChatSession(
            id=model.id,
            device_id=model.device_id,
            question=model.question,
            response=model.response,
            timestamp=_as_utc(model.timestamp),
        )

    async def create(self, session: ChatSession) -> ChatSession:
        model = ChatSessionModel(
            id=str(uuid4()),
            device_id=session.device_id,
            question=session.question,
            response=session.response,
            timestamp=_as_utc(session.timestamp),
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def count_for_device(
        self, device_id: str, start: datetime, end: datetime
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(ChatSessionModel)
            .where(ChatSessionModel.device_id == device_id)
            .where(ChatSessionModel.timestamp >= _as_utc(start))
            .where(ChatSessionModel.timestamp < _as_utc(end))
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def list_for_device(self, device_id: str) -> list[ChatSession]:
        stmt = (
            select(ChatSessionModel)
            .where(ChatSessionModel.device_id == device_id)
            .order_by(ChatSessionModel.timestamp)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]


# ── Helpers ─────────────────────────────────────────────────────────


def _as_utc(value: datetime) -> datetime:
    """Attach UTC to naive values and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_column(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, list):
        return list(value)
    return value
