"""Shared building blocks for the request/response schemas."""

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel


def _assume_utc(value: datetime) -> datetime:
    """Naive timestamps are taken as UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_assume_utc)]


class PartialUpdate(BaseModel):
    """Only the fields the client actually sent become changes.

    An explicit ``null`` clears a nullable field; for the names listed in
    ``non_nullable`` it is ignored instead.
    """

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, Any]:
        values = self.model_dump(exclude_unset=True)
        return {
            name: value
            for name, value in values.items()
            if value is not None or name not in self.non_nullable
        }
