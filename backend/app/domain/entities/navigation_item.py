"""Domain entity for entries of the site navigation menu."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class NavigationItem:
    """A menu entry. Listing order is ``position``; duplicates are allowed."""

    label: str
    href: str
    position: int = 0
    is_visible: bool = True
    icon: str | None = None
    description: str | None = None
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
