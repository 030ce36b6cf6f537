"""Blog entities — categories and posts."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class BlogCategory:
    name: str
    slug: str
    description: str | None = None
    sort_order: int = 0
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class BlogPost:
    """A blog article.

    Public listings only show published posts; ``published_at`` is stamped
    when ``is_published`` first becomes true.
    """

    category_id: str
    title: str
    slug: str
    content: str
    author_id: str
    excerpt: str | None = None
    cover_image: str | None = None
    tags: list[str] = field(default_factory=list)
    read_time: int = 5  # minutes
    is_published: bool = False
    published_at: datetime | None = None
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
