"""Domain entity for files attached to a product."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class AttachmentFileType(str, Enum):
    """Accepted attachment formats."""

    PDF = "pdf"
    MARKDOWN = "md"


@dataclass
class Attachment:
    """A PDF or Markdown file belonging to one product.

    ``content`` holds the raw text for Markdown files (captured at upload
    time for the in-app viewer) and is ``None`` for PDFs.
    """

    product_id: str
    filename: str
    original_name: str
    mime_type: str
    file_type: AttachmentFileType
    size: int
    url: str
    content: str | None = None
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
