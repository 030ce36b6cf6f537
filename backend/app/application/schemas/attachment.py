"""Pydantic DTOs for product attachments."""

from datetime import datetime

from pydantic import BaseModel

from app.domain.entities import AttachmentFileType


class AttachmentResponse(BaseModel):
    """Attachment metadata. ``content`` is only set for Markdown files."""

    id: str
    product_id: str
    filename: str
    original_name: str
    mime_type: str
    file_type: AttachmentFileType
    size: int
    url: str
    content: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
