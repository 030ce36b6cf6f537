"""Application service (use case) for product attachments (PDF / Markdown)."""

import logging

from app.application.interfaces import CatalogStore
from app.domain.entities import Attachment, AttachmentFileType
from app.domain.exceptions import EntityNotFoundError, InvalidAttachmentError
from app.infrastructure.storage.local_file_storage import LocalFileStorage

logger = logging.getLogger(__name__)

_MARKDOWN_MIME_TYPES = frozenset({"text/markdown", "text/x-markdown"})
_PDF_MIME_TYPE = "application/pdf"
_READ_CHUNK_SIZE = 64 * 1024


def detect_file_type(filename: str, mime_type: str | None) -> AttachmentFileType | None:
    """Classify an upload by name and MIME type; ``None`` when not accepted."""
    name = filename.lower()
    mime = (mime_type or "").lower()
    if name.endswith(".md") or mime in _MARKDOWN_MIME_TYPES:
        return AttachmentFileType.MARKDOWN
    if mime == _PDF_MIME_TYPE or name.endswith(".pdf"):
        return AttachmentFileType.PDF
    return None


async def read_limited(upload, limit: int, chunk_size: int = _READ_CHUNK_SIZE) -> bytes:
    """Read at most ``limit + 1`` bytes from an async ``read(size)`` source.

    A result longer than ``limit`` means the upload is over the limit; the
    rest of the stream is never read.
    """
    chunks: list[bytes] = []
    remaining = limit + 1
    while remaining > 0:
        chunk = await upload.read(min(chunk_size, remaining))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


class AttachmentService:
    """Stores uploaded files on disk and tracks them per product."""

    def __init__(
        self,
        store: CatalogStore,
        file_storage: LocalFileStorage,
        max_upload_size_mb: int = 10,
    ):
        self._attachments = store.attachments
        self._file_storage = file_storage
        self._max_bytes = max_upload_size_mb * 1024 * 1024

    @property
    def max_upload_bytes(self) -> int:
        return self._max_bytes

    async def get_attachments(self, product_id: str) -> list[Attachment]:
        return await self._attachments.list({"product_id": product_id})

    async def get_attachment(self, attachment_id: str) -> Attachment:
        attachment = await self._attachments.get_by_id(attachment_id)
        if attachment is None:
            raise EntityNotFoundError(self._attachments.entity_name, attachment_id)
        return attachment

    async def upload_attachment(
        self,
        product_id: str,
        filename: str,
        mime_type: str | None,
        content: bytes,
    ) -> Attachment:
        """Validate, store and register an uploaded file.

        Raises:
            InvalidAttachmentError: Unsupported type, or larger than the limit
                (``too_large=True``).
        """
        file_type = detect_file_type(filename, mime_type)
        if file_type is None:
            raise InvalidAttachmentError("Only PDF and Markdown files are allowed")
        if len(content) > self._max_bytes:
            raise InvalidAttachmentError(
                f"File exceeds the {self._max_bytes // (1024 * 1024)}MB upload limit",
                too_large=True,
            )

        text = None
        if file_type is AttachmentFileType.MARKDOWN:
            try:
                text = content.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise InvalidAttachmentError("Markdown files must be UTF-8 encoded") from exc

        stored = await self._file_storage.store_file(content, filename)
        attachment = await self._attachments.create(
            Attachment(
                product_id=product_id,
                filename=stored.filename,
                original_name=stored.original_name,
                mime_type=mime_type or _default_mime(file_type),
                file_type=file_type,
                size=stored.file_size,
                url=stored.stored_path,
                content=text,
            )
        )
        logger.info(
            "Attached %s to product %s (%d bytes)",
            attachment.original_name, product_id, attachment.size,
        )
        return attachment

    async def delete_attachment(self, attachment_id: str) -> None:
        attachment = await self._attachments.get_by_id(attachment_id)
        if attachment is None:
            return
        await self._file_storage.delete_file(attachment.url)
        await self._attachments.delete(attachment_id)

    def file_path(self, attachment: Attachment):
        """Filesystem path of an attachment, or ``None`` if the file is gone."""
        if not self._file_storage.file_exists(attachment.url):
            return None
        return self._file_storage.get_file_path(attachment.url)


def _default_mime(file_type: AttachmentFileType) -> str:
    return _PDF_MIME_TYPE if file_type is AttachmentFileType.PDF else "text/markdown"
