"""Local filesystem storage for product attachments.

Storage layout:
    <upload_dir>/attachments/<stem>_<YYYYMMDD_HHmmss>_<token>.<ext>
"""

import logging
import re
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class StoredFile:
    """Result of storing a single file on disk."""

    stored_path: str
    filename: str
    original_name: str
    file_size: int


def _datetime_stamp() -> str:
    """Return a UTC datetime stamp suitable for filenames: YYYYMMDD_HHmmss."""
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def _sanitise(name: str, max_len: int = 80) -> str:
    """Replace non-word characters with underscores and truncate."""
    return re.sub(r"[^\w\-]", "_", name)[:max_len].strip("_") or "unnamed"


class LocalFileStorage:
    """Infrastructure adapter for local file storage."""

    def __init__(self, upload_dir: str, subdir: str = "attachments"):
        self._root = Path(upload_dir) / subdir
        self._root.mkdir(parents=True, exist_ok=True)

    async def store_file(self, content: bytes, filename: str) -> StoredFile:
        """Write ``content`` under a collision-free name derived from ``filename``.

        Two uploads of the same name within one second still land in
        distinct files thanks to the random token.
        """
        original = Path(filename).name
        stem = Path(original).stem
        suffix = Path(original).suffix.lower()  # includes the dot
        stored_name = f"{_sanitise(stem)}_{_datetime_stamp()}_{secrets.token_hex(4)}{suffix}"

        dest_path = self._root / stored_name
        dest_path.write_bytes(content)

        logger.info("Stored file: %s (%d bytes)", dest_path, len(content))

        return StoredFile(
            stored_path=str(dest_path),
            filename=stored_name,
            original_name=original,
            file_size=len(content),
        )

    # ── Utilities ───────────────────────────────────────────────────

    def get_file_path(self, stored_path: str) -> Path:
        """Return the path to a stored file."""
        return Path(stored_path)

    def file_exists(self, stored_path: str) -> bool:
        return Path(stored_path).is_file()

    async def delete_file(self, stored_path: str) -> bool:
        """Delete a stored file from disk.

        Returns True if successfully deleted, False if not found.
        """
        file_path = Path(stored_path)
        if not file_path.exists():
            return False

        file_path.unlink(missing_ok=True)
        logger.info("Deleted file from disk: %s", stored_path)
        return True
