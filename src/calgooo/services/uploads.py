"""Image upload storage service."""

import logging
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import PurePath
from typing import Protocol

from calgooo.domain.uploads import UploadRecord

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 20
MAX_LIST_LIMIT = 100
DEFAULT_SUFFIX = ".jpg"


class UploadRepository(Protocol):
    """Persistence interface for upload metadata."""

    def add_upload(self, record: UploadRecord) -> None:
        """Store upload metadata as the newest entry."""

    def list_uploads(self, limit: int) -> list[UploadRecord]:
        """Return uploads, newest first."""


class FileStorage(Protocol):
    """Interface for storing uploaded bytes."""

    def save(self, filename: str, content: bytes) -> None:
        """Write content under the given filename."""


@dataclass
class UploadService:
    """Stores uploaded images and tracks their metadata."""

    repository: UploadRepository
    storage: FileStorage
    max_bytes: int
    public_prefix: str = "/uploads"

    def save_image(
        self, original_name: str | None, content: bytes, base_url: str
    ) -> UploadRecord:
        """Persist an image and return its record."""
        if len(content) > self.max_bytes:
            raise ValueError(f"image exceeds {self.max_bytes} bytes")
        now = datetime.now(tz=UTC)
        filename = build_filename(original_name, now)
        self.storage.save(filename, content)
        url = f"{self.public_prefix}/{filename}"
        record = UploadRecord(
            id=filename,
            filename=filename,
            url=url,
            absolute_url=f"{base_url.rstrip('/')}{url}",
            created_at=now,
        )
        self.repository.add_upload(record)
        logger.info(
            "Image stored", extra={"upload_filename": filename, "size": len(content)}
        )
        return record

    def list_recent(self, limit: object = None) -> list[UploadRecord]:
        """Return recent uploads with a bounded limit."""
        return self.repository.list_uploads(parse_limit(limit))


def build_filename(original_name: str | None, now: datetime) -> str:
    """Return a unique stored filename keeping the original suffix."""
    suffix = PurePath(original_name or "").suffix or DEFAULT_SUFFIX
    millis = int(now.timestamp() * 1000)
    return f"img_{millis}_{secrets.token_hex(5)}{suffix}"


def parse_limit(raw: object) -> int:
    """Parse a list limit, defaulting to 20 and capping at 100."""
    if raw is None or raw == "":
        return DEFAULT_LIST_LIMIT
    try:
        value = int(str(raw))
    except ValueError:
        return DEFAULT_LIST_LIMIT
    return max(0, min(MAX_LIST_LIMIT, value))
