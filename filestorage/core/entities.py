"""
Domain entities for the file storage facade.

- FileRecord: a key plus its (possibly not yet written) content
- StoredObject: metadata a persistent adapter keeps next to the bytes
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "FileRecord",
    "StoredObject",
]

DEFAULT_CONTENT_TYPE = "application/octet-stream"


# --- FileRecord ---


class FileRecord(BaseModel):
    """
    Key-addressed file record.

    Invariants:
    - persistable only while content is non-empty, except the empty
      sentinel written by init(touch=True)
    - updated_at is None until an adapter has persisted the record
    """

    key: str
    content: bytes | str | None = None
    content_type: str = DEFAULT_CONTENT_TYPE
    updated_at: datetime | None = None

    def is_empty(self) -> bool:
        return not self.content


# --- StoredObject ---


@dataclass(frozen=True)
class StoredObject:
    """Metadata for a stored object."""

    key: str
    size_bytes: int
    content_type: str
    sha256: str
    etag: str
    is_text: bool
    updated_at: datetime
