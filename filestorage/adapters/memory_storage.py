"""
In-memory storage adapter.

Dict-backed implementation of StorageAdapterPort for tests and
single-process use. Nothing survives the process.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from filestorage.core.entities import DEFAULT_CONTENT_TYPE, FileRecord
from filestorage.core.ports.storage import FileLike, KeyNotFoundError

logger = logging.getLogger(__name__)


class InMemoryStorage:
    """
    In-memory implementation of StorageAdapterPort.

    Records are copied on the way in and on the way out, so callers
    mutating a loaded record do not change stored state until they save.
    """

    def __init__(self) -> None:
        self._records: dict[str, FileRecord] = {}

    def save(self, record: FileLike) -> bool:
        stored = FileRecord(
            key=record.key,
            content=record.content,
            content_type=getattr(record, "content_type", DEFAULT_CONTENT_TYPE),
            updated_at=datetime.now(UTC),
        )
        self._records[record.key] = stored
        if isinstance(record, FileRecord):
            record.updated_at = stored.updated_at
        logger.debug("Stored %s in memory", record.key)
        return True

    def load(self, key: str) -> FileRecord:
        try:
            return self._records[key].model_copy()
        except KeyError:
            raise KeyNotFoundError(key) from None

    def init(self, key: str, touch: bool = False) -> FileRecord:
        # Persisting a touched record is the facade's job
        return FileRecord(key=key, content=b"")

    def delete(self, key: str) -> bool:
        if key not in self._records:
            raise KeyNotFoundError(key)
        del self._records[key]
        logger.debug("Removed %s from memory", key)
        return True

    def exists(self, key: str) -> bool:
        return key in self._records

    def keys(self) -> list[str]:
        return sorted(self._records)
