"""
Files component - facade implementation.

Validates keys and content, then delegates to a storage adapter.

Invariants:
- Key validation runs before any adapter call
- save never persists empty content; init(touch=True) is the one exception
- init only succeeds for keys the adapter reports as absent

The probe-then-create sequence in init is not atomic. Two callers racing
on the same absent key can both succeed unless the adapter serialises them.
"""

from __future__ import annotations

import logging

from filestorage.core.entities import FileRecord
from filestorage.core.ports.storage import (
    EmptyContentError,
    FileLike,
    InvalidKeyError,
    KeyExistsError,
    KeyNotFoundError,
    StorageAdapterPort,
)

logger = logging.getLogger(__name__)


class FileStorage:
    """Key-addressed file storage over a pluggable adapter."""

    def __init__(self, adapter: StorageAdapterPort) -> None:
        self.adapter = adapter

    def save(self, file: FileLike) -> bool:
        """
        Save changes to a file.

        Raises:
            InvalidKeyError: If key is invalid
            EmptyContentError: If file content is None or empty
        """
        self._validate_key(file.key)

        if not file.content:
            raise EmptyContentError(file.key)

        logger.debug("Saving %s", file.key)
        return self.adapter.save(file)

    def load(self, key: str) -> FileRecord:
        """
        Load a file for reading and modifying.

        Raises:
            InvalidKeyError: If key is invalid
            KeyNotFoundError: If no file is stored under key
        """
        self._validate_key(key)

        return self.adapter.load(key)

    def init(self, key: str, touch: bool = False) -> FileRecord:
        """
        Initialize a new file object for further modifying.

        With touch enabled the new empty file is saved immediately, reserving
        the key at the cost of one extra round trip to the backend.

        Raises:
            InvalidKeyError: If key is invalid
            KeyExistsError: If a file is already stored under key
        """
        self._validate_key(key)

        try:
            existing = self.load(key)
        except KeyNotFoundError:
            existing = None

        if existing is not None:
            raise KeyExistsError(key)

        file = self.adapter.init(key, touch)
        if touch:
            # Empty sentinel; bypasses the content check in save()
            logger.debug("Touching %s", key)
            self.adapter.save(file)

        return file

    def delete(self, key: str) -> bool:
        """
        Delete a file from storage.

        Raises:
            InvalidKeyError: If key is invalid
            KeyNotFoundError: If key does not match any file in storage
        """
        self._validate_key(key)

        logger.debug("Deleting %s", key)
        return self.adapter.delete(key)

    @staticmethod
    def _validate_key(key: object) -> bool:
        """Return True for a non-blank string key, raise InvalidKeyError otherwise."""
        if not isinstance(key, str) or not key.strip():
            raise InvalidKeyError(key)

        return True
