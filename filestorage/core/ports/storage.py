"""
File Storage Adapter Interface.

Protocol-based interface for key-addressed file persistence.
Implementations: in-memory (tests, default), local filesystem.

Contract:
- load/delete raise KeyNotFoundError when no record maps to the key
- init returns a new, empty record bound to the key; it need not persist it
- save persists the record and returns a success flag
"""

from __future__ import annotations

from typing import Protocol

from filestorage.core.entities import FileRecord


class FileLike(Protocol):
    """Anything the facade can save: a key plus its content."""

    key: str
    content: bytes | str | None


class StorageAdapterPort(Protocol):
    """
    Storage adapter port interface.

    The facade validates keys and content before calling any of these,
    so implementations never observe a blank key.
    """

    def save(self, record: FileLike) -> bool:
        """
        Persist a record under its key, replacing any previous content.

        Returns:
            True on success

        Raises:
            StorageError: Adapter-specific failures
        """
        ...

    def load(self, key: str) -> FileRecord:
        """
        Load the record stored under key.

        Raises:
            KeyNotFoundError: If key doesn't exist
        """
        ...

    def init(self, key: str, touch: bool = False) -> FileRecord:
        """
        Construct a new, empty record bound to key.

        The record is not persisted here; the facade saves it when touch is set.
        """
        ...

    def delete(self, key: str) -> bool:
        """
        Remove the record stored under key.

        Raises:
            KeyNotFoundError: If key doesn't exist
        """
        ...


class StorageError(Exception):
    """Base class for storage errors."""


class InvalidKeyError(StorageError):
    """Raised when a key is missing or blank after trimming."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"File key cannot be empty: {key!r}")


class EmptyContentError(StorageError):
    """Raised when saving a record without content."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Cannot save an empty file: {key}")


class KeyNotFoundError(StorageError):
    """Raised when key doesn't exist."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key not found: {key}")


class KeyExistsError(StorageError):
    """Raised when initializing a key that already holds a record."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"File already exists: {key}")


class IntegrityError(StorageError):
    """Raised when data integrity check fails."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Integrity check failed: expected {expected}, got {actual}")
