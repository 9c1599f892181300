"""
filestorage - validated save/load/init/delete over pluggable storage adapters.
"""

from filestorage.adapters import InMemoryStorage, LocalFileStorage, create_local_storage
from filestorage.components.files import FileStorage, create_file_storage
from filestorage.core.entities import FileRecord, StoredObject
from filestorage.core.ports.storage import (
    EmptyContentError,
    IntegrityError,
    InvalidKeyError,
    KeyExistsError,
    KeyNotFoundError,
    StorageAdapterPort,
    StorageError,
)

__all__ = [
    "EmptyContentError",
    "FileRecord",
    "FileStorage",
    "InMemoryStorage",
    "IntegrityError",
    "InvalidKeyError",
    "KeyExistsError",
    "KeyNotFoundError",
    "LocalFileStorage",
    "StorageAdapterPort",
    "StorageError",
    "StoredObject",
    "create_file_storage",
    "create_local_storage",
]
