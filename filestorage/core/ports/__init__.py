from .storage import (
    EmptyContentError,
    FileLike,
    IntegrityError,
    InvalidKeyError,
    KeyExistsError,
    KeyNotFoundError,
    StorageAdapterPort,
    StorageError,
)

__all__ = [
    "EmptyContentError",
    "FileLike",
    "IntegrityError",
    "InvalidKeyError",
    "KeyExistsError",
    "KeyNotFoundError",
    "StorageAdapterPort",
    "StorageError",
]
