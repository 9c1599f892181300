"""
Files component - key-addressed file storage.

Shell Layer - converts facade exceptions into coded validation errors.

Error codes:
- invalid_key: key missing or blank
- empty_content: save without content
- not_found: no record under key
- already_exists: init on a reserved key

Adapter-specific errors are not converted; they propagate to the caller.
"""

from __future__ import annotations

from filestorage.config.loader import build_adapter
from filestorage.config.models import StorageSettings
from filestorage.core.ports.storage import (
    EmptyContentError,
    InvalidKeyError,
    KeyExistsError,
    KeyNotFoundError,
    StorageAdapterPort,
    StorageError,
)

from ._impl import FileStorage
from .models import (
    DeleteFileInput,
    DeleteOutput,
    FileOutput,
    FileValidationError,
    InitFileInput,
    LoadFileInput,
    SaveFileInput,
    SaveOutput,
)

_CONVERTED = (InvalidKeyError, EmptyContentError, KeyNotFoundError, KeyExistsError)


def to_validation_error(exc: StorageError) -> FileValidationError:
    """Map a facade exception onto a coded validation error."""
    if isinstance(exc, InvalidKeyError):
        return FileValidationError(code="invalid_key", message=str(exc))
    if isinstance(exc, EmptyContentError):
        return FileValidationError(code="empty_content", message=str(exc), field="content")
    if isinstance(exc, KeyNotFoundError):
        return FileValidationError(code="not_found", message=str(exc))
    if isinstance(exc, KeyExistsError):
        return FileValidationError(code="already_exists", message=str(exc))
    raise exc


# --- Entry Points ---


def run_save(input_data: SaveFileInput, service: FileStorage) -> SaveOutput:
    """Save a record."""
    try:
        saved = service.save(input_data.record)
    except _CONVERTED as e:
        return SaveOutput(saved=False, errors=[to_validation_error(e)], success=False)

    return SaveOutput(saved=saved, success=saved)


def run_load(input_data: LoadFileInput, service: FileStorage) -> FileOutput:
    """Load a record by key."""
    try:
        record = service.load(input_data.key)  # type: ignore[arg-type]
    except _CONVERTED as e:
        return FileOutput(record=None, errors=[to_validation_error(e)], success=False)

    return FileOutput(record=record)


def run_init(input_data: InitFileInput, service: FileStorage) -> FileOutput:
    """Reserve a new key."""
    try:
        record = service.init(input_data.key, touch=input_data.touch)  # type: ignore[arg-type]
    except _CONVERTED as e:
        return FileOutput(record=None, errors=[to_validation_error(e)], success=False)

    return FileOutput(record=record)


def run_delete(input_data: DeleteFileInput, service: FileStorage) -> DeleteOutput:
    """Delete a record by key."""
    try:
        deleted = service.delete(input_data.key)  # type: ignore[arg-type]
    except _CONVERTED as e:
        return DeleteOutput(deleted=False, errors=[to_validation_error(e)], success=False)

    return DeleteOutput(deleted=deleted, success=deleted)


# --- Factory ---


def create_file_storage(
    adapter: StorageAdapterPort | None = None,
    settings: StorageSettings | None = None,
) -> FileStorage:
    """
    Build a FileStorage facade.

    An explicit adapter wins; otherwise one is built from settings
    (defaults to in-memory storage).
    """
    if adapter is None:
        adapter = build_adapter(settings or StorageSettings())
    return FileStorage(adapter)
