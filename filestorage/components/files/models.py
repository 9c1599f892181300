"""
Files component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from filestorage.core.entities import FileRecord

# --- Validation Error ---


@dataclass(frozen=True)
class FileValidationError:
    """File operation error with actionable message."""

    code: str
    message: str
    field: str = "key"


# --- Input Models ---


@dataclass(frozen=True)
class SaveFileInput:
    """Input for saving a record."""

    record: FileRecord


@dataclass(frozen=True)
class LoadFileInput:
    """Input for loading a record."""

    key: str | None


@dataclass(frozen=True)
class InitFileInput:
    """Input for reserving a new key."""

    key: str | None
    touch: bool = False  # Persist the empty record immediately


@dataclass(frozen=True)
class DeleteFileInput:
    """Input for deleting a record."""

    key: str | None


# --- Output Models ---


@dataclass(frozen=True)
class FileOutput:
    """Output containing a single record."""

    record: FileRecord | None
    errors: list[FileValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class SaveOutput:
    """Output from save operation."""

    saved: bool = False
    errors: list[FileValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class DeleteOutput:
    """Output from delete operation."""

    deleted: bool = False
    errors: list[FileValidationError] = field(default_factory=list)
    success: bool = True
