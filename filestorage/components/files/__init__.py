"""
Files component - validated save/load/init/delete over a storage adapter.
"""

from ._impl import FileStorage
from .component import (
    create_file_storage,
    run_delete,
    run_init,
    run_load,
    run_save,
    to_validation_error,
)
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

__all__ = [
    # Entry points
    "run_delete",
    "run_init",
    "run_load",
    "run_save",
    # Helpers
    "to_validation_error",
    # Service class
    "FileStorage",
    "create_file_storage",
    # Input models
    "DeleteFileInput",
    "InitFileInput",
    "LoadFileInput",
    "SaveFileInput",
    # Output models
    "DeleteOutput",
    "FileOutput",
    "FileValidationError",
    "SaveOutput",
]
