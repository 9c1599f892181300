import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from filestorage.adapters.local_storage import LocalFileStorage
from filestorage.adapters.memory_storage import InMemoryStorage
from filestorage.config.models import StorageSettings
from filestorage.core.ports.storage import StorageAdapterPort

logger = logging.getLogger(__name__)

ENV_BACKEND = "FILESTORAGE_BACKEND"
ENV_PATH = "FILESTORAGE_PATH"


def _extract_yaml(content: str) -> str:
    # Accept a ```yaml fenced block inside a markdown document
    lines = content.splitlines()
    yaml_lines = []
    in_block = False
    found_block = False

    for line in lines:
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_settings(path: Path) -> StorageSettings:
    """
    Load and validate the settings file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_extract_yaml(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in settings file: {e}") from e

    try:
        return StorageSettings.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Settings validation failed:\n{e}") from e


def apply_env_overrides(settings: StorageSettings) -> StorageSettings:
    """Return a copy with FILESTORAGE_BACKEND / FILESTORAGE_PATH applied."""
    updates: dict[str, str] = {}
    if ENV_BACKEND in os.environ:
        updates["backend"] = os.environ[ENV_BACKEND]
    if ENV_PATH in os.environ:
        updates["base_path"] = os.environ[ENV_PATH]

    if not updates:
        return settings

    try:
        return StorageSettings.model_validate({**settings.model_dump(), **updates})
    except ValidationError as e:
        raise ValueError(f"Invalid storage environment overrides:\n{e}") from e


def build_adapter(settings: StorageSettings) -> StorageAdapterPort:
    """Create the storage adapter selected by settings."""
    if settings.backend == "local":
        logger.info("Using local storage at %s", settings.base_path)
        return LocalFileStorage(settings.base_path, allow_delete=settings.allow_delete)

    logger.info("Using in-memory storage")
    return InMemoryStorage()
