"""
Local Filesystem Storage Adapter.

Implements StorageAdapterPort on top of a local directory.
Each key is stored as a data file plus a JSON metadata file.

Invariants:
- Keys never resolve outside base_path
- sha256 stored equals sha256 served; mismatches raise IntegrityError
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from filestorage.core.entities import DEFAULT_CONTENT_TYPE, FileRecord, StoredObject
from filestorage.core.ports.storage import (
    FileLike,
    IntegrityError,
    KeyNotFoundError,
    StorageError,
)

logger = logging.getLogger(__name__)


class LocalFileStorage:
    """
    Local filesystem implementation of StorageAdapterPort.

    Directory structure: {base_path}/{key}.bin + {base_path}/{key}.meta.json

    Example key: "reports/2026/q1.txt" -> {base_path}/reports/2026/q1.txt.bin
    """

    def __init__(
        self,
        base_path: str | Path,
        *,
        create_dirs: bool = True,
        allow_delete: bool = True,
    ) -> None:
        """
        Initialize local file storage.

        Args:
            base_path: Root directory for storage
            create_dirs: Whether to create directories if they don't exist
            allow_delete: Whether to allow deletion (disable for archival stores)
        """
        self.base_path = Path(base_path)
        self.allow_delete = allow_delete

        if create_dirs:
            self.base_path.mkdir(parents=True, exist_ok=True)

    def _key_to_paths(self, key: str) -> tuple[Path, Path]:
        """Convert storage key to file paths (data and metadata)."""
        # One key, one file: reject anything path normalisation would rewrite
        segments = key.split("/")
        if key != key.strip() or any(s in ("", ".", "..") or s != s.strip() for s in segments):
            raise StorageError(f"Key is not a normalised relative path: {key!r}")

        root = self.base_path.resolve()
        target = (root / key).resolve()
        if target == root or not target.is_relative_to(root):
            raise StorageError(f"Key escapes storage root: {key}")
        data_path = target.with_name(f"{target.name}.bin")
        meta_path = target.with_name(f"{target.name}.meta.json")
        return data_path, meta_path

    @staticmethod
    def _encode(content: bytes | str | None) -> tuple[bytes, bool]:
        if content is None:
            return b"", False
        if isinstance(content, str):
            return content.encode("utf-8"), True
        return content, False

    def _compute_etag(self, sha256_hex: str) -> str:
        """Compute ETag from sha256 hash."""
        return f'"{sha256_hex[:32]}"'

    def save(self, record: FileLike) -> bool:
        """Write record bytes and metadata, replacing any previous version."""
        data_path, meta_path = self._key_to_paths(record.key)
        data_bytes, is_text = self._encode(record.content)
        sha256_hex = hashlib.sha256(data_bytes).hexdigest()
        now = datetime.now(UTC)

        data_path.parent.mkdir(parents=True, exist_ok=True)

        with open(data_path, "wb") as f:
            f.write(data_bytes)

        metadata = StoredObject(
            key=record.key,
            size_bytes=len(data_bytes),
            content_type=getattr(record, "content_type", DEFAULT_CONTENT_TYPE),
            sha256=sha256_hex,
            etag=self._compute_etag(sha256_hex),
            is_text=is_text,
            updated_at=now,
        )

        with open(meta_path, "w") as f:
            json.dump(
                {
                    "key": metadata.key,
                    "size_bytes": metadata.size_bytes,
                    "content_type": metadata.content_type,
                    "sha256": metadata.sha256,
                    "etag": metadata.etag,
                    "is_text": metadata.is_text,
                    "updated_at": metadata.updated_at.isoformat(),
                },
                f,
            )

        if isinstance(record, FileRecord):
            record.updated_at = now
        logger.debug("Wrote %d bytes for %s", metadata.size_bytes, record.key)
        return True

    def load(self, key: str) -> FileRecord:
        """Read record by key, verifying integrity."""
        data_path, meta_path = self._key_to_paths(key)

        if not data_path.exists():
            raise KeyNotFoundError(key)

        with open(data_path, "rb") as f:
            data = f.read()

        metadata = self._load_metadata(meta_path, key)

        actual_sha256 = hashlib.sha256(data).hexdigest()
        if actual_sha256 != metadata.sha256:
            raise IntegrityError(metadata.sha256, actual_sha256)

        content: bytes | str = data.decode("utf-8") if metadata.is_text else data
        return FileRecord(
            key=key,
            content=content,
            content_type=metadata.content_type,
            updated_at=metadata.updated_at,
        )

    def init(self, key: str, touch: bool = False) -> FileRecord:
        """Return an empty record bound to key without writing anything."""
        # Reject keys outside the root before the caller tries to save
        self._key_to_paths(key)
        return FileRecord(key=key, content=b"")

    def delete(self, key: str) -> bool:
        """
        Delete record by key.

        Only allowed if allow_delete=True.
        """
        if not self.allow_delete:
            raise StorageError("Delete not allowed: storage is configured as immutable")

        data_path, meta_path = self._key_to_paths(key)

        if not data_path.exists():
            raise KeyNotFoundError(key)

        data_path.unlink()
        if meta_path.exists():
            meta_path.unlink()

        logger.info("Deleted %s", key)
        return True

    def exists(self, key: str) -> bool:
        """Check if key exists in storage."""
        data_path, _ = self._key_to_paths(key)
        return data_path.exists()

    def get_metadata(self, key: str) -> StoredObject | None:
        """Get object metadata without fetching bytes."""
        data_path, meta_path = self._key_to_paths(key)

        if not data_path.exists():
            return None

        return self._load_metadata(meta_path, key)

    def _load_metadata(self, meta_path: Path, key: str) -> StoredObject:
        """Load metadata from JSON file."""
        if not meta_path.exists():
            # Data written without metadata is treated as opaque bytes
            data_path = meta_path.with_name(meta_path.name.replace(".meta.json", ".bin"))
            with open(data_path, "rb") as f:
                data = f.read()
            sha256_hex = hashlib.sha256(data).hexdigest()
            return StoredObject(
                key=key,
                size_bytes=len(data),
                content_type=DEFAULT_CONTENT_TYPE,
                sha256=sha256_hex,
                etag=self._compute_etag(sha256_hex),
                is_text=False,
                updated_at=datetime.fromtimestamp(data_path.stat().st_mtime, UTC),
            )

        with open(meta_path) as f:
            meta = json.load(f)

        return StoredObject(
            key=meta["key"],
            size_bytes=meta["size_bytes"],
            content_type=meta["content_type"],
            sha256=meta["sha256"],
            etag=meta["etag"],
            is_text=meta.get("is_text", False),
            updated_at=datetime.fromisoformat(meta["updated_at"]),
        )


def create_local_storage(
    base_path: str | Path | None = None,
    *,
    env_var: str = "FILESTORAGE_PATH",
    default_path: str = "./storage",
    allow_delete: bool = True,
) -> LocalFileStorage:
    """
    Factory function to create LocalFileStorage from config.

    Args:
        base_path: Explicit base path (overrides env var)
        env_var: Environment variable name for storage path
        default_path: Default path if not configured
        allow_delete: Whether to allow deletion

    Returns:
        Configured LocalFileStorage instance
    """
    if base_path is None:
        base_path = os.environ.get(env_var, default_path)

    return LocalFileStorage(base_path, allow_delete=allow_delete)
