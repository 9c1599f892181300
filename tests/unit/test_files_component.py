"""
Files component unit tests.

Entry points convert facade exceptions into coded errors.
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from filestorage.adapters.local_storage import LocalFileStorage
from filestorage.adapters.memory_storage import InMemoryStorage
from filestorage.components.files import (
    DeleteFileInput,
    FileStorage,
    InitFileInput,
    LoadFileInput,
    SaveFileInput,
    create_file_storage,
    run_delete,
    run_init,
    run_load,
    run_save,
    to_validation_error,
)
from filestorage.config.models import StorageSettings
from filestorage.core.entities import FileRecord
from filestorage.core.ports.storage import IntegrityError, StorageError


@pytest.fixture
def service() -> FileStorage:
    return FileStorage(InMemoryStorage())


class TestRunSave:
    def test_save_success(self, service: FileStorage) -> None:
        result = run_save(SaveFileInput(FileRecord(key="a", content="x")), service)

        assert result.success is True
        assert result.saved is True
        assert result.errors == []

    def test_save_empty_content(self, service: FileStorage) -> None:
        result = run_save(SaveFileInput(FileRecord(key="a")), service)

        assert result.success is False
        assert result.saved is False
        assert len(result.errors) == 1
        assert result.errors[0].code == "empty_content"
        assert result.errors[0].field == "content"

    def test_save_invalid_key(self, service: FileStorage) -> None:
        result = run_save(SaveFileInput(FileRecord(key=" ", content="x")), service)

        assert result.success is False
        assert result.errors[0].code == "invalid_key"
        assert result.errors[0].field == "key"

    def test_adapter_reporting_failure(self) -> None:
        adapter = Mock()
        adapter.save.return_value = False

        result = run_save(SaveFileInput(FileRecord(key="a", content="x")), FileStorage(adapter))

        assert result.success is False
        assert result.errors == []


class TestRunLoad:
    def test_load_success(self, service: FileStorage) -> None:
        service.save(FileRecord(key="a", content="x"))

        result = run_load(LoadFileInput("a"), service)

        assert result.success is True
        assert result.record is not None
        assert result.record.content == "x"

    def test_load_not_found(self, service: FileStorage) -> None:
        result = run_load(LoadFileInput("missing"), service)

        assert result.success is False
        assert result.record is None
        assert result.errors[0].code == "not_found"

    def test_load_none_key(self, service: FileStorage) -> None:
        result = run_load(LoadFileInput(None), service)
        assert result.errors[0].code == "invalid_key"


class TestRunInit:
    def test_init_touch(self, service: FileStorage) -> None:
        result = run_init(InitFileInput("a", touch=True), service)

        assert result.success is True
        assert result.record is not None
        assert result.record.key == "a"
        assert run_load(LoadFileInput("a"), service).success is True

    def test_init_already_exists(self, service: FileStorage) -> None:
        run_init(InitFileInput("a", touch=True), service)

        result = run_init(InitFileInput("a"), service)

        assert result.success is False
        assert result.errors[0].code == "already_exists"


class TestRunDelete:
    def test_delete_success(self, service: FileStorage) -> None:
        service.save(FileRecord(key="a", content="x"))

        result = run_delete(DeleteFileInput("a"), service)

        assert result.success is True
        assert result.deleted is True

    def test_delete_not_found(self, service: FileStorage) -> None:
        result = run_delete(DeleteFileInput("a"), service)

        assert result.success is False
        assert result.deleted is False
        assert result.errors[0].code == "not_found"


class TestAdapterErrors:
    """Adapter-specific errors are never converted."""

    def test_integrity_error_propagates(self) -> None:
        adapter = Mock()
        adapter.load.side_effect = IntegrityError("aa", "bb")

        with pytest.raises(IntegrityError):
            run_load(LoadFileInput("a"), FileStorage(adapter))

    def test_to_validation_error_reraises_unknown(self) -> None:
        with pytest.raises(StorageError, match="boom"):
            to_validation_error(StorageError("boom"))


class TestFactory:
    def test_defaults_to_memory(self) -> None:
        storage = create_file_storage()
        assert isinstance(storage.adapter, InMemoryStorage)

    def test_explicit_adapter_wins(self) -> None:
        adapter = InMemoryStorage()
        storage = create_file_storage(adapter, StorageSettings(backend="local"))
        assert storage.adapter is adapter

    def test_local_from_settings(self, tmp_path) -> None:
        settings = StorageSettings(backend="local", base_path=str(tmp_path), allow_delete=False)

        storage = create_file_storage(settings=settings)

        assert isinstance(storage.adapter, LocalFileStorage)
        assert storage.adapter.allow_delete is False
