from pathlib import Path

import pytest

from filestorage.adapters.local_storage import LocalFileStorage
from filestorage.adapters.memory_storage import InMemoryStorage
from filestorage.components.files import FileStorage
from tests.fakes import SpyAdapter


@pytest.fixture
def spy() -> SpyAdapter:
    return SpyAdapter()


@pytest.fixture
def storage(spy: SpyAdapter) -> FileStorage:
    return FileStorage(spy)


@pytest.fixture
def memory() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def local(tmp_path: Path) -> LocalFileStorage:
    return LocalFileStorage(tmp_path / "store")
