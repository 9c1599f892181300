"""
End-to-end key lifecycle against the local filesystem adapter.
"""

from pathlib import Path

import pytest

from filestorage import (
    EmptyContentError,
    FileRecord,
    KeyExistsError,
    KeyNotFoundError,
    LocalFileStorage,
    create_file_storage,
)


@pytest.fixture
def files(tmp_path: Path):
    return create_file_storage(LocalFileStorage(tmp_path / "files"))


def test_touch_then_load_returns_empty_record(files):
    files.init("reports/q1.csv", touch=True)

    loaded = files.load("reports/q1.csv")

    assert loaded.key == "reports/q1.csv"
    assert loaded.is_empty()


def test_reserved_key_can_be_filled_in(files):
    record = files.init("reports/q1.csv", touch=True)
    record.content = "region,total\nnorth,12\n"
    record.content_type = "text/csv"

    assert files.save(record) is True

    loaded = files.load("reports/q1.csv")
    assert loaded.content == "region,total\nnorth,12\n"
    assert loaded.content_type == "text/csv"


def test_full_lifecycle(files):
    with pytest.raises(KeyNotFoundError):
        files.load("doc")

    record = files.init("doc")
    with pytest.raises(EmptyContentError):
        files.save(record)

    record.content = b"payload"
    files.save(record)

    with pytest.raises(KeyExistsError):
        files.init("doc")

    assert files.delete("doc") is True
    with pytest.raises(KeyNotFoundError):
        files.delete("doc")


def test_state_survives_new_facade(tmp_path: Path):
    first = create_file_storage(LocalFileStorage(tmp_path / "files"))
    first.save(FileRecord(key="shared", content="persisted"))

    second = create_file_storage(LocalFileStorage(tmp_path / "files"))

    assert second.load("shared").content == "persisted"
