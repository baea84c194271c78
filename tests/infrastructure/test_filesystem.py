"""Tests for filesystem operations — path derivation, file I/O, discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.conftest import make_document, write_raw, write_record_text
from todoctl.domain.errors import ConflictError, FormatError, StorageError
from todoctl.infrastructure.filesystem import (
    find_record_files,
    new_record,
    read_record_file,
    record_filename,
    record_path,
    write_record_file,
)


class TestPathDerivation:
    def test_zero_padded(self) -> None:
        assert record_filename(42) == "0000000042.todo.md"

    def test_max_id_fits_width(self) -> None:
        assert record_filename(2**32 - 1) == "4294967295.todo.md"

    def test_injective(self) -> None:
        ids = [0, 1, 10, 100, 99999, 2**32 - 1]
        assert len({record_filename(i) for i in ids}) == len(ids)

    def test_stable(self) -> None:
        assert record_filename(7) == record_filename(7)

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            record_filename(-1)

    def test_record_path_under_tasks_dir(self, tmp_path: Path) -> None:
        assert record_path(tmp_path, 42) == tmp_path / "0000000042.todo.md"

    def test_new_record_binds_canonical_path(self, tmp_path: Path) -> None:
        record = new_record(tmp_path, make_document(3))
        assert record.path == tmp_path / "0000000003.todo.md"


class TestReadWrite:
    def test_write_then_read(self, tmp_path: Path) -> None:
        record = new_record(tmp_path, make_document(1, body="\n# Hi\n", tags=["x"]))
        write_record_file(record)
        assert read_record_file(record.path) == record

    def test_write_refuses_overwrite(self, tmp_path: Path) -> None:
        record = new_record(tmp_path, make_document(1))
        record.path.write_text("existing")
        with pytest.raises(ConflictError):
            write_record_file(record)
        assert record.path.read_text() == "existing"

    def test_write_missing_directory(self, tmp_path: Path) -> None:
        record = new_record(tmp_path / "missing", make_document(1))
        with pytest.raises(StorageError):
            write_record_file(record)

    def test_write_preserves_newlines(self, tmp_path: Path) -> None:
        record = new_record(tmp_path, make_document(1, body="a\r\nb\n"))
        write_record_file(record)
        assert record.path.read_bytes().endswith(b"a\r\nb\n")

    def test_read_invalid(self, tmp_path: Path) -> None:
        path = write_raw(tmp_path, "junk.md", "no delimiters here")
        with pytest.raises(FormatError):
            read_record_file(path)


class TestFindRecordFiles:
    def test_filters_by_extension(self, tmp_path: Path) -> None:
        write_record_text(tmp_path, 1)
        write_raw(tmp_path, "notes.txt", "ignored")
        write_raw(tmp_path, "plain.md", "kept")
        names = [p.name for p in find_record_files(tmp_path)]
        assert names == ["0000000001.todo.md", "plain.md"]

    def test_skips_directories(self, tmp_path: Path) -> None:
        (tmp_path / "sub.md").mkdir()
        assert find_record_files(tmp_path) == []

    def test_not_recursive(self, tmp_path: Path) -> None:
        (tmp_path / "nested").mkdir()
        write_record_text(tmp_path / "nested", 1)
        assert find_record_files(tmp_path) == []

    def test_sorted(self, tmp_path: Path) -> None:
        for record_id in (3, 1, 2):
            write_record_text(tmp_path, record_id)
        names = [p.name for p in find_record_files(tmp_path)]
        assert names == sorted(names)

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(StorageError, match="todoctl init"):
            find_record_files(tmp_path / "tasks")
