"""Tests for CreateService — load, allocate, render, persist."""

from __future__ import annotations

from pathlib import Path

from tests.conftest import write_raw, write_record_text
from todoctl.config.models import NewConfig
from todoctl.config.settings import TodoSettings
from todoctl.domain.document import parse_document
from todoctl.infrastructure.data_root import DataRoot
from todoctl.services.create import CreateService, merge_tags


class TestCreateRecord:
    def test_first_record(self, data_root: DataRoot) -> None:
        result = CreateService(data_root).create_record(title="Buy milk", tags=["errand"])
        assert result.ok, result.error
        assert result.op == "new_record"
        assert result.data["id"] == 1
        assert result.data["path"] == "tasks/0000000001.todo.md"
        assert result.data["filename"] == "0000000001.todo.md"
        assert result.data["template"] == "task"
        assert result.data["tags"] == ["errand"]

    def test_file_written(self, data_root: DataRoot) -> None:
        result = CreateService(data_root).create_record(title="Buy milk", tags=["errand"])
        content = (data_root.root / result.data["path"]).read_text()
        doc = parse_document(content)
        assert doc.front_matter.id == 1
        assert doc.front_matter.tags == ["errand"]
        assert "# Buy milk" in doc.body

    def test_next_id_after_existing(self, data_root: DataRoot) -> None:
        write_record_text(data_root.tasks_dir, 3)
        write_record_text(data_root.tasks_dir, 41, name="custom.md")
        result = CreateService(data_root).create_record()
        assert result.data["id"] == 42
        assert result.data["path"] == "tasks/0000000042.todo.md"

    def test_sequential_creates(self, data_root: DataRoot) -> None:
        svc = CreateService(data_root)
        ids = [svc.create_record().data["id"] for _ in range(3)]
        assert ids == [1, 2, 3]

    def test_garbage_files_ignored(self, data_root: DataRoot) -> None:
        write_raw(data_root.tasks_dir, "9999999999.todo.md", "garbage")
        result = CreateService(data_root).create_record()
        assert result.data["id"] == 1

    def test_duplicate_on_disk(self, data_root: DataRoot) -> None:
        write_record_text(data_root.tasks_dir, 5, name="a.md")
        write_record_text(data_root.tasks_dir, 5, name="b.md")
        result = CreateService(data_root).create_record()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "CONFLICT"
        assert list(data_root.tasks_dir.glob("*.todo.md")) == []

    def test_missing_template(self, data_root: DataRoot) -> None:
        result = CreateService(data_root).create_record(template="nope")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "TEMPLATE_ERROR"

    def test_broken_template(self, data_root: DataRoot) -> None:
        (data_root.templates_dir / "broken.md.j2").write_text("+++\nid = {{ id }}\n")
        result = CreateService(data_root).create_record(template="broken")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "FORMAT_ERROR"
        assert result.error.detail["template"] == "broken"
        assert "broken" in result.error.message
        assert list(data_root.tasks_dir.iterdir()) == []

    def test_template_with_hardcoded_id_conflicts(self, data_root: DataRoot) -> None:
        write_record_text(data_root.tasks_dir, 1, name="one.md")
        (data_root.templates_dir / "fixed.md.j2").write_text(
            '+++\nid = 1\ncreated_at = "2024-05-01T09:30:00Z"\n+++\n'
        )
        result = CreateService(data_root).create_record(template="fixed")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "CONFLICT"

    def test_uninitialized_store(self, tmp_path: Path) -> None:
        root = DataRoot(TodoSettings(base_dir=tmp_path))
        result = CreateService(root).create_record()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "IO_ERROR"

    def test_configured_defaults(self, store_root: Path) -> None:
        (store_root / "templates" / "bug.md.j2").write_text(
            (store_root / "templates" / "task.md.j2").read_text()
        )
        settings = TodoSettings(
            base_dir=store_root,
            new=NewConfig(template="bug", tags=["inbox"]),
        )
        result = CreateService(DataRoot(settings)).create_record(tags=["x", "inbox"])
        assert result.ok, result.error
        assert result.data["template"] == "bug"
        assert result.data["tags"] == ["inbox", "x"]


class TestMergeTags:
    def test_order_and_dedup(self) -> None:
        assert merge_tags(["a", "b"], ("b", "c", "a")) == ["a", "b", "c"]

    def test_blanks_dropped(self) -> None:
        assert merge_tags([" a ", ""], ["  "]) == ["a"]
