"""Shared pytest fixtures and test helpers for todoctl tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from todoctl.config.settings import TodoSettings
from todoctl.domain.document import Document
from todoctl.domain.frontmatter import FrontMatter
from todoctl.infrastructure.data_root import DataRoot
from todoctl.infrastructure.filesystem import record_path
from todoctl.infrastructure.templates import default_template_source

CREATED = datetime(2024, 5, 1, 9, 30, tzinfo=UTC)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store_root(tmp_path: Path) -> Path:
    """Temporary data directory laid out the way ``todoctl init`` leaves it.

    This is the single source of truth for the store layout. All
    store-related fixtures build on this.
    """
    (tmp_path / "tasks").mkdir()
    (tmp_path / "templates").mkdir()
    (tmp_path / "templates" / "task.md.j2").write_text(default_template_source())
    return tmp_path


@pytest.fixture
def settings(store_root: Path) -> TodoSettings:
    return TodoSettings(base_dir=store_root)


@pytest.fixture
def data_root(settings: TodoSettings) -> DataRoot:
    return DataRoot(settings)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_document(record_id: int, body: str = "", **fields: object) -> Document:
    """Build a Document with a fixed creation time unless overridden."""
    fields.setdefault("created_at", CREATED)
    return Document(front_matter=FrontMatter(id=record_id, **fields), body=body)


def write_raw(tasks_dir: Path, name: str, content: str) -> Path:
    """Write *content* to ``tasks_dir/name`` and return the path."""
    path = tasks_dir / name
    path.write_text(content, encoding="utf-8")
    return path


def write_record_text(
    tasks_dir: Path,
    record_id: int,
    *,
    name: str | None = None,
    tags: str = "[]",
    body: str = "\n# Task\n",
) -> Path:
    """Write a well-formed record file for *record_id*."""
    filename = name or record_path(tasks_dir, record_id).name
    content = (
        "+++\n"
        f"id = {record_id}\n"
        'created_at = "2024-05-01T09:30:00Z"\n'
        f"tags = {tags}\n"
        "+++\n"
        f"{body}"
    )
    return write_raw(tasks_dir, filename, content)
