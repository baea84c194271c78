"""Tests for the ``init`` command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from todoctl.cli import cli


class TestInitCommand:
    def test_init_basic(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--data-dir", str(tmp_path), "init"])
        assert result.exit_code == 0, result.output
        assert "init_store" in result.output
        assert (tmp_path / "tasks").is_dir()
        assert (tmp_path / "templates" / "task.md.j2").is_file()

    def test_init_json_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "--data-dir", str(tmp_path), "init"])
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["created"] == ["tasks", "templates", "templates/task.md.j2"]

    def test_init_twice(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cli_runner.invoke(cli, ["--data-dir", str(tmp_path), "init"])
        result = cli_runner.invoke(cli, ["--data-dir", str(tmp_path), "init"])
        assert result.exit_code == 1
        assert "already exist" in result.output

    def test_init_then_new(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cli_runner.invoke(cli, ["--data-dir", str(tmp_path), "init"])
        result = cli_runner.invoke(cli, ["--data-dir", str(tmp_path), "new", "--title", "x"])
        assert result.exit_code == 0, result.output
        assert result.output.split() == ["tasks/0000000001.todo.md", "0000000001.todo.md"]
