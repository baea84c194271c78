"""DataRoot — the data directory and the collaborators rooted in it.

Layout::

    <data_root>/
        tasks/       one file per record
        templates/   <name>.md.j2
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

from todoctl.infrastructure.filesystem import TASKS_DIR, TEMPLATES_DIR
from todoctl.infrastructure.store import FileRecordStore
from todoctl.infrastructure.templates import TemplateRegistry

if TYPE_CHECKING:
    from pathlib import Path

    from todoctl.config.settings import TodoSettings


class DataRoot:
    """Single dependency injected into every service."""

    def __init__(self, settings: TodoSettings) -> None:
        self.settings = settings
        self.root: Path = settings.data_root

    @property
    def tasks_dir(self) -> Path:
        return self.root / TASKS_DIR

    @property
    def templates_dir(self) -> Path:
        return self.root / TEMPLATES_DIR

    @cached_property
    def store(self) -> FileRecordStore:
        return FileRecordStore(self.tasks_dir)

    @cached_property
    def templates(self) -> TemplateRegistry:
        return TemplateRegistry(self.templates_dir)

    def relative(self, path: Path) -> Path:
        """Return *path* relative to the data root when it lies inside it."""
        try:
            return path.relative_to(self.root)
        except ValueError:
            return path
