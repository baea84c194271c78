"""InitService — bootstrap a data directory.

Creates ``tasks/`` and ``templates/`` and seeds the default template.
Refuses to run when either directory already exists, so an existing
store is never clobbered.
"""

from __future__ import annotations

import logging

from todoctl.domain.errors import AlreadyInitializedError, StorageError
from todoctl.infrastructure.templates import (
    DEFAULT_TEMPLATE,
    TEMPLATE_EXTENSION,
    default_template_source,
)
from todoctl.services.base import BaseService
from todoctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class InitService(BaseService):
    """Initializes the store layout under the data root."""

    def existing_dirs(self) -> list[str]:
        """Names of the store directories already present under the data root."""
        return [d.name for d in (self._root.tasks_dir, self._root.templates_dir) if d.exists()]

    def init_store(self) -> ServiceResult:
        return self._run("init_store", self._init)

    def _init(self) -> ServiceResult:
        existing = self.existing_dirs()
        if existing:
            msg = f"directories already exist: {', '.join(existing)}"
            raise AlreadyInitializedError(
                msg,
                detail={"data_dir": str(self._root.root), "existing": existing},
            )

        template_path = self._root.templates_dir / f"{DEFAULT_TEMPLATE}{TEMPLATE_EXTENSION}"
        try:
            self._root.tasks_dir.mkdir(parents=True)
            self._root.templates_dir.mkdir(parents=True)
            template_path.write_text(default_template_source(), encoding="utf-8")
        except OSError as exc:
            msg = f"cannot initialize {self._root.root}: {exc.strerror or exc}"
            raise StorageError(msg, detail={"data_dir": str(self._root.root)}) from exc

        created = [self._root.tasks_dir, self._root.templates_dir, template_path]
        logger.debug("Initialized store at %s", self._root.root)
        return ServiceResult(
            ok=True,
            op="init_store",
            data={
                "data_dir": str(self._root.root),
                "created": [self._root.relative(p).as_posix() for p in created],
            },
        )
