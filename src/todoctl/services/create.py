"""CreateService — new records from templates.

Pipeline: LOAD → ALLOCATE → RENDER → REPARSE → CONFIRM → PERSIST → RESPOND
"""

from __future__ import annotations

import logging

from todoctl.domain.collection import add_record, next_id
from todoctl.infrastructure.pipeline import create_record
from todoctl.infrastructure.store import load_collection
from todoctl.infrastructure.templates import TemplateVars
from todoctl.services.base import BaseService
from todoctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


def merge_tags(*groups: list[str] | tuple[str, ...]) -> list[str]:
    """Concatenate tag groups, keeping first occurrences and dropping blanks."""
    merged: list[str] = []
    for group in groups:
        for raw in group:
            tag = raw.strip()
            if tag and tag not in merged:
                merged.append(tag)
    return merged


class CreateService(BaseService):
    """Creates records by rendering a template against the next free id."""

    def create_record(
        self,
        *,
        template: str | None = None,
        title: str | None = None,
        tags: list[str] | tuple[str, ...] = (),
    ) -> ServiceResult:
        """Create and persist a new record.

        Falls back to the configured ``[new] template`` when *template* is
        None; configured ``[new] tags`` are prepended to *tags*.
        """
        defaults = self._root.settings.new
        template_name = template or defaults.template
        all_tags = merge_tags(defaults.tags, tags)
        return self._run(
            "new_record",
            lambda: self._create(template_name, title=title, tags=all_tags),
        )

    def _create(self, template_name: str, *, title: str | None, tags: list[str]) -> ServiceResult:
        collection = load_collection(self._root.store)
        record_id = next_id(collection)
        logger.debug("Allocated record id %d", record_id)

        variables = TemplateVars(id=record_id, title=title, tags=tags)
        record = create_record(
            self._root.templates,
            template_name,
            variables,
            self._root.tasks_dir,
        )

        # A template may hardcode its id; it must still be unique.
        add_record(collection, record)
        self._root.store.put(record)

        front_matter = record.document.front_matter
        return ServiceResult(
            ok=True,
            op="new_record",
            data={
                "id": record.id,
                "path": self._root.relative(record.path).as_posix(),
                "filename": record.path.name,
                "template": template_name,
                "created_at": front_matter.created_at.isoformat(),
                "tags": list(front_matter.tags),
            },
        )
