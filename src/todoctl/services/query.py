"""QueryService — read-only views over the collection."""

from __future__ import annotations

from typing import Any

from todoctl.infrastructure.store import load_collection
from todoctl.services.base import BaseService
from todoctl.services.result import ServiceResult


class QueryService(BaseService):
    """Lists the records in the data directory."""

    def list_records(self, *, tag: str | None = None) -> ServiceResult:
        """List all records sorted by id, optionally only those tagged *tag*."""
        return self._run("list_records", lambda: self._list(tag))

    def _list(self, tag: str | None) -> ServiceResult:
        collection = load_collection(self._root.store)
        items: list[dict[str, Any]] = []
        for record_id in sorted(collection):
            record = collection[record_id]
            fm = record.document.front_matter
            if tag is not None and tag not in fm.tags:
                continue
            items.append(
                {
                    "id": record_id,
                    "created_at": fm.created_at.isoformat(),
                    "due_at": fm.due_at.isoformat() if fm.due_at else None,
                    "tags": list(fm.tags),
                    "path": self._root.relative(record.path).as_posix(),
                }
            )
        return ServiceResult(
            ok=True,
            op="list_records",
            data={"count": len(items), "items": items},
        )
