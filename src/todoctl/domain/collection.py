"""Records and the in-memory collection keyed by record identifier.

INVARIANT: Identifiers are unique within a collection. A duplicate is a
fatal conflict, never silently resolved.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from todoctl.domain.document import Document
from todoctl.domain.errors import ConflictError
from todoctl.domain.frontmatter import MAX_RECORD_ID


class Record(BaseModel):
    """A document bound to its storage location.

    The path is assigned once, when the record is created or loaded.
    """

    model_config = {"frozen": True}

    path: Path
    document: Document

    @property
    def id(self) -> int:
        return self.document.front_matter.id


Collection = dict[int, Record]


def add_record(collection: Collection, record: Record) -> None:
    """Insert *record* into *collection*, keyed by its identifier.

    Raises:
        ConflictError: The identifier is already present.
    """
    existing = collection.get(record.id)
    if existing is not None:
        msg = f"duplicate record id {record.id}: {existing.path} and {record.path}"
        raise ConflictError(
            msg,
            detail={"id": record.id, "paths": [str(existing.path), str(record.path)]},
        )
    collection[record.id] = record


def next_id(collection: Collection) -> int:
    """Return one more than the largest identifier, or ``1`` when empty.

    Raises:
        ConflictError: The largest identifier is already ``MAX_RECORD_ID``.
    """
    if not collection:
        return 1
    highest = max(collection)
    if highest >= MAX_RECORD_ID:
        msg = f"no record id left after {highest}"
        raise ConflictError(msg, detail={"id": highest})
    return highest + 1
