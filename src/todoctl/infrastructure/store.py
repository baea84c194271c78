"""Record stores and collection loading.

A :class:`RecordStore` is a minimal key-value interface over records.
:class:`FileRecordStore` is backed by a ``tasks/`` directory;
:class:`MemoryRecordStore` keeps records in a dict and is used in tests.

Loading is strictly sequential: each file is read and parsed before the
next is considered, and the first duplicate identifier aborts the load.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from todoctl.domain.collection import Collection, Record, add_record
from todoctl.domain.errors import ConflictError, DocumentError
from todoctl.infrastructure.filesystem import (
    find_record_files,
    read_record_file,
    record_path,
    write_record_file,
)

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Storage for records keyed by identifier."""

    def get(self, record_id: int) -> Record | None: ...

    def put(self, record: Record) -> None: ...

    def list(self) -> Iterator[Record]: ...


class FileRecordStore:
    """Records stored as one file each in *tasks_dir*."""

    def __init__(self, tasks_dir: Path) -> None:
        self.tasks_dir = tasks_dir

    def get(self, record_id: int) -> Record | None:
        path = record_path(self.tasks_dir, record_id)
        if not path.is_file():
            return None
        return read_record_file(path)

    def put(self, record: Record) -> None:
        write_record_file(record)
        logger.debug("Wrote record %d to %s", record.id, record.path)

    def list(self) -> Iterator[Record]:
        """Yield every parseable record, skipping files that fail to load.

        Raises:
            StorageError: The tasks directory cannot be listed.
        """
        for path in find_record_files(self.tasks_dir):
            try:
                yield read_record_file(path)
            except DocumentError as exc:
                logger.warning("Skipping %s: %s", path.name, exc.message)
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Skipping unreadable %s: %s", path.name, exc)


class MemoryRecordStore:
    """In-memory store with the same interface as :class:`FileRecordStore`.

    Seeded records are kept as given, duplicates included, so a test can
    reproduce a conflicting directory without touching disk.
    """

    def __init__(self, records: list[Record] | None = None) -> None:
        self._records: list[Record] = list(records or [])

    def get(self, record_id: int) -> Record | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def put(self, record: Record) -> None:
        if self.get(record.id) is not None:
            msg = f"record {record.id} already stored"
            raise ConflictError(msg, detail={"id": record.id})
        self._records.append(record)

    def list(self) -> Iterator[Record]:
        yield from self._records


def load_collection(store: RecordStore) -> Collection:
    """Build a collection from every record in *store*.

    Raises:
        ConflictError: Two records share an identifier. No partial
            collection is returned.
    """
    collection: Collection = {}
    for record in store.list():
        add_record(collection, record)
    logger.debug("Loaded %d records", len(collection))
    return collection
