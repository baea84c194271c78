"""Filesystem operations for todo records.

INVARIANT: Files are truth. The collection is a derived view rebuilt
from the ``tasks/`` directory on every load.

Pure parsing/rendering lives in :mod:`todoctl.domain.document`. This
module handles actual file I/O, path derivation, and file discovery.
"""

from __future__ import annotations

from pathlib import Path

from todoctl.domain.collection import Record
from todoctl.domain.document import Document, parse_document, serialize_document
from todoctl.domain.errors import ConflictError, StorageError

TASKS_DIR = "tasks"
TEMPLATES_DIR = "templates"

# Files considered during a directory scan.
RECORD_EXTENSION = ".md"
# Canonical filename: zero-padded id + suffix.
RECORD_SUFFIX = ".todo.md"
ID_WIDTH = 10


# ---------------------------------------------------------------------------
# Path derivation
# ---------------------------------------------------------------------------


def record_filename(record_id: int) -> str:
    """Return the canonical filename for *record_id* (``0000000042.todo.md``)."""
    if record_id < 0:
        msg = f"Record id must be non-negative: {record_id}"
        raise ValueError(msg)
    return f"{record_id:0{ID_WIDTH}d}{RECORD_SUFFIX}"


def record_path(tasks_dir: Path, record_id: int) -> Path:
    """Resolve the path of *record_id* inside *tasks_dir*."""
    return tasks_dir / record_filename(record_id)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_record_file(path: Path) -> Record:
    """Read and parse the record stored at *path*.

    Raises:
        OSError, UnicodeDecodeError: The file could not be read as text.
        FormatError, SchemaError: The content is not a valid document.
    """
    with path.open(encoding="utf-8", newline="") as fh:
        content = fh.read()
    return Record(path=path, document=parse_document(content))


def write_record_file(record: Record) -> None:
    """Write *record* to its path, refusing to overwrite an existing file.

    Raises:
        ConflictError: A file already exists at the record's path.
        StorageError: Any other filesystem failure.
    """
    rendered = serialize_document(record.document)
    try:
        with record.path.open("x", encoding="utf-8", newline="") as fh:
            fh.write(rendered)
    except FileExistsError as exc:
        msg = f"record file already exists: {record.path}"
        raise ConflictError(msg, detail={"id": record.id, "path": str(record.path)}) from exc
    except OSError as exc:
        msg = f"cannot write {record.path}: {exc.strerror or exc}"
        raise StorageError(msg, detail={"path": str(record.path)}) from exc


def new_record(tasks_dir: Path, document: Document) -> Record:
    """Bind *document* to the canonical path derived from its id."""
    return Record(path=record_path(tasks_dir, document.front_matter.id), document=document)


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def find_record_files(tasks_dir: Path) -> list[Path]:
    """List regular files in *tasks_dir* whose name ends in ``.md``.

    The scan is flat (no recursion) and sorted by name.

    Raises:
        StorageError: The directory is missing or cannot be listed.
    """
    try:
        entries = sorted(tasks_dir.iterdir())
    except FileNotFoundError as exc:
        msg = f"tasks directory not found: {tasks_dir} (run 'todoctl init' first)"
        raise StorageError(msg, detail={"path": str(tasks_dir)}) from exc
    except OSError as exc:
        msg = f"cannot list {tasks_dir}: {exc.strerror or exc}"
        raise StorageError(msg, detail={"path": str(tasks_dir)}) from exc

    return [p for p in entries if p.name.endswith(RECORD_EXTENSION) and p.is_file()]
