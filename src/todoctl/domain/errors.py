"""Error kinds raised by the record core.

Each error carries a stable ``code`` and a ``detail`` mapping so the
service layer can convert it into a :class:`~todoctl.services.result.ServiceError`
without inspecting messages.
"""

from __future__ import annotations

from typing import Any, Self


class TodoError(Exception):
    """Base class for all todoctl errors."""

    code: str = "ERROR"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = dict(detail or {})


class DocumentError(TodoError):
    """A text blob could not be decoded into a document.

    ``template`` is set when the text came from rendering a template
    rather than from a file on disk.
    """

    def __init__(
        self,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        template: str | None = None,
    ) -> None:
        super().__init__(message, detail=detail)
        self.template = template
        if template is not None:
            self.detail["template"] = template

    def with_template(self, name: str) -> Self:
        """Return a copy of this error attributed to template *name*."""
        return type(self)(
            f"invalid template {name!r}: {self.message}",
            detail=self.detail,
            template=name,
        )


class FormatError(DocumentError):
    """The delimiter structure is violated."""

    code = "FORMAT_ERROR"


class SchemaError(DocumentError):
    """The front matter is present but its fields are missing or mistyped."""

    code = "SCHEMA_ERROR"


class ConflictError(TodoError):
    """Two records claim the same identifier."""

    code = "CONFLICT"


class TemplateError(TodoError):
    """A named template is missing or failed to render."""

    code = "TEMPLATE_ERROR"


class StorageError(TodoError):
    """Filesystem access failed."""

    code = "IO_ERROR"


class AlreadyInitializedError(TodoError):
    """The store directories already exist."""

    code = "ALREADY_INITIALIZED"
