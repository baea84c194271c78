"""Document codec — TOML front matter between ``+++`` lines, then a body.

Layout::

    +++
    id = 1
    created_at = "2024-05-01T09:30:00Z"
    tags = []
    +++
    <body, verbatim to end of file>

Only the first two delimiter lines are boundaries. The body is never
rescanned, so a ``+++`` line inside the body is kept as literal text.
"""

from __future__ import annotations

import re
import tomllib

import tomli_w
from pydantic import BaseModel, ValidationError

from todoctl.domain.errors import FormatError, SchemaError
from todoctl.domain.frontmatter import FrontMatter

DELIMITER = "+++"

# A delimiter line, optionally followed by trailing blanks and CRLF.
_DELIMITER_LINE = re.compile(r"^\+\+\+[ \t]*(?:\r?\n|\Z)", re.MULTILINE)


class Document(BaseModel):
    """Front matter paired with an opaque body."""

    model_config = {"frozen": True}

    front_matter: FrontMatter
    body: str = ""


def parse_document(text: str) -> Document:
    """Parse *text* into a :class:`Document`.

    Raises:
        FormatError: Fewer than two delimiter lines.
        SchemaError: The front-matter block is not valid TOML or does not
            match :class:`FrontMatter`.
    """
    parts = _DELIMITER_LINE.split(text, maxsplit=2)
    if len(parts) < 3:
        found = len(parts) - 1
        msg = f"expected two {DELIMITER!r} delimiter lines, found {found}"
        raise FormatError(msg, detail={"delimiters": found})

    _leading, block, body = parts

    try:
        raw = tomllib.loads(block)
    except tomllib.TOMLDecodeError as exc:
        raise SchemaError(f"front matter is not valid TOML: {exc}") from exc

    try:
        front_matter = FrontMatter.model_validate(raw)
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        ]
        msg = "invalid front matter: " + "; ".join(errors)
        raise SchemaError(msg, detail={"errors": errors}) from exc

    return Document(front_matter=front_matter, body=body)


def serialize_document(document: Document) -> str:
    """Render *document* to its on-disk text form.

    The body is emitted verbatim and is not validated.
    """
    data = document.front_matter.model_dump(mode="json", exclude_none=True)
    return "".join(
        [
            DELIMITER,
            "\n",
            tomli_w.dumps(data),
            DELIMITER,
            "\n",
            document.body,
        ]
    )
