"""Front-matter schema for todo records.

Key order on disk follows field declaration order:
  id, created_at, due_at, tags

The model is frozen and forbids unknown keys, so a typo in a record's
front matter is reported instead of silently dropped.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import AwareDatetime, BaseModel, BeforeValidator, Field

MAX_RECORD_ID = 2**32 - 1

RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:[Zz]|[+-]\d{2}:\d{2})$"
)


def _check_timestamp(value: Any) -> Any:
    """Only native datetimes and RFC 3339 strings are timestamps.

    Numbers and numeric strings would otherwise be read as Unix time.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and RFC3339_PATTERN.match(value):
        return value
    msg = "timestamp must be an RFC 3339 string with a UTC offset"
    raise ValueError(msg)


RecordId = Annotated[int, Field(strict=True, ge=0, le=MAX_RECORD_ID)]
Timestamp = Annotated[AwareDatetime, BeforeValidator(_check_timestamp)]


class FrontMatter(BaseModel):
    """Attributes of a todo record."""

    model_config = {"frozen": True, "extra": "forbid"}

    id: RecordId
    created_at: Timestamp
    due_at: Timestamp | None = None
    tags: list[str] = Field(default_factory=list)
