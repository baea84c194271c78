"""Template pipeline: render a template, then reparse it as a record.

Rendered text goes through the same :func:`parse_document` used for files
on disk. Output is never repaired, so every created record is valid by
construction.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from todoctl.domain.document import parse_document
from todoctl.domain.errors import DocumentError
from todoctl.infrastructure.filesystem import new_record

if TYPE_CHECKING:
    from pathlib import Path

    from todoctl.domain.collection import Record
    from todoctl.infrastructure.templates import TemplateRegistry, TemplateVars

logger = logging.getLogger(__name__)


def create_record(
    registry: TemplateRegistry,
    template_name: str,
    variables: TemplateVars,
    tasks_dir: Path,
) -> Record:
    """Render *template_name* and bind the parsed document to its path.

    Raises:
        TemplateError: The template is missing or fails to render.
        FormatError, SchemaError: The rendered text is not a valid
            document. The error's ``template`` names the template.
    """
    text = registry.render(template_name, variables)
    logger.debug("Rendered template %s (%d chars)", template_name, len(text))

    try:
        document = parse_document(text)
    except DocumentError as exc:
        raise exc.with_template(template_name) from exc

    return new_record(tasks_dir, document)
