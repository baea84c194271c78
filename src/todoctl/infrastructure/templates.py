"""Jinja2 template registry for new records.

Templates live in ``<data_root>/templates/`` as ``<name>.md.j2``. The
registry treats rendering as a pure function of name and variables; it
never inspects what a template produces.
"""

from __future__ import annotations

from datetime import UTC, datetime
from importlib import resources
from typing import TYPE_CHECKING, Any

import jinja2
from pydantic import AwareDatetime, BaseModel, Field

from todoctl.domain.errors import TemplateError
from todoctl.domain.frontmatter import RecordId

if TYPE_CHECKING:
    from pathlib import Path

TEMPLATE_EXTENSION = ".md.j2"
DEFAULT_TEMPLATE = "task"


class TemplateVars(BaseModel):
    """Variables exposed to a record template."""

    id: RecordId
    created_at: AwareDatetime = Field(default_factory=lambda: datetime.now(UTC))
    tags: list[str] = Field(default_factory=list)
    title: str | None = None


def default_template_source(name: str = DEFAULT_TEMPLATE) -> str:
    """Return the source of a template shipped with the package."""
    return (
        resources.files("todoctl")
        .joinpath(f"templates/{name}{TEMPLATE_EXTENSION}")
        .read_text(encoding="utf-8")
    )


class TemplateRegistry:
    """Named templates loaded from a directory."""

    def __init__(self, templates_dir: Path) -> None:
        self.templates_dir = templates_dir
        self._env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(templates_dir)),
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
            autoescape=False,
        )

    def names(self) -> list[str]:
        """Return the names of all templates in the directory."""
        if not self.templates_dir.is_dir():
            return []
        return sorted(
            filename.removesuffix(TEMPLATE_EXTENSION)
            for filename in self._env.list_templates()
            if filename.endswith(TEMPLATE_EXTENSION) and "/" not in filename
        )

    def render(self, name: str, variables: TemplateVars | dict[str, Any]) -> str:
        """Render template *name* with *variables*.

        Raises:
            TemplateError: The template is missing, unreadable, or fails to render.
        """
        if isinstance(variables, TemplateVars):
            context = variables.model_dump(mode="json")
        else:
            context = dict(variables)

        try:
            template = self._env.get_template(f"{name}{TEMPLATE_EXTENSION}")
            return template.render(context)
        except jinja2.TemplateNotFound as exc:
            msg = f"template {name!r} not found in {self.templates_dir}"
            raise TemplateError(
                msg,
                detail={"template": name, "available": self.names()},
            ) from exc
        except jinja2.TemplateError as exc:
            msg = f"template {name!r} failed to render: {exc}"
            raise TemplateError(msg, detail={"template": name}) from exc
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"template {name!r} could not be read: {exc}"
            raise TemplateError(msg, detail={"template": name}) from exc
