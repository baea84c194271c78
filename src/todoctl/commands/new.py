"""Command: create a new record from a template."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from todoctl.commands._base import TodoCommand

if TYPE_CHECKING:
    from todoctl.commands._context import AppContext

_NEW_EXAMPLES = """\
  todoctl new
  todoctl new --title "Buy milk" -t errand
  todoctl new --template bug --title "Login fails" --tag web --tag urgent
  todoctl --data-dir ~/todo new -t home"""


@click.command("new", cls=TodoCommand, examples=_NEW_EXAMPLES)
@click.option("--template", default=None, help="Template name (default from config, 'task').")
@click.option("--title", default=None, help="Record title.")
@click.option("-t", "--tag", "tags", multiple=True, help="Tag (repeatable).")
@click.pass_obj
def new(
    app: AppContext,
    template: str | None,
    title: str | None,
    tags: tuple[str, ...],
) -> None:
    """Create a new record and print '<path> <filename>'."""
    from todoctl.services.create import CreateService

    app.emit(CreateService(app.data_root).create_record(template=template, title=title, tags=tags))
