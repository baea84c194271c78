"""Command: list records (named list_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from todoctl.commands._base import TodoCommand

if TYPE_CHECKING:
    from todoctl.commands._context import AppContext

_LIST_EXAMPLES = """\
  todoctl list
  todoctl list --tag errand
  todoctl --json list"""


@click.command("list", cls=TodoCommand, examples=_LIST_EXAMPLES)
@click.option("--tag", default=None, help="Only records carrying this tag.")
@click.pass_obj
def list_cmd(app: AppContext, tag: str | None) -> None:
    """List records sorted by id."""
    from todoctl.services.query import QueryService

    app.emit(QueryService(app.data_root).list_records(tag=tag))
