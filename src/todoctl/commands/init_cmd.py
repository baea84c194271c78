"""Command: store initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from todoctl.commands._base import TodoCommand

if TYPE_CHECKING:
    from todoctl.commands._context import AppContext

_INIT_EXAMPLES = """\
  todoctl init
  todoctl --data-dir /path/to/todo init"""


@click.command("init", cls=TodoCommand, examples=_INIT_EXAMPLES)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the tasks/ and templates/ directories and the default template."""
    from todoctl.services.init import InitService

    app.emit(InitService(app.data_root).init_store())
