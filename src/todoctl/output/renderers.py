"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from todoctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from todoctl.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items)
    if "path" in result.data:
        return str(result.data["path"])
    return f"OK: {result.op}"


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="todo.key")
    style = "todo.path" if key in ("path", "data_dir") else ""
    console.print(k, Text(str(value), style=style), sep="", soft_wrap=True)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="todo.error")
    op = Text(f"  {result.op}", style="todo.op")
    console.print(label, op, Text(" — "), Text(msg), sep="", soft_wrap=True)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"), soft_wrap=True)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("OK", style="todo.ok"), Text(f"  {result.op}", style="todo.op"), sep="")
    for key, value in result.data.items():
        _field(console, key, value)


def _render_new(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """``<relative-path> <filename>`` — one line, meant for scripts."""
    d = result.data
    console.print(f"{d['path']} {d['filename']}", soft_wrap=True, markup=False)
    if verbose:
        for key in ("id", "template", "created_at", "tags"):
            _field(console, key, d[key])


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("OK", style="todo.ok"), Text(f"  {result.op}", style="todo.op"), sep="")
    _field(console, "data_dir", result.data["data_dir"])
    for path in result.data.get("created", []):
        _field(console, "created", path)


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print(Text("No records.", style="dim"))
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("ID", style="todo.id", justify="right")
    table.add_column("Created")
    table.add_column("Due")
    table.add_column("Tags", style="todo.tag")
    if verbose:
        table.add_column("Path", style="todo.path")

    for item in items:
        row = [
            str(item["id"]),
            item["created_at"],
            item["due_at"] or "",
            ", ".join(item["tags"]),
        ]
        if verbose:
            row.append(item["path"])
        table.add_row(*row)
    console.print(table)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "new_record": _render_new,
    "init_store": _render_init,
    "list_records": _render_list,
}
