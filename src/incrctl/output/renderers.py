"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from incrctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from incrctl.services.result import ServiceResult


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    if result.op == "increment":
        return str(result.data["result"])
    if result.op == "list_variants":
        return "\n".join(item["tag"] for item in result.data["items"])
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="incr.ok"), Text(f"  {result.op}", style="incr.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text.assemble((f"  {key}: ", "incr.key"), (str(value), style)))


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_increment(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "variant", data["variant"], "incr.tag")
    _field(console, "input", data["input"])
    _field(console, "result", data["result"], "incr.result")


def _render_variants(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Tag", style="incr.tag")
    table.add_column("Description")
    table.add_column("Default")
    default = result.data.get("default")
    for item in result.data["items"]:
        table.add_row(item["tag"], item["description"], "*" if item["tag"] == default else "")
    console.print(table)


def _render_error(result: ServiceResult, console: Console) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text("ERROR", style="incr.error"),
        Text(f"  {result.op}", style="incr.op"),
        Text(f"  {message}"),
    )
    if error and error.code:
        _field(console, "code", error.code)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "increment": _render_increment,
    "list_variants": _render_variants,
}
