"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO); the caller
extracts the text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Tool invocations carry the operation's own name as ``op`` and are
recognised by their ``text`` payload instead. Anything else falls through
to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from gridstack_mcp.output.console import create_console, get_output, style_for_category

if TYPE_CHECKING:
    from rich.console import Console

    from gridstack_mcp.services.result import ServiceResult


# -- Public API ---------------------------------------------------------


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which is
    the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if not result.ok:
        _render_error(result, console, verbose=verbose)
    elif result.op in _OP_RENDERERS:
        _OP_RENDERERS[result.op](result, console, verbose=verbose)
    elif isinstance(result.data.get("text"), str):
        _render_document(result, console, verbose=verbose)
    else:
        _render_generic(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    # Listings collapse to one key per line, documents to their body.
    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(key for key in map(_extract_key, items) if key)
    for key in ("text", "content"):
        body = result.data.get(key)
        if isinstance(body, str):
            return body

    return f"OK: {result.op}"


# -- Helpers ------------------------------------------------------------


def _extract_key(item: Any) -> str:
    # Resources carry a display name too; their URI is the key.
    if isinstance(item, dict):
        for key in ("uri", "name"):
            val = item.get(key)
            if val is not None:
                return str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="grid.ok")
    op = Text(f"  {result.op}", style="grid.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="grid.key")
    if key == "name":
        v = Text(str(value), style="grid.name")
    elif key == "uri":
        v = Text(str(value), style="grid.uri")
    elif key == "category":
        v = Text(str(value), style=style_for_category(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _raw(console: Console, body: str) -> None:
    # Generated code must survive untouched: no markup, no wrapping.
    console.print(Text(body), soft_wrap=True)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 100:
        style = "bold red"
    elif duration > 10:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# -- Error renderer -----------------------------------------------------


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="grid.error")
    op = Text(f"  {result.op}", style="grid.op")
    console.print(label, op, Text(": "), Text(msg), sep="", soft_wrap=True)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
    if verbose:
        _render_meta(console, result)


# -- Listing renderers --------------------------------------------------


def _render_tool_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="grid.name", no_wrap=True)
    table.add_column("Category")
    table.add_column("Method")
    table.add_column("Description")
    if verbose:
        table.add_column("Required", style="dim")

    for item in items:
        category = str(item.get("category", ""))
        row = [
            Text(str(item.get("name", ""))),
            Text(category, style=style_for_category(category)),
            Text(str(item.get("method", ""))),
            Text(str(item.get("description", ""))),
        ]
        if verbose:
            row.append(Text(", ".join(item.get("required", []))))
        table.add_row(*row)

    console.print(table)
    console.print(Text(f"{result.data.get('count', len(items))} operations", style="dim"))


def _render_resource_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("URI", style="grid.uri", no_wrap=True)
    table.add_column("Name")
    table.add_column("MIME type", style="grid.mime")
    if verbose:
        table.add_column("Description")

    for item in items:
        row = [
            Text(str(item.get("uri", ""))),
            Text(str(item.get("name", ""))),
            Text(str(item.get("mime_type", ""))),
        ]
        if verbose:
            row.append(Text(str(item.get("description", ""))))
        table.add_row(*row)

    console.print(table)


# -- Document renderers -------------------------------------------------


def _render_document(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """A synthesized tool response, printed verbatim."""
    _raw(console, result.data["text"])
    if verbose:
        _render_meta(console, result)


def _render_resource(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _raw(console, result.data.get("content", ""))
    if verbose:
        _field(console, "uri", result.data.get("uri", ""))
        _field(console, "mime_type", result.data.get("mime_type", ""))


def _render_schema(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("name", "method", "category", "description"):
        if key in d:
            _field(console, key, d[key])
    if d.get("defaults"):
        _field(console, "defaults", _json.dumps(d["defaults"], separators=(",", ":")))
    console.print()
    _raw(console, _json.dumps(d.get("inputSchema", {}), indent=2, ensure_ascii=False))
    if verbose:
        _render_meta(console, result)


# -- Generic fallback ---------------------------------------------------


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# -- Dispatch table -----------------------------------------------------

_OP_RENDERERS: dict[str, Any] = {
    "list_tools": _render_tool_table,
    "describe": _render_schema,
    "list_resources": _render_resource_table,
    "read_resource": _render_resource,
}
