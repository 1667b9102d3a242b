"""Command group: enumerate, describe and invoke GridStack operations."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from gridstack_mcp.commands._base import GridGroup
from gridstack_mcp.domain.types import Category

if TYPE_CHECKING:
    from gridstack_mcp.commands._context import AppContext

_TOOLS_EXAMPLES = """\
  gridstack-mcp tools list
  gridstack-mcp tools list --category widget
  gridstack-mcp tools schema gridstack_add_widget
  gridstack-mcp tools call gridstack_add_widget -a widget='{"w": 3, "h": 2}'
  gridstack-mcp tools call gridstack_init --args '{"options": {"column": 6}}'"""


def _parse_args_json(raw: str) -> dict[str, Any]:
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"invalid JSON: {exc.msg}", param_hint="'--args'") from exc
    if not isinstance(value, dict):
        raise click.BadParameter("must be a JSON object", param_hint="'--args'")
    return value


def _parse_pairs(pairs: tuple[str, ...]) -> dict[str, Any]:
    """``key=value`` pairs; values are JSON when they parse, strings otherwise."""
    parsed: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="'-a'")
        try:
            parsed[key] = json.loads(raw)
        except json.JSONDecodeError:
            parsed[key] = raw
    return parsed


@click.group(cls=GridGroup, examples=_TOOLS_EXAMPLES)
@click.pass_obj
def tools(app: AppContext) -> None:
    """List, describe and call GridStack operations."""


@tools.command(
    "list",
    examples="""\
  gridstack-mcp tools list
  gridstack-mcp tools list --category layout
  gridstack-mcp -q tools list
  gridstack-mcp --json tools list""",
)
@click.option(
    "--category",
    type=click.Choice([c.value for c in Category]),
    default=None,
    help="Only operations in this category.",
)
@click.pass_obj
def list_tools(app: AppContext, category: str | None) -> None:
    """List every operation in presentation order."""
    app.emit(app.dispatcher.list_result(Category(category) if category else None))


@tools.command(
    examples="""\
  gridstack-mcp tools schema gridstack_set_responsive
  gridstack-mcp --json tools schema gridstack_add_widget"""
)
@click.argument("name")
@click.pass_obj
def schema(app: AppContext, name: str) -> None:
    """Show the input schema and defaults of one operation."""
    app.emit(app.dispatcher.describe(name))


@tools.command(
    examples="""\
  gridstack-mcp tools call gridstack_compact
  gridstack-mcp tools call gridstack_compact -a layout=list -a doSort=false
  gridstack-mcp tools call gridstack_move_widget -a el=#w1 -a x=2
  gridstack-mcp tools call gridstack_set_responsive \\
      --args '{"breakpoints": [{"w": 768, "c": 1}, {"w": 1024, "c": 6}]}'"""
)
@click.argument("name")
@click.option("--args", "args_json", default=None, help="Arguments as a JSON object.")
@click.option(
    "-a",
    "--arg",
    "pairs",
    multiple=True,
    help="One argument as key=value (repeatable; overrides --args).",
)
@click.pass_obj
def call(app: AppContext, name: str, args_json: str | None, pairs: tuple[str, ...]) -> None:
    """Invoke an operation and print the synthesized document."""
    arguments = _parse_args_json(args_json) if args_json else {}
    arguments.update(_parse_pairs(pairs))
    app.emit(app.dispatcher.execute(name, arguments))
