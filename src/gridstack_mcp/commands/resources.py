"""Command group: the static GridStack documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gridstack_mcp.commands._base import GridGroup

if TYPE_CHECKING:
    from gridstack_mcp.commands._context import AppContext

_RESOURCES_EXAMPLES = """\
  gridstack-mcp resources list
  gridstack-mcp resources read gridstack://documentation/api
  gridstack-mcp resources read gridstack://examples/basic > grid.html"""


@click.group(cls=GridGroup, examples=_RESOURCES_EXAMPLES)
@click.pass_obj
def resources(app: AppContext) -> None:
    """List and read static GridStack resources."""


@resources.command(
    "list",
    examples="""\
  gridstack-mcp resources list
  gridstack-mcp -v resources list
  gridstack-mcp --json resources list""",
)
@click.pass_obj
def list_resources(app: AppContext) -> None:
    """List every resource URI with its MIME type."""
    app.emit(app.resources.list_result())


@resources.command(
    examples="""\
  gridstack-mcp resources read gridstack://css/custom
  gridstack-mcp --json resources read gridstack://examples/react"""
)
@click.argument("uri")
@click.pass_obj
def read(app: AppContext, uri: str) -> None:
    """Print the rendered document behind URI."""
    app.emit(app.resources.read_result(uri))
