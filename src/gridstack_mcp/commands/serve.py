"""serve: start the MCP server on stdio (requires gridstack-mcp[mcp] extra)."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import click

from gridstack_mcp.commands._base import GridCommand

if TYPE_CHECKING:
    from gridstack_mcp.commands._context import AppContext


@click.command(
    cls=GridCommand,
    examples="""\
  # Start the MCP server (stdio transport)
  gridstack-mcp serve

  # Debug logging to stderr while serving
  gridstack-mcp -v --log-json serve""",
)
@click.pass_obj
def serve(app: AppContext) -> None:
    """Start the MCP server (requires gridstack-mcp[mcp] extra)."""
    from gridstack_mcp.mcp import server as mcp_server

    if not mcp_server.mcp_available:
        click.echo("MCP not installed. Install with: pip install gridstack-mcp[mcp]", err=True)
        raise SystemExit(1)

    server = mcp_server.create_server(app.settings)
    asyncio.run(mcp_server.run_stdio(server))
