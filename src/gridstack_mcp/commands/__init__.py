"""Subcommand modules for gridstack-mcp.

Provides register_commands() which uses deferred imports to keep
``gridstack-mcp --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups and standalone commands on the root group."""
    # --- Groups ---
    from gridstack_mcp.commands.resources import resources
    from gridstack_mcp.commands.tools import tools

    cli.add_command(tools)
    cli.add_command(resources)

    # --- Standalone commands ---
    from gridstack_mcp.commands.serve import serve

    cli.add_command(serve)
