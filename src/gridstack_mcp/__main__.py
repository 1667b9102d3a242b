"""Allow ``python -m gridstack_mcp``."""

from gridstack_mcp.cli import cli

cli()
