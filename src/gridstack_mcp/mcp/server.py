"""MCP server setup.

Optional extra, guarded behind try/except ImportError. Tools advertise the
catalog's raw JSON Schemas, so this uses the low-level ``Server`` rather than
the decorator-inferred FastMCP surface. Transport: stdio.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gridstack_mcp.config.settings import GridSettings

mcp_available = False
_Server: Any = None
_NotificationOptions: Any = None

try:
    from mcp.server import NotificationOptions as _NotificationOptions  # type: ignore[no-redef]
    from mcp.server import Server as _Server  # type: ignore[no-redef]

    mcp_available = True
except ImportError:
    pass

__all__ = ["create_server", "mcp_available", "run_stdio"]

logger = logging.getLogger(__name__)


def _require_mcp() -> None:
    if not mcp_available or _Server is None:
        msg = "MCP extra not installed. Install with: pip install gridstack-mcp[mcp]"
        raise RuntimeError(msg)


def create_server(settings: GridSettings | None = None) -> Any:
    """Create the MCP server with every catalog tool and static resource.

    Builds the dispatcher and resource catalog from *settings* (or the
    discovered configuration) and registers both on a fresh ``Server``.

    Raises RuntimeError if the mcp extra is not installed.
    """
    _require_mcp()

    from gridstack_mcp.catalog import default_catalog
    from gridstack_mcp.config.settings import GridSettings
    from gridstack_mcp.mcp.resources import register_resources
    from gridstack_mcp.mcp.tools import register_tools
    from gridstack_mcp.services.dispatch import Dispatcher
    from gridstack_mcp.services.resources import ResourceCatalog
    from gridstack_mcp.services.synthesis import SynthesisEngine

    if settings is None:
        settings = GridSettings.from_cli()

    catalog = default_catalog()
    engine = SynthesisEngine(
        catalog,
        json_indent=settings.synthesis.json_indent,
        echo_parameters=settings.synthesis.echo_parameters,
    )
    dispatcher = Dispatcher(catalog, engine)
    resources = ResourceCatalog(
        catalog,
        cdn_base=settings.resources.cdn_base,
        template_dir=settings.resolved_template_dir(),
    )

    server = _Server(settings.server.name, version=settings.server.version)
    register_tools(server, dispatcher)
    register_resources(server, resources)

    logger.debug(
        "Created MCP server %s with %d tools and %d resources",
        settings.server.name,
        len(catalog),
        len(resources.list_resources()),
    )
    return server


async def run_stdio(server: Any) -> None:
    """Serve *server* over stdin/stdout until the client disconnects."""
    _require_mcp()

    from mcp.server.stdio import stdio_server

    options = server.create_initialization_options(
        notification_options=_NotificationOptions(),
        experimental_capabilities={},
    )
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, options)
