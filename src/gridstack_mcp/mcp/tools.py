"""MCP tool surface: one tool per catalog operation.

``list_tools_impl`` and ``call_tool_impl`` are testable without the mcp
package. ``register_tools()`` wires them onto the low-level server.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gridstack_mcp.services.dispatch import Dispatcher


def list_tools_impl(dispatcher: Dispatcher) -> list[dict[str, Any]]:
    """``{name, description, inputSchema}`` for every operation."""
    return dispatcher.list_operations()


def call_tool_impl(
    dispatcher: Dispatcher,
    name: str,
    arguments: Mapping[str, Any] | None = None,
) -> str:
    """Run one operation; failures come back as ``Error executing ...`` text."""
    return dispatcher.invoke(name, arguments)


def register_tools(server: Any, dispatcher: Dispatcher) -> None:
    """Register the list/call handlers on the low-level server."""
    from mcp.types import TextContent, Tool

    @server.list_tools()  # type: ignore[untyped-decorator]
    async def list_tools() -> list[Tool]:
        return [
            Tool(
                name=entry["name"],
                description=entry["description"],
                inputSchema=entry["inputSchema"],
            )
            for entry in list_tools_impl(dispatcher)
        ]

    # Argument errors are reported by the dispatcher in its own wording.
    @server.call_tool(validate_input=False)  # type: ignore[untyped-decorator]
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        text = call_tool_impl(dispatcher, name, arguments)
        return [TextContent(type="text", text=text)]
