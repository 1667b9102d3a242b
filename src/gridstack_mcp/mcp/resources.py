"""MCP resource surface: the static GridStack documents.

Unlike tool calls, reading an unknown URI raises, and the transport turns
that into a protocol error.
"""

from __future__ import annotations

from typing import Any

from gridstack_mcp.services.resources import ResourceCatalog, ResourceContent


def list_resources_impl(resources: ResourceCatalog) -> list[dict[str, Any]]:
    return [descriptor.model_dump() for descriptor in resources.list_resources()]


def read_resource_impl(resources: ResourceCatalog, uri: str) -> ResourceContent:
    """Render *uri*; raises ResourceNotFound for unknown URIs."""
    return resources.read(uri)


def register_resources(server: Any, resources: ResourceCatalog) -> None:
    """Register the list/read handlers on the low-level server."""
    from mcp.server.lowlevel.helper_types import ReadResourceContents
    from mcp.types import Resource
    from pydantic import AnyUrl

    @server.list_resources()  # type: ignore[untyped-decorator]
    async def list_resources() -> list[Resource]:
        return [
            Resource(
                uri=AnyUrl(entry["uri"]),
                name=entry["name"],
                description=entry["description"],
                mimeType=entry["mime_type"],
            )
            for entry in list_resources_impl(resources)
        ]

    @server.read_resource()  # type: ignore[untyped-decorator]
    async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        resource = read_resource_impl(resources, str(uri))
        return [ReadResourceContents(content=resource.content, mime_type=resource.mime_type)]
