"""Tests for the transport-independent MCP resource functions."""

from __future__ import annotations

import pytest

from gridstack_mcp.domain.errors import ResourceNotFound
from gridstack_mcp.mcp.resources import list_resources_impl, read_resource_impl
from gridstack_mcp.services.resources import ResourceCatalog


def test_list_entries(resource_catalog: ResourceCatalog) -> None:
    entries = list_resources_impl(resource_catalog)
    assert len(entries) == 11
    assert entries[0] == {
        "uri": "gridstack://documentation/api",
        "name": entries[0]["name"],
        "description": entries[0]["description"],
        "mime_type": "text/markdown",
    }


def test_read(resource_catalog: ResourceCatalog) -> None:
    content = read_resource_impl(resource_catalog, "gridstack://css/modules")
    assert content.mime_type == "text/css"
    assert content.content.startswith("/* Widget.module.css")
    assert ".widget {" in content.content


def test_read_unknown_raises(resource_catalog: ResourceCatalog) -> None:
    with pytest.raises(ResourceNotFound, match="gridstack://nope"):
        read_resource_impl(resource_catalog, "gridstack://nope")
