"""Tests for the static resource catalog and its composition helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from gridstack_mcp.domain.errors import ResourceNotFound
from gridstack_mcp.domain.types import Framework
from gridstack_mcp.services.resources import (
    BASIC_GRID,
    DEFAULT_CDN_BASE,
    ResourceCatalog,
    custom_css_context,
    framework_context,
    grid_page_context,
    widget_attributes,
)

EXPECTED_URIS = [
    "gridstack://documentation/api",
    "gridstack://examples/basic",
    "gridstack://examples/responsive",
    "gridstack://examples/react",
    "gridstack://examples/vue",
    "gridstack://examples/angular",
    "gridstack://templates/dashboard",
    "gridstack://css/custom",
    "gridstack://css/tailwind",
    "gridstack://css/modules",
    "gridstack://examples/tailwind-dashboard",
]


class TestEnumeration:
    def test_fixed_order(self, resource_catalog: ResourceCatalog) -> None:
        assert [r.uri for r in resource_catalog.list_resources()] == EXPECTED_URIS

    def test_mime_types(self, resource_catalog: ResourceCatalog) -> None:
        mime = {r.uri: r.mime_type for r in resource_catalog.list_resources()}
        assert mime["gridstack://documentation/api"] == "text/markdown"
        assert mime["gridstack://examples/basic"] == "text/html"
        assert mime["gridstack://examples/react"] == "text/javascript"
        assert mime["gridstack://css/modules"] == "text/css"

    def test_list_result(self, resource_catalog: ResourceCatalog) -> None:
        result = resource_catalog.list_result()
        assert result.ok
        assert result.data["count"] == len(EXPECTED_URIS)
        assert set(result.data["items"][0]) == {"uri", "name", "description", "mime_type"}


class TestRead:
    @pytest.mark.parametrize("uri", EXPECTED_URIS)
    def test_every_resource_renders(self, resource_catalog: ResourceCatalog, uri: str) -> None:
        content = resource_catalog.read(uri)
        assert content.uri == uri
        assert content.content.strip()

    def test_unknown_uri_raises(self, resource_catalog: ResourceCatalog) -> None:
        with pytest.raises(ResourceNotFound, match="nonexistent://x"):
            resource_catalog.read("nonexistent://x")

    def test_read_result_failure(self, resource_catalog: ResourceCatalog) -> None:
        result = resource_catalog.read_result("nonexistent://x")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "RESOURCE_NOT_FOUND"

    def test_reads_are_identical(self, resource_catalog: ResourceCatalog) -> None:
        uri = "gridstack://templates/dashboard"
        assert resource_catalog.read(uri) == resource_catalog.read(uri)

    def test_api_reference_lists_every_tool(self, resource_catalog: ResourceCatalog) -> None:
        text = resource_catalog.read("gridstack://documentation/api").content
        for name in resource_catalog.operations.names():
            assert f"`{name}`" in text
        assert "### Core Grid Management" in text
        assert "- `resizestop` - Resize stopped" in text
        assert "`gridstack://css/custom`" in text

    def test_basic_page(self, resource_catalog: ResourceCatalog) -> None:
        text = resource_catalog.read("gridstack://examples/basic").content
        assert f"{DEFAULT_CDN_BASE}/gridstack.min.css" in text
        assert 'gs-id="widget1"' in text
        assert "Large Widget" in text
        assert "GridStack.init({" in text

    def test_frameworks(self, resource_catalog: ResourceCatalog) -> None:
        react = resource_catalog.read("gridstack://examples/react").content
        assert "options={{ column: 12, cellHeight: 'auto' }}" in react
        angular = resource_catalog.read("gridstack://examples/angular").content
        assert "@angular/core" in angular

    def test_custom_css(self, resource_catalog: ResourceCatalog) -> None:
        text = resource_catalog.read("gridstack://css/custom").content
        assert "margin: 15px;" in text
        assert "min-height: 80px;" in text
        assert "background-color: #f8f9fa;" in text

    def test_cdn_base_configurable(self) -> None:
        catalog = ResourceCatalog(cdn_base="https://assets.example.test/gs/")
        text = catalog.read("gridstack://examples/responsive").content
        assert "https://assets.example.test/gs/gridstack.min.css" in text

    def test_template_override(self, tmp_path: Path) -> None:
        override = tmp_path / "resources"
        override.mkdir()
        (override / "modules.css.j2").write_text("/* house style */\n", encoding="utf-8")
        catalog = ResourceCatalog(template_dir=tmp_path)
        assert catalog.read("gridstack://css/modules").content == "/* house style */\n"
        # Untouched templates still come from the package.
        assert "Tailwind" in catalog.read("gridstack://css/tailwind").content


class TestHelpers:
    def test_widget_attributes(self) -> None:
        attrs = widget_attributes({"x": 2, "w": 4, "id": "a", "locked": True, "noMove": False})
        assert attrs == [
            'gs-x="2"',
            'gs-y="0"',
            'gs-w="4"',
            'gs-h="1"',
            'gs-id="a"',
            'gs-locked="true"',
        ]

    def test_grid_page_context(self) -> None:
        context = grid_page_context({**BASIC_GRID, "class": "dark"}, title="Demo")
        assert context["grid_class"] == "grid-stack dark"
        assert context["title"] == "Demo"
        assert len(context["items"]) == 3
        assert context["items"][0]["content"] == "Widget 1"

    def test_grid_page_default_content(self) -> None:
        context = grid_page_context({"children": [{"id": "k"}]})
        assert context["items"][0]["content"] == "Widget k"
        assert context["grid_class"] == "grid-stack"

    def test_custom_css_column_rules(self) -> None:
        context = custom_css_context(columns=4)
        assert [rule["width"] for rule in context["column_rules"]] == [
            "25.000000",
            "50.000000",
            "75.000000",
            "100.000000",
        ]
        assert context["margin"] is None

    def test_twelve_columns_need_no_rules(self) -> None:
        assert custom_css_context(margin="1rem")["column_rules"] == []
        assert custom_css_context(margin="1rem")["margin"] == "1rem"

    def test_framework_context(self) -> None:
        context = framework_context(Framework.VUE)
        assert context["framework"] == "vue"
        assert context["item_attributes"] == 'gs-x="0" gs-y="0" gs-w="3" gs-h="2"'
