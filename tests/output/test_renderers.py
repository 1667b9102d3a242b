"""Tests for the Rich renderers."""

from __future__ import annotations

from gridstack_mcp.domain.errors import InvalidArguments, ResourceNotFound
from gridstack_mcp.output.renderers import render_quiet, render_result
from gridstack_mcp.services.dispatch import Dispatcher
from gridstack_mcp.services.resources import ResourceCatalog
from gridstack_mcp.services.result import ServiceResult
from gridstack_mcp.services.telemetry import enable_telemetry


class TestErrors:
    def test_error_line(self) -> None:
        result = ServiceResult.failure("gridstack_float", InvalidArguments(["val must be a boolean"]))
        assert render_result(result) == "ERROR  gridstack_float: val must be a boolean"

    def test_verbose_detail(self) -> None:
        result = ServiceResult.failure("read_resource", ResourceNotFound("gridstack://nope"))
        out = render_result(result, verbose=True)
        assert "detail:" in out
        assert "uri: gridstack://nope" in out


class TestToolTable:
    def test_lists_every_operation(self, dispatcher: Dispatcher) -> None:
        out = render_result(dispatcher.list_result())
        assert "gridstack_init" in out
        assert "gridstack_get_float" in out
        assert out.rstrip().endswith("30 operations")

    def test_verbose_adds_required_column(self, dispatcher: Dispatcher) -> None:
        assert "Required" not in render_result(dispatcher.list_result())
        assert "Required" in render_result(dispatcher.list_result(), verbose=True)


class TestDocuments:
    def test_document_verbatim(self, dispatcher: Dispatcher) -> None:
        result = dispatcher.execute("gridstack_compact", {})
        assert render_result(result) == result.data["text"]

    def test_long_lines_not_wrapped(self) -> None:
        text = "x" * 300
        result = ServiceResult(ok=True, op="gridstack_init", data={"text": text})
        assert render_result(result) == text

    def test_markup_not_interpreted(self) -> None:
        text = "[bold]not markup[/bold]"
        result = ServiceResult(ok=True, op="gridstack_init", data={"text": text})
        assert render_result(result) == text

    def test_verbose_telemetry(self, dispatcher: Dispatcher) -> None:
        enable_telemetry()
        out = render_result(dispatcher.execute("gridstack_compact", {}), verbose=True)
        assert "meta:" in out
        assert "validate" in out
        assert "synthesize" in out


class TestResources:
    def test_table(self, resource_catalog: ResourceCatalog) -> None:
        out = render_result(resource_catalog.list_result())
        assert "gridstack://examples/basic" in out
        assert "MIME type" in out

    def test_read_raw(self, resource_catalog: ResourceCatalog) -> None:
        result = resource_catalog.read_result("gridstack://css/modules")
        assert render_result(result) == result.data["content"].rstrip("\n")


class TestSchema:
    def test_describe(self, dispatcher: Dispatcher) -> None:
        out = render_result(dispatcher.describe("gridstack_compact"))
        assert out.startswith("OK  describe")
        assert "name: gridstack_compact" in out
        assert "method: compact" in out
        assert '"type": "object"' in out


class TestGeneric:
    def test_fallback(self) -> None:
        result = ServiceResult(ok=True, op="custom", data={"count": 2, "items": ["a"]})
        out = render_result(result)
        assert out.splitlines()[0] == "OK  custom"
        assert "count: 2" in out
        assert 'items: ["a"]' in out


class TestQuiet:
    def test_names(self, dispatcher: Dispatcher) -> None:
        lines = render_quiet(dispatcher.list_result()).splitlines()
        assert len(lines) == 30
        assert lines[0] == "gridstack_init"

    def test_uris(self, resource_catalog: ResourceCatalog) -> None:
        lines = render_quiet(resource_catalog.list_result()).splitlines()
        assert lines == [d.uri for d in resource_catalog.list_resources()]
        assert "GridStack API Documentation" not in lines

    def test_document_body(self, dispatcher: Dispatcher) -> None:
        result = dispatcher.execute("gridstack_compact", {})
        assert render_quiet(result) == result.data["text"]

    def test_fallback(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="custom")) == "OK: custom"
