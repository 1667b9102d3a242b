"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time
from collections.abc import Generator

import pytest

from gridstack_mcp.services.dispatch import Dispatcher
from gridstack_mcp.services.result import ServiceResult
from gridstack_mcp.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    trace_span,
    traced,
)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()
    _current_span.set(None)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.005)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "children" not in d
        assert "annotations" not in d

    def test_annotations_and_children(self) -> None:
        root = Span(name="root")
        child = Span(name="child", parent=root)
        root.children.append(child)
        child.annotate("violations", 0)
        child.end()
        root.end()
        d = root.to_dict()
        assert d["children"][0]["annotations"] == {"violations": 0}


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("x") as span:
            assert span is None

    def test_no_parent_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("x") as span:
            assert span is None


class TestTraced:
    def test_disabled_passthrough(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="op")

        assert op().meta is None

    def test_enabled_injects_meta(self) -> None:
        enable_telemetry()

        @traced
        def op() -> ServiceResult:
            with trace_span("inner"):
                pass
            return ServiceResult(ok=True, op="op")

        result = op()
        assert result.meta is not None
        telemetry = result.meta["telemetry"]
        assert telemetry["name"].endswith("op")
        assert telemetry["children"][0]["name"] == "inner"

    def test_exception_propagates_and_resets(self) -> None:
        enable_telemetry()

        @traced
        def boom() -> ServiceResult:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            boom()
        assert _current_span.get() is None

    def test_dispatch_phases_recorded(self, dispatcher: Dispatcher) -> None:
        enable_telemetry()
        result = dispatcher.execute("gridstack_compact", {})
        assert result.meta is not None
        phases = [child["name"] for child in result.meta["telemetry"]["children"]]
        assert phases == ["validate", "template", "synthesize"]
        assert result.meta["telemetry"]["children"][0]["annotations"] == {"violations": 0}
