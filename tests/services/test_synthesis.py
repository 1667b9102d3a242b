"""Tests for the response document layout."""

from __future__ import annotations

import pytest

from gridstack_mcp.domain.operations import OperationCatalog
from gridstack_mcp.services.synthesis import GENERIC_DESCRIPTION, SynthesisEngine, SynthesisResult


@pytest.fixture
def engine(catalog: OperationCatalog) -> SynthesisEngine:
    return SynthesisEngine(catalog)


class TestRender:
    def test_descriptor_text(self, engine: SynthesisEngine) -> None:
        result = engine.render("gridstack_batch_update", {"flag": True}, "grid.batchUpdate(true);")
        assert result.title == "## GridStack batchUpdate (`gridstack_batch_update`)"
        assert result.description == "Enable batch update mode for efficient multiple operations"
        assert result.example is None
        assert len(result.notes) == 3

    def test_unknown_name_uses_generic_text(self, engine: SynthesisEngine) -> None:
        result = engine.render("not_registered", {}, "noop();")
        assert result.title == "## GridStack not_registered"
        assert result.description == GENERIC_DESCRIPTION
        assert result.example is None
        assert result.notes == ()

    def test_result_is_frozen(self, engine: SynthesisEngine) -> None:
        result = engine.render("gridstack_save", {}, "x")
        with pytest.raises(Exception):
            result.code = "y"  # type: ignore[misc]


class TestFormat:
    def test_full_document(self, engine: SynthesisEngine) -> None:
        text = engine.synthesize(
            "gridstack_move_widget",
            {"el": "#w1", "x": 2},
            "grid.move('#w1', 2, undefined);",
        )
        assert text == (
            "## GridStack moveWidget (`gridstack_move_widget`)\n\n"
            "Move a widget to a new position\n\n"
            "### Generated Code:\n"
            "```javascript\ngrid.move('#w1', 2, undefined);\n```\n\n"
            "### Parameters:\n"
            '```json\n{\n  "el": "#w1",\n  "x": 2\n}\n```\n\n'
            "### Example:\n"
            "```javascript\n// Move widget to new position\ngrid.move('#widget1', 2, 1);\n```"
        )

    def test_section_order(self, engine: SynthesisEngine) -> None:
        text = engine.synthesize("gridstack_add_widget", {"widget": {}}, "grid.addWidget({});")
        positions = [
            text.index(heading)
            for heading in ("### Generated Code:", "### Parameters:", "### Example:", "### Notes:")
        ]
        assert positions == sorted(positions)

    def test_empty_parameters_omit_section(self, engine: SynthesisEngine) -> None:
        text = engine.synthesize("gridstack_get_margin", {}, "const margin = grid.getMargin();")
        assert "### Parameters:" not in text
        assert "### Example:" not in text
        assert "### Notes:" not in text

    def test_notes_are_bullets(self, engine: SynthesisEngine) -> None:
        text = engine.synthesize("gridstack_batch_update", {"flag": True}, "grid.batchUpdate(true);")
        assert text.endswith(
            "### Notes:\n"
            "- Use before multiple operations for efficiency\n"
            "- Call with false to end batch mode\n"
            "- Only one 'change' event fired at end"
        )

    def test_format_is_pure(self, engine: SynthesisEngine) -> None:
        result = SynthesisResult(operation="x", title="## T", code="c()", parameters={"a": 1})
        assert engine.format(result) == engine.format(result)

    def test_echo_can_be_disabled(self, catalog: OperationCatalog) -> None:
        quiet = SynthesisEngine(catalog, echo_parameters=False)
        text = quiet.synthesize("gridstack_destroy", {"removeDOM": False}, "grid.destroy(false);")
        assert "### Parameters:" not in text

    def test_json_indent_configurable(self, catalog: OperationCatalog) -> None:
        wide = SynthesisEngine(catalog, json_indent=4)
        text = wide.synthesize("gridstack_destroy", {"removeDOM": False}, "grid.destroy(false);")
        assert '{\n    "removeDOM": false\n}' in text
