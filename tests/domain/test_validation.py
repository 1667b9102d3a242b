"""Tests for the four-phase argument validator."""

from __future__ import annotations

from typing import Any

import pytest

from gridstack_mcp.domain.operations import OperationCatalog
from gridstack_mcp.domain.schema import NumberField, ObjectField
from gridstack_mcp.domain.validation import ValidationOutcome, validate, validate_arguments


def _violations(catalog: OperationCatalog, name: str, params: dict[str, Any]) -> tuple[str, ...]:
    descriptor = catalog.find(name)
    assert descriptor is not None
    merged = {**descriptor.defaults, **params}
    return validate(descriptor, merged).violations


class TestOutcome:
    def test_valid_is_derived(self) -> None:
        assert ValidationOutcome().valid
        assert not ValidationOutcome(("x",)).valid

    def test_non_mapping_arguments(self) -> None:
        outcome = validate_arguments(ObjectField(), [1, 2])
        assert outcome.violations == ("arguments must be an object",)

    def test_validation_does_not_mutate(self, catalog: OperationCatalog) -> None:
        params = {"widget": {"w": 0, "minW": 5, "maxW": 3}}
        snapshot = {"widget": dict(params["widget"])}
        _violations(catalog, "gridstack_add_widget", params)
        assert params == snapshot


class TestTypes:
    def test_wrong_primitive_type(self, catalog: OperationCatalog) -> None:
        violations = _violations(catalog, "gridstack_float", {"val": "yes"})
        assert violations == ("val must be a boolean",)

    def test_nested_path_in_message(self, catalog: OperationCatalog) -> None:
        violations = _violations(catalog, "gridstack_add_widget", {"widget": {"w": "wide"}})
        assert violations == ("widget.w must be a number",)

    def test_enum_violation(self, catalog: OperationCatalog) -> None:
        violations = _violations(catalog, "gridstack_compact", {"layout": "shuffle"})
        assert violations == ("layout must be one of: moveScale, move, scale, none, list",)

    def test_union_violation(self, catalog: OperationCatalog) -> None:
        violations = _violations(catalog, "gridstack_column", {"column": "many"})
        assert violations == ("column must be a number or 'auto'",)

    def test_unknown_top_level_field(self, catalog: OperationCatalog) -> None:
        violations = _violations(catalog, "gridstack_float", {"value": True})
        assert violations == ("Unknown field: value",)

    def test_unknown_nested_field_allowed(self, catalog: OperationCatalog) -> None:
        params = {"options": {"sizeToContent": True}}
        assert _violations(catalog, "gridstack_init", params) == ()

    def test_wrong_type_reported_once(self, catalog: OperationCatalog) -> None:
        violations = _violations(catalog, "gridstack_add_widget", {"widget": "big"})
        assert violations == ("widget must be an object",)


class TestRequired:
    def test_missing_top_level(self, catalog: OperationCatalog) -> None:
        assert _violations(catalog, "gridstack_add_widget", {}) == (
            "Missing required field: widget",
        )

    def test_missing_inside_array_entry(self, catalog: OperationCatalog) -> None:
        violations = _violations(catalog, "gridstack_set_responsive", {"breakpoints": [{"w": 768}]})
        assert violations == ("Missing required field: breakpoints[0].c",)

    def test_types_reported_before_required(self, catalog: OperationCatalog) -> None:
        violations = _violations(catalog, "gridstack_update_widget", {"el": 5})
        assert violations == ("el must be a string", "Missing required field: opts")


class TestDimensions:
    @pytest.mark.parametrize(
        ("widget", "message"),
        [
            ({"x": -1}, "x position must be a non-negative integer"),
            ({"y": 1.5}, "y position must be a non-negative integer"),
            ({"w": 0}, "width must be a positive integer"),
            ({"h": -2}, "height must be a positive integer"),
        ],
    )
    def test_widget_dimension(
        self, catalog: OperationCatalog, widget: dict[str, Any], message: str
    ) -> None:
        assert _violations(catalog, "gridstack_add_widget", {"widget": widget}) == (message,)

    def test_min_greater_than_max(self, catalog: OperationCatalog) -> None:
        violations = _violations(catalog, "gridstack_add_widget", {"widget": {"minW": 5, "maxW": 3}})
        assert violations == ("minW cannot be greater than maxW",)

    def test_value_outside_bounds(self, catalog: OperationCatalog) -> None:
        widget = {"w": 8, "maxW": 6, "h": 1, "minH": 2}
        violations = _violations(catalog, "gridstack_add_widget", {"widget": widget})
        assert violations == (
            "width cannot be greater than maxW",
            "height cannot be less than minH",
        )

    def test_integral_float_accepted(self, catalog: OperationCatalog) -> None:
        assert _violations(catalog, "gridstack_add_widget", {"widget": {"w": 3.0}}) == ()

    def test_row_bounds_without_value(self, catalog: OperationCatalog) -> None:
        violations = _violations(catalog, "gridstack_init", {"options": {"minRow": 4, "maxRow": 2}})
        assert violations == ("minRow cannot be greater than maxRow",)

    def test_top_level_size(self, catalog: OperationCatalog) -> None:
        assert _violations(catalog, "gridstack_column", {"column": 0}) == (
            "column count must be a positive integer",
        )

    def test_plain_number_has_no_dimension(self) -> None:
        spec = ObjectField(properties={"n": NumberField()})
        assert validate_arguments(spec, {"n": -10}).valid


class TestCollections:
    def test_duplicate_breakpoint_widths_single_violation(self, catalog: OperationCatalog) -> None:
        breakpoints = [{"w": 768, "c": 1}, {"w": 768, "c": 6}]
        violations = _violations(catalog, "gridstack_set_responsive", {"breakpoints": breakpoints})
        assert violations == ("Breakpoints cannot have duplicate widths",)

    def test_entry_dimension_message(self, catalog: OperationCatalog) -> None:
        breakpoints = [{"w": 768, "c": 1}, {"w": -1, "c": 0}]
        violations = _violations(catalog, "gridstack_set_responsive", {"breakpoints": breakpoints})
        assert violations == (
            "Breakpoint at index 1 must have a positive width (w)",
            "Breakpoint at index 1 must have a positive integer columns (c)",
        )

    def test_duplicate_child_ids(self, catalog: OperationCatalog) -> None:
        children = [{"id": "a", "w": 2}, {"id": "a", "w": 3}]
        violations = _violations(catalog, "gridstack_init", {"options": {"children": children}})
        assert violations == ("Child widgets cannot have duplicate ids",)

    def test_child_bounds_prefixed_with_entry(self, catalog: OperationCatalog) -> None:
        children = [{"minW": 4, "maxW": 2}]
        violations = _violations(catalog, "gridstack_add_grid", {"parent": "#p", "opt": {"children": children}})
        assert violations == ("Child widget at index 0: minW cannot be greater than maxW",)

    def test_load_layout_array(self, catalog: OperationCatalog) -> None:
        layout = [{"id": 1, "x": 0}, {"id": 1, "x": -3}]
        violations = _violations(catalog, "gridstack_load", {"layout": layout})
        assert violations == (
            "Widget at index 1 must have a non-negative integer x position (x)",
            "Layout widgets cannot have duplicate ids",
        )

    def test_string_layout_skips_collection_checks(self, catalog: OperationCatalog) -> None:
        assert _violations(catalog, "gridstack_load", {"layout": "savedLayout"}) == ()
