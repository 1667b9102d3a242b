"""Grid-level operations: lifecycle, state, utilities and advanced helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gridstack_mcp.catalog.fields import (
    CONSTRAINTS,
    FLAGS,
    POSITION,
    WIDGET_ID,
    element,
    grid_options,
    widget,
)
from gridstack_mcp.domain.encoding import js_literal, js_string, to_json
from gridstack_mcp.domain.operations import OperationDescriptor, arguments
from gridstack_mcp.domain.schema import (
    BooleanField,
    NumberField,
    ObjectField,
    StringField,
    UnionField,
)
from gridstack_mcp.domain.types import Category

# --- Template functions ---


def _init(params: Mapping[str, Any]) -> str:
    options, selector = to_json(params["options"]), js_string(params["selector"])
    return f"const grid = GridStack.init({options}, {selector});"


def _enable(params: Mapping[str, Any]) -> str:
    return "grid.enable();" if params["doEnable"] else "grid.disable();"


def _destroy(params: Mapping[str, Any]) -> str:
    return f"grid.destroy({js_literal(params['removeDOM'])});"


def _get_grid_items(params: Mapping[str, Any]) -> str:
    return f"const items = grid.getGridItems({js_literal(params['onlyVisible'])});"


def _will_it_fit(params: Mapping[str, Any]) -> str:
    return f"const willFit = grid.willItFit({to_json(params['widget'])});"


def _is_area_empty(params: Mapping[str, Any]) -> str:
    x, y, w, h = (js_literal(params[key]) for key in ("x", "y", "w", "h"))
    return f"const isEmpty = grid.isAreaEmpty({x}, {y}, {w}, {h});"


def _get_cell_height(params: Mapping[str, Any]) -> str:
    return "const cellHeight = grid.getCellHeight();"


def _get_cell_from_pixel(params: Mapping[str, Any]) -> str:
    position = to_json(params["position"], indent=None)
    return f"const cell = grid.getCellFromPixel({position}, {js_literal(params['useOffset'])});"


def _make_widget(params: Mapping[str, Any]) -> str:
    return f"grid.makeWidget({js_string(params['el'])}, {to_json(params['options'])});"


def _remove_all(params: Mapping[str, Any]) -> str:
    return f"grid.removeAll({js_literal(params['removeDOM'])});"


def _get_margin(params: Mapping[str, Any]) -> str:
    return "const margin = grid.getMargin();"


def _get_column(params: Mapping[str, Any]) -> str:
    return "const columns = grid.getColumn();"


def _get_float(params: Mapping[str, Any]) -> str:
    return "const floatMode = grid.getFloat();"


def _add_grid(params: Mapping[str, Any]) -> str:
    parent, options = js_string(params["parent"]), to_json(params["opt"])
    return f"const grid = GridStack.addGrid({parent}, {options});"


# --- Descriptors ---

OPERATIONS: tuple[OperationDescriptor, ...] = (
    OperationDescriptor(
        name="gridstack_init",
        method="init",
        category=Category.CORE,
        summary="Initialize a new GridStack instance with specified options",
        parameters=arguments(
            {
                "selector": StringField(
                    "CSS selector for the grid container element", default=".grid-stack"
                ),
                "options": grid_options("GridStack initialization options", default={}),
            }
        ),
        template=_init,
        description="Initialize a new GridStack instance with the specified options",
        example=(
            "// Initialize with basic options\n"
            "const grid = GridStack.init({\n"
            "  column: 12,\n"
            "  cellHeight: 'auto',\n"
            "  margin: 10,\n"
            "  float: false\n"
            "});"
        ),
        notes=(
            "Grid container must have 'grid-stack' class",
            "Include GridStack CSS and JS files",
            "Options are merged with defaults",
        ),
    ),
    OperationDescriptor(
        name="gridstack_enable",
        method="enable",
        category=Category.STATE,
        summary="Enable or disable the grid",
        parameters=arguments(
            {
                "doEnable": BooleanField(
                    "Enable (true) or disable (false) the grid", default=True
                )
            }
        ),
        template=_enable,
        description="Enable or disable grid interactions",
    ),
    OperationDescriptor(
        name="gridstack_destroy",
        method="destroy",
        category=Category.STATE,
        summary="Destroy the grid instance",
        parameters=arguments({"removeDOM": BooleanField("Remove DOM elements", default=False)}),
        template=_destroy,
        description="Destroy the grid instance and clean up",
    ),
    OperationDescriptor(
        name="gridstack_get_grid_items",
        method="getGridItems",
        category=Category.STATE,
        summary="Get all grid items",
        parameters=arguments(
            {"onlyVisible": BooleanField("Only return visible items", default=False)}
        ),
        template=_get_grid_items,
        description="Get all grid items (widgets)",
    ),
    OperationDescriptor(
        name="gridstack_will_it_fit",
        method="willItFit",
        category=Category.UTILITY,
        summary="Check if a widget will fit at specified position",
        parameters=arguments(
            {
                "widget": widget(
                    "",
                    {
                        **POSITION,
                        "id": UnionField(
                            WIDGET_ID.options, "Widget ID to ignore in collision check"
                        ),
                    },
                    required=("x", "y", "w", "h"),
                )
            },
            required=("widget",),
        ),
        template=_will_it_fit,
        description="Check if a widget will fit at the specified position",
    ),
    OperationDescriptor(
        name="gridstack_is_area_empty",
        method="isAreaEmpty",
        category=Category.UTILITY,
        summary="Check if an area is empty",
        parameters=arguments(POSITION, required=("x", "y", "w", "h")),
        template=_is_area_empty,
        description="Check if a grid area is empty",
    ),
    OperationDescriptor(
        name="gridstack_get_cell_height",
        method="getCellHeight",
        category=Category.UTILITY,
        summary="Get current cell height",
        parameters=arguments(),
        template=_get_cell_height,
        description="Get the current cell height",
    ),
    OperationDescriptor(
        name="gridstack_get_cell_from_pixel",
        method="getCellFromPixel",
        category=Category.UTILITY,
        summary="Convert pixel coordinates to grid cell position",
        parameters=arguments(
            {
                "position": ObjectField(
                    properties={
                        "top": NumberField("Top pixel position"),
                        "left": NumberField("Left pixel position"),
                    },
                    required=("top", "left"),
                ),
                "useOffset": BooleanField("Use offset coordinates", default=False),
            },
            required=("position",),
        ),
        template=_get_cell_from_pixel,
        description="Convert pixel coordinates to grid cell position",
    ),
    OperationDescriptor(
        name="gridstack_make_widget",
        method="makeWidget",
        category=Category.ADVANCED,
        summary="Convert an existing DOM element into a grid widget",
        parameters=arguments(
            {
                "el": element("Element selector to convert"),
                "options": widget(
                    "Widget options",
                    {
                        **POSITION,
                        "autoPosition": BooleanField(),
                        **CONSTRAINTS,
                        **FLAGS,
                    },
                    default={},
                ),
            },
            required=("el",),
        ),
        template=_make_widget,
        description="Convert an existing DOM element into a grid widget",
    ),
    OperationDescriptor(
        name="gridstack_remove_all",
        method="removeAll",
        category=Category.ADVANCED,
        summary="Remove all widgets from the grid",
        parameters=arguments({"removeDOM": BooleanField("Remove DOM elements", default=True)}),
        template=_remove_all,
        description="Remove all widgets from the grid",
    ),
    OperationDescriptor(
        name="gridstack_get_margin",
        method="getMargin",
        category=Category.ADVANCED,
        summary="Get current margin values",
        parameters=arguments(),
        template=_get_margin,
        description="Get current margin values",
    ),
    OperationDescriptor(
        name="gridstack_get_column",
        method="getColumn",
        category=Category.ADVANCED,
        summary="Get current number of columns",
        parameters=arguments(),
        template=_get_column,
        description="Get current number of columns",
    ),
    OperationDescriptor(
        name="gridstack_get_float",
        method="getFloat",
        category=Category.ADVANCED,
        summary="Get current float state",
        parameters=arguments(),
        template=_get_float,
        description="Get current float mode state",
    ),
    OperationDescriptor(
        name="gridstack_add_grid",
        method="addGrid",
        category=Category.ADVANCED,
        summary="Create a new grid with options and children (static method)",
        parameters=arguments(
            {
                "parent": element("Parent element selector"),
                "opt": grid_options("Grid options including children", default={}),
            },
            required=("parent",),
        ),
        template=_add_grid,
        description="Create a new grid with options and children (static method)",
    ),
)
