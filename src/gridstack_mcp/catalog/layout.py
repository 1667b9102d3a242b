"""Layout, batching, serialization and responsive operations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gridstack_mcp.catalog.fields import (
    BREAKPOINTS,
    COLUMN,
    layout_mode,
    number_or_string,
    widget_list,
)
from gridstack_mcp.domain.encoding import js_literal, js_string, to_json
from gridstack_mcp.domain.operations import OperationDescriptor, arguments
from gridstack_mcp.domain.schema import BooleanField, StringField, UnionField, is_number
from gridstack_mcp.domain.types import Category

# --- Template functions ---


def _compact(params: Mapping[str, Any]) -> str:
    return f"grid.compact({js_string(params['layout'])}, {js_literal(params['doSort'])});"


def _float(params: Mapping[str, Any]) -> str:
    if "val" in params:
        return f"grid.float({js_literal(params['val'])});"
    return "grid.float();"


def _column(params: Mapping[str, Any]) -> str:
    return f"grid.column({js_literal(params['column'])}, {js_string(params['layout'])});"


def _cell_height(params: Mapping[str, Any]) -> str:
    if "val" in params:
        return f"grid.cellHeight({js_literal(params['val'])}, {js_literal(params['update'])});"
    return "grid.cellHeight();"


def _margin(params: Mapping[str, Any]) -> str:
    value, unit = params["value"], params["unit"]
    # A bare number is pixels to GridStack; any other unit must travel as CSS text.
    if is_number(value) and unit != "px":
        value = f"{js_literal(value)}{unit}"
    return f"grid.margin({js_literal(value)});"


def _batch_update(params: Mapping[str, Any]) -> str:
    return f"grid.batchUpdate({js_literal(params['flag'])});"


def _save(params: Mapping[str, Any]) -> str:
    content, grid_opt = js_literal(params["saveContent"]), js_literal(params["saveGridOpt"])
    return f"const layout = grid.save({content}, {grid_opt});"


def _load(params: Mapping[str, Any]) -> str:
    layout = params["layout"]
    # A string layout is a JS expression (variable name or JSON text), inserted as-is.
    data = layout if isinstance(layout, str) else to_json(layout)
    return f"grid.load({data}, {js_literal(params['addAndRemove'])});"


def _set_responsive(params: Mapping[str, Any]) -> str:
    return f"grid.setResponsive({to_json(params['breakpoints'])});"


# --- Descriptors ---

OPERATIONS: tuple[OperationDescriptor, ...] = (
    OperationDescriptor(
        name="gridstack_compact",
        method="compact",
        category=Category.LAYOUT,
        summary="Compact the grid layout",
        parameters=arguments(
            {
                "layout": layout_mode("Compact layout type"),
                "doSort": BooleanField("Sort widgets before compacting", default=True),
            }
        ),
        template=_compact,
        description="Compact the grid layout to remove gaps",
    ),
    OperationDescriptor(
        name="gridstack_float",
        method="float",
        category=Category.LAYOUT,
        summary="Enable or disable floating widgets",
        parameters=arguments(
            {"val": BooleanField("Enable floating (true) or disable (false)")}
        ),
        template=_float,
        description="Enable or disable floating widget mode",
        notes=(
            "Float mode allows widgets to move up to fill gaps",
            "Disable for more predictable layouts",
            "Can be toggled at runtime",
        ),
    ),
    OperationDescriptor(
        name="gridstack_column",
        method="column",
        category=Category.LAYOUT,
        summary="Change the number of columns",
        parameters=arguments(
            {
                "column": UnionField(COLUMN.options, "Number of columns or 'auto'"),
                "layout": layout_mode("How to re-layout widgets"),
            },
            required=("column",),
        ),
        template=_column,
        description="Change the number of columns in the grid",
        notes=(
            "Changing columns re-layouts existing widgets",
            "CSS must support the new column count",
            "Use 'auto' for nested grids",
        ),
    ),
    OperationDescriptor(
        name="gridstack_cell_height",
        method="cellHeight",
        category=Category.LAYOUT,
        summary="Update cell height",
        parameters=arguments(
            {
                "val": number_or_string("New cell height (px, 'auto', 'initial', CSS units)"),
                "update": BooleanField("Update existing widgets", default=True),
            }
        ),
        template=_cell_height,
        description="Update the height of grid cells",
    ),
    OperationDescriptor(
        name="gridstack_margin",
        method="margin",
        category=Category.LAYOUT,
        summary="Update grid margin/gap",
        parameters=arguments(
            {
                "value": number_or_string("Margin value (px or CSS format)"),
                "unit": StringField("CSS unit (px, em, rem, etc.)", default="px"),
            },
            required=("value",),
        ),
        template=_margin,
        description="Update the margin/gap between grid items",
    ),
    OperationDescriptor(
        name="gridstack_batch_update",
        method="batchUpdate",
        category=Category.BATCH,
        summary="Enable/disable batch update mode for efficiency",
        parameters=arguments(
            {
                "flag": BooleanField(
                    "Enable (true) or disable (false) batch mode", default=True
                )
            }
        ),
        template=_batch_update,
        description="Enable batch update mode for efficient multiple operations",
        notes=(
            "Use before multiple operations for efficiency",
            "Call with false to end batch mode",
            "Only one 'change' event fired at end",
        ),
    ),
    OperationDescriptor(
        name="gridstack_save",
        method="save",
        category=Category.SERIALIZATION,
        summary="Save grid layout to JSON",
        parameters=arguments(
            {
                "saveContent": BooleanField("Include widget content in save", default=True),
                "saveGridOpt": BooleanField("Include grid options in save", default=False),
            }
        ),
        template=_save,
        description="Serialize the current grid layout to JSON",
        example=(
            "// Save layout to JSON\n"
            "const layout = grid.save(true);\n"
            "localStorage.setItem('layout', JSON.stringify(layout));"
        ),
        notes=(
            "Returns array of widget configurations",
            "saveContent=true includes HTML content",
            "saveGridOpt=true includes grid options",
        ),
    ),
    OperationDescriptor(
        name="gridstack_load",
        method="load",
        category=Category.SERIALIZATION,
        summary="Load grid layout from JSON",
        parameters=arguments(
            {
                "layout": UnionField(
                    (
                        widget_list(
                            "Widget configurations",
                            entry_label="Widget",
                            collection="Layout widgets",
                        ),
                        StringField(),
                    ),
                    "Layout data (JSON array or string)",
                ),
                "addAndRemove": BooleanField(
                    "Add new widgets and remove missing ones", default=True
                ),
            },
            required=("layout",),
        ),
        template=_load,
        description="Load a grid layout from JSON data",
        example=(
            "// Load layout from JSON\n"
            "const layout = JSON.parse(localStorage.getItem('layout'));\n"
            "grid.load(layout);"
        ),
        notes=(
            "Accepts array of widget configs or JSON string",
            "addAndRemove=true syncs with current widgets",
            "Existing widgets not in layout are removed",
        ),
    ),
    OperationDescriptor(
        name="gridstack_set_responsive",
        method="setResponsive",
        category=Category.RESPONSIVE,
        summary="Configure responsive breakpoints",
        parameters=arguments({"breakpoints": BREAKPOINTS}, required=("breakpoints",)),
        template=_set_responsive,
        description="Configure responsive breakpoints",
    ),
)
