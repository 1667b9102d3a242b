"""Widget management operations: add, remove, update, move, resize."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gridstack_mcp.catalog.fields import (
    CONSTRAINTS,
    FLAGS,
    POSITION,
    WIDGET,
    coordinate,
    element,
    size,
    widget,
)
from gridstack_mcp.domain.encoding import js_argument, js_literal, js_string, to_json
from gridstack_mcp.domain.operations import OperationDescriptor, arguments
from gridstack_mcp.domain.schema import BooleanField, StringField
from gridstack_mcp.domain.types import Category

# --- Template functions ---


def _add_widget(params: Mapping[str, Any]) -> str:
    return f"grid.addWidget({to_json(params['widget'])});"


def _remove_widget(params: Mapping[str, Any]) -> str:
    el = js_string(params["el"])
    return (
        f"grid.removeWidget({el}, "
        f"{js_literal(params['removeDOM'])}, {js_literal(params['triggerEvent'])});"
    )


def _update_widget(params: Mapping[str, Any]) -> str:
    return f"grid.update({js_string(params['el'])}, {to_json(params['opts'])});"


def _move_widget(params: Mapping[str, Any]) -> str:
    x, y = js_argument(params, "x"), js_argument(params, "y")
    return f"grid.move({js_string(params['el'])}, {x}, {y});"


def _resize_widget(params: Mapping[str, Any]) -> str:
    width, height = js_argument(params, "width"), js_argument(params, "height")
    return f"grid.resize({js_string(params['el'])}, {width}, {height});"


# --- Descriptors ---

OPERATIONS: tuple[OperationDescriptor, ...] = (
    OperationDescriptor(
        name="gridstack_add_widget",
        method="addWidget",
        category=Category.WIDGET,
        summary="Add a new widget to the grid",
        parameters=arguments(
            {
                "widget": WIDGET,
                "triggerAddEvent": BooleanField("Trigger 'added' event", default=True),
            },
            required=("widget",),
        ),
        template=_add_widget,
        description="Add a new widget to the grid at the specified position",
        example=(
            "// Add a widget with content\n"
            "grid.addWidget({\n"
            "  x: 0, y: 0, w: 3, h: 2,\n"
            "  content: '<div>My Widget</div>',\n"
            "  id: 'widget1'\n"
            "});"
        ),
        notes=(
            "Widget will be auto-positioned if x,y not specified",
            "Triggers 'added' event by default",
            "Returns the created DOM element",
        ),
    ),
    OperationDescriptor(
        name="gridstack_remove_widget",
        method="removeWidget",
        category=Category.WIDGET,
        summary="Remove a widget from the grid",
        parameters=arguments(
            {
                "el": element("Widget selector or ID to remove"),
                "removeDOM": BooleanField("Remove from DOM as well", default=True),
                "triggerEvent": BooleanField("Trigger 'removed' event", default=True),
            },
            required=("el",),
        ),
        template=_remove_widget,
        description="Remove a widget from the grid",
        example="// Remove widget by selector\ngrid.removeWidget('#widget1');",
        notes=(
            "Can accept element, selector, or GridStackNode",
            "Set removeDOM=false to keep in DOM",
            "Triggers 'removed' event by default",
        ),
    ),
    OperationDescriptor(
        name="gridstack_update_widget",
        method="updateWidget",
        category=Category.WIDGET,
        summary="Update widget properties",
        parameters=arguments(
            {
                "el": element("Widget selector or ID to update"),
                "opts": widget(
                    "Properties to update",
                    {**POSITION, **CONSTRAINTS, **FLAGS, "content": StringField()},
                ),
            },
            required=("el", "opts"),
        ),
        template=_update_widget,
        description="Update widget properties (position, size, constraints)",
        example=(
            "// Update widget properties\n"
            "grid.update('#widget1', {\n"
            "  w: 4, h: 3,\n"
            "  locked: true\n"
            "});"
        ),
    ),
    OperationDescriptor(
        name="gridstack_move_widget",
        method="moveWidget",
        category=Category.WIDGET,
        summary="Move a widget to a new position",
        parameters=arguments(
            {
                "el": element("Widget selector or ID to move"),
                "x": coordinate("New X position", "x position"),
                "y": coordinate("New Y position", "y position"),
            },
            required=("el",),
        ),
        template=_move_widget,
        description="Move a widget to a new position",
        example="// Move widget to new position\ngrid.move('#widget1', 2, 1);",
    ),
    OperationDescriptor(
        name="gridstack_resize_widget",
        method="resizeWidget",
        category=Category.WIDGET,
        summary="Resize a widget",
        parameters=arguments(
            {
                "el": element("Widget selector or ID to resize"),
                "width": size("New width in columns", "width"),
                "height": size("New height in rows", "height"),
            },
            required=("el",),
        ),
        template=_resize_widget,
        description="Resize a widget to new dimensions",
        example="// Resize widget\ngrid.resize('#widget1', 4, 3);",
    ),
)
