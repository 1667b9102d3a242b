"""Event listener operations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gridstack_mcp.catalog.fields import event_name
from gridstack_mcp.domain.encoding import js_string
from gridstack_mcp.domain.operations import OperationDescriptor, arguments
from gridstack_mcp.domain.schema import StringField
from gridstack_mcp.domain.types import Category


def _on(params: Mapping[str, Any]) -> str:
    # The callback is JavaScript source and is emitted verbatim.
    return f"grid.on({js_string(params['eventName'])}, {params['callback']});"


def _off(params: Mapping[str, Any]) -> str:
    return f"grid.off({js_string(params['eventName'])});"


OPERATIONS: tuple[OperationDescriptor, ...] = (
    OperationDescriptor(
        name="gridstack_on",
        method="addEventListener",
        category=Category.EVENTS,
        summary="Add event listener",
        parameters=arguments(
            {
                "eventName": event_name("Event name to listen for"),
                "callback": StringField("JavaScript callback function code"),
            },
            required=("eventName", "callback"),
        ),
        template=_on,
        description="Add an event listener for grid events",
        example=(
            "// Persist the layout whenever it changes\n"
            "grid.on('change', (event, items) => {\n"
            "  localStorage.setItem('layout', JSON.stringify(grid.save()));\n"
            "});"
        ),
    ),
    OperationDescriptor(
        name="gridstack_off",
        method="removeEventListener",
        category=Category.EVENTS,
        summary="Remove event listener",
        parameters=arguments(
            {"eventName": event_name("Event name to remove listener for")},
            required=("eventName",),
        ),
        template=_off,
        description="Remove an event listener",
    ),
)
