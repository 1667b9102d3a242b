"""Field specs shared across operation definitions.

Widget, grid-option and breakpoint shapes appear in several operations;
they are defined once here so every operation validates them the same way.
"""

from __future__ import annotations

from typing import Any

from gridstack_mcp.domain.schema import (
    MISSING,
    ArrayField,
    BooleanField,
    Bound,
    Dimension,
    FieldSpec,
    NumberField,
    ObjectField,
    StringField,
    UnionField,
    UniqueKey,
)
from gridstack_mcp.domain.types import GRID_EVENTS, LAYOUT_MODES

# --- Scalars ---


def coordinate(description: str, label: str) -> NumberField:
    return NumberField(description, dimension=Dimension.COORDINATE, label=label)


def size(description: str, label: str) -> NumberField:
    return NumberField(description, dimension=Dimension.SIZE, label=label)


def number_or_string(description: str) -> UnionField:
    return UnionField((NumberField(), StringField()), description)


def boolean_or_string(description: str) -> UnionField:
    return UnionField((BooleanField(), StringField()), description)


def layout_mode(description: str) -> StringField:
    return StringField(description, enum=LAYOUT_MODES, default="moveScale")


def event_name(description: str) -> StringField:
    return StringField(description, enum=GRID_EVENTS)


def element(description: str) -> StringField:
    return StringField(description)


WIDGET_ID = UnionField((StringField(), NumberField()), "Unique widget identifier")

COLUMN = UnionField(
    (size("", "column count"), StringField(enum=("auto",))),
    "Number of columns or 'auto' for nested grids",
)

# --- Widgets ---

WIDGET_BOUNDS: tuple[Bound, ...] = (
    Bound("minW", "maxW", "w", "width"),
    Bound("minH", "maxH", "h", "height"),
)

POSITION: dict[str, FieldSpec] = {
    "x": coordinate("X position", "x position"),
    "y": coordinate("Y position", "y position"),
    "w": size("Width in columns", "width"),
    "h": size("Height in rows", "height"),
}

CONSTRAINTS: dict[str, FieldSpec] = {
    "minW": size("Minimum width", "minW"),
    "maxW": size("Maximum width", "maxW"),
    "minH": size("Minimum height", "minH"),
    "maxH": size("Maximum height", "maxH"),
}

FLAGS: dict[str, FieldSpec] = {
    "locked": BooleanField("Lock widget position/size"),
    "noResize": BooleanField("Disable resizing"),
    "noMove": BooleanField("Disable moving"),
}


def widget(
    description: str,
    properties: dict[str, FieldSpec],
    *,
    required: tuple[str, ...] = (),
    default: Any = MISSING,
) -> ObjectField:
    """Widget-shaped object carrying the min/max bounds."""
    return ObjectField(
        description,
        properties=properties,
        required=required,
        bounds=WIDGET_BOUNDS,
        default=default,
    )


WIDGET = widget(
    "Widget configuration",
    {
        "id": WIDGET_ID,
        **POSITION,
        **CONSTRAINTS,
        **FLAGS,
        "autoPosition": BooleanField("Auto-position widget"),
        "resizeToContent": BooleanField("Resize to content"),
        "content": StringField("Widget HTML content"),
    },
)


def widget_list(description: str, *, entry_label: str, collection: str) -> ArrayField:
    """Array of widgets whose ids must be unique."""
    return ArrayField(
        description,
        items=WIDGET,
        unique_by=UniqueKey("id", "ids", collection),
        entry_label=entry_label,
    )


# --- Responsive breakpoints ---

BREAKPOINT = ObjectField(
    properties={
        "w": NumberField(
            "Window width breakpoint", dimension=Dimension.EXTENT, label="width"
        ),
        "c": size("Number of columns at this breakpoint", "columns"),
    },
    required=("w", "c"),
)

BREAKPOINTS = ArrayField(
    "Array of breakpoint configurations",
    items=BREAKPOINT,
    unique_by=UniqueKey("w", "widths", "Breakpoints"),
    entry_label="Breakpoint",
)

# --- Grid options ---

GRID_OPTION_PROPERTIES: dict[str, FieldSpec] = {
    "acceptWidgets": boolean_or_string("Accept widgets from other grids or external elements"),
    "alwaysShowResizeHandle": BooleanField("Always show resize handles"),
    "animate": BooleanField("Enable animations"),
    "auto": BooleanField("Auto-position widgets"),
    "cellHeight": number_or_string("Cell height (px, 'auto', 'initial', CSS units)"),
    "cellHeightThrottle": coordinate(
        "Throttle time for cellHeight='auto' (ms)", "cellHeightThrottle"
    ),
    "children": widget_list(
        "Widgets to create with the grid",
        entry_label="Child widget",
        collection="Child widgets",
    ),
    "class": StringField("Extra CSS class for the grid container"),
    "column": COLUMN,
    "columnOpts": ObjectField(
        "Responsive column options",
        properties={
            "breakpoints": BREAKPOINTS,
            "columnMax": size("Maximum number of columns", "columnMax"),
            "columnWidth": NumberField(
                "Wanted column width (px)", dimension=Dimension.EXTENT, label="columnWidth"
            ),
        },
    ),
    "disableDrag": BooleanField("Disable dragging of widgets"),
    "disableResize": BooleanField("Disable resizing of widgets"),
    "float": BooleanField("Enable floating widgets"),
    "handle": StringField("Draggable handle selector"),
    "margin": number_or_string("Gap between grid items (px or CSS units)"),
    "maxRow": coordinate("Maximum number of rows", "maxRow"),
    "minRow": coordinate("Minimum number of rows", "minRow"),
    "removable": boolean_or_string("Allow widgets to be removed by dragging out"),
    "rtl": BooleanField("Right-to-left support"),
    "staticGrid": BooleanField("Make grid static (no drag/resize)"),
}


def grid_options(description: str, *, default: Any = MISSING) -> ObjectField:
    return ObjectField(
        description,
        properties=GRID_OPTION_PROPERTIES,
        bounds=(Bound("minRow", "maxRow"),),
        default=default,
    )
