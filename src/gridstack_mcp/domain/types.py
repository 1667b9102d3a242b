"""GridStack vocabulary enums.

Layout modes, grid events, operation categories and framework targets
shared by the operation catalog and the resource catalog.
"""

from __future__ import annotations

from enum import StrEnum


class LayoutMode(StrEnum):
    """How existing widgets are re-laid out on compact/column changes."""

    MOVE_SCALE = "moveScale"
    MOVE = "move"
    SCALE = "scale"
    NONE = "none"
    LIST = "list"


class GridEvent(StrEnum):
    """Events a grid instance emits."""

    ADDED = "added"
    CHANGE = "change"
    DISABLE = "disable"
    DRAG = "drag"
    DRAG_START = "dragstart"
    DRAG_STOP = "dragstop"
    DROPPED = "dropped"
    ENABLE = "enable"
    REMOVED = "removed"
    RESIZE = "resize"
    RESIZE_START = "resizestart"
    RESIZE_STOP = "resizestop"


class Category(StrEnum):
    """Operation groups, in the order they are presented to callers."""

    CORE = "core"
    WIDGET = "widget"
    LAYOUT = "layout"
    BATCH = "batch"
    SERIALIZATION = "serialization"
    STATE = "state"
    RESPONSIVE = "responsive"
    UTILITY = "utility"
    EVENTS = "events"
    ADVANCED = "advanced"

    @property
    def heading(self) -> str:
        return _CATEGORY_HEADINGS[self]


_CATEGORY_HEADINGS: dict[Category, str] = {
    Category.CORE: "Core Grid Management",
    Category.WIDGET: "Widget Management",
    Category.LAYOUT: "Layout Operations",
    Category.BATCH: "Batch Operations",
    Category.SERIALIZATION: "Serialization",
    Category.STATE: "Grid State",
    Category.RESPONSIVE: "Responsive Features",
    Category.UTILITY: "Utilities",
    Category.EVENTS: "Event Management",
    Category.ADVANCED: "Advanced Features",
}


class Framework(StrEnum):
    """Front-end frameworks with bundled integration snippets."""

    REACT = "react"
    VUE = "vue"
    ANGULAR = "angular"


LAYOUT_MODES: tuple[str, ...] = tuple(mode.value for mode in LayoutMode)
GRID_EVENTS: tuple[str, ...] = tuple(event.value for event in GridEvent)
