"""Static resource catalog: fixed URIs mapped to lazily rendered documents.

Every ``read`` renders its body from a packaged Jinja2 template plus one
of the composition helpers below; nothing is cached, so two reads of the
same URI are textually identical but never share identity. Unlike
operation invocations, an unknown URI is a hard failure
(:class:`~gridstack_mcp.domain.errors.ResourceNotFound`).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from gridstack_mcp.domain.encoding import js_literal, to_json
from gridstack_mcp.domain.errors import ResourceNotFound
from gridstack_mcp.domain.operations import OperationCatalog
from gridstack_mcp.domain.types import Framework, GridEvent
from gridstack_mcp.infrastructure.templates import build_template_environment
from gridstack_mcp.services.result import ServiceResult

logger = logging.getLogger(__name__)

DEFAULT_CDN_BASE = "https://cdn.jsdelivr.net/npm/gridstack@12/dist"


class ResourceDescriptor(BaseModel):
    """Enumeration entry for one static resource."""

    model_config = {"frozen": True}

    uri: str
    name: str
    description: str
    mime_type: str


class ResourceContent(BaseModel):
    """Rendered body of one static resource."""

    model_config = {"frozen": True}

    uri: str
    content: str
    mime_type: str


# ---------------------------------------------------------------------------
# Composition helpers
# ---------------------------------------------------------------------------

BASIC_GRID: dict[str, Any] = {
    "column": 12,
    "cellHeight": "auto",
    "margin": 10,
    "children": [
        {"id": "widget1", "x": 0, "y": 0, "w": 3, "h": 2, "content": "Widget 1"},
        {"id": "widget2", "x": 3, "y": 0, "w": 3, "h": 2, "content": "Widget 2"},
        {"id": "widget3", "x": 0, "y": 2, "w": 6, "h": 3, "content": "Large Widget"},
    ],
}

# Optional gs-* attributes, emitted only when the widget sets a truthy value.
_WIDGET_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("id", "gs-id"),
    ("minW", "gs-min-w"),
    ("maxW", "gs-max-w"),
    ("minH", "gs-min-h"),
    ("maxH", "gs-max-h"),
    ("locked", "gs-locked"),
    ("noResize", "gs-no-resize"),
    ("noMove", "gs-no-move"),
)


def _attribute_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(js_literal(value) if isinstance(value, float) else value)


def widget_attributes(widget: Mapping[str, Any]) -> list[str]:
    """``gs-*`` HTML attributes positioning *widget* inside a grid container."""
    attributes = [
        f'gs-x="{_attribute_value(widget.get("x") or 0)}"',
        f'gs-y="{_attribute_value(widget.get("y") or 0)}"',
        f'gs-w="{_attribute_value(widget.get("w") or 1)}"',
        f'gs-h="{_attribute_value(widget.get("h") or 1)}"',
    ]
    for key, attribute in _WIDGET_ATTRIBUTES:
        if widget.get(key):
            attributes.append(f'{attribute}="{_attribute_value(widget[key])}"')
    return attributes


def grid_page_context(
    options: Mapping[str, Any],
    *,
    cdn_base: str = DEFAULT_CDN_BASE,
    title: str = "GridStack Layout",
) -> dict[str, Any]:
    """Template context for a standalone HTML page hosting one grid."""
    class_name = options.get("class") or ""
    items = [
        {
            "attributes": widget_attributes(widget),
            "content": widget.get("content") or f"Widget {widget.get('id') or 'Item'}",
        }
        for widget in options.get("children") or []
    ]
    return {
        "title": title,
        "cdn_base": cdn_base,
        "grid_class": f"grid-stack {class_name}" if class_name else "grid-stack",
        "items": items,
        "options_json": to_json(dict(options)),
    }


def _css_length(value: Any) -> str | None:
    if not value:
        return None
    return f"{js_literal(value)}px" if isinstance(value, int | float) else str(value)


def custom_css_context(
    *,
    cell_height: int | float | str | None = None,
    margin: int | float | str | None = None,
    columns: int = 12,
    colors: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Template context for the custom stylesheet.

    Non-default column counts get explicit width/left rules per span,
    since the packaged GridStack CSS only covers 12 columns.
    """
    column_rules = []
    if columns != 12:
        step = 100 / columns
        column_rules = [
            {
                "span": span,
                "offset": span - 1,
                "width": f"{step * span:.6f}",
                "left": f"{step * (span - 1):.6f}",
            }
            for span in range(1, columns + 1)
        ]
    palette = None
    if colors is not None:
        palette = {key: colors.get(key) for key in ("background", "border", "hover")}
    return {
        "margin": _css_length(margin),
        "cell_height": _css_length(cell_height),
        "colors": palette,
        "columns": columns,
        "column_rules": column_rules,
    }


_EVENT_DESCRIPTIONS: dict[GridEvent, str] = {
    GridEvent.ADDED: "Widget added",
    GridEvent.CHANGE: "Layout changed",
    GridEvent.DISABLE: "Grid disabled",
    GridEvent.DRAG: "Widget dragged",
    GridEvent.DRAG_START: "Drag started",
    GridEvent.DRAG_STOP: "Drag stopped",
    GridEvent.DROPPED: "External widget dropped",
    GridEvent.ENABLE: "Grid enabled",
    GridEvent.REMOVED: "Widget removed",
    GridEvent.RESIZE: "Widget resized",
    GridEvent.RESIZE_START: "Resize started",
    GridEvent.RESIZE_STOP: "Resize stopped",
}

_WIDGET_EXAMPLE: dict[str, Any] = {
    "id": "widget1",
    "x": 0,
    "y": 0,
    "w": 3,
    "h": 2,
    "minW": 1,
    "maxW": 6,
    "minH": 1,
    "maxH": 4,
    "locked": False,
    "noResize": False,
    "noMove": False,
    "content": "<div>Widget Content</div>",
}

_GRID_OPTIONS_EXAMPLE: dict[str, Any] = {
    "column": 12,
    "cellHeight": "auto",
    "margin": 10,
    "float": False,
    "disableDrag": False,
    "disableResize": False,
    "animate": True,
    "acceptWidgets": True,
}


def api_reference_context(
    operations: OperationCatalog,
    resources: tuple[ResourceDescriptor, ...] = (),
) -> dict[str, Any]:
    """API reference built from the live catalog, grouped by category."""
    groups = [
        {
            "heading": category.heading,
            "tools": [{"name": op.name, "summary": op.summary} for op in members],
        }
        for category, members in operations.by_category().items()
    ]
    return {
        "groups": groups,
        "events": [
            {"name": event.value, "description": _EVENT_DESCRIPTIONS[event]} for event in GridEvent
        ],
        "widget_example": to_json(_WIDGET_EXAMPLE),
        "grid_options_example": to_json(_GRID_OPTIONS_EXAMPLE),
        "resources": [r.model_dump() for r in resources],
    }


def _js_object_body(options: Mapping[str, Any]) -> str:
    """``column: 12, cellHeight: 'auto'``: object literal body for JSX/templates."""
    return ", ".join(f"{key}: {js_literal(value)}" for key, value in options.items())


def framework_context(framework: Framework) -> dict[str, Any]:
    demo = {"x": 0, "y": 0, "w": 3, "h": 2}
    return {
        "framework": framework.value,
        "options": _js_object_body({"column": 12, "cellHeight": "auto"}),
        "item_attributes": " ".join(widget_attributes(demo)),
        "item_content": "Widget 1",
    }


def _dashboard_context(cdn_base: str) -> dict[str, Any]:
    return {
        "cdn_base": cdn_base,
        "kpis": [
            {"x": 0, "title": "Revenue", "icon": "fa-dollar-sign", "color": "#27ae60",
             "value": "$127K", "trend": "+12%"},
            {"x": 3, "title": "Users", "icon": "fa-users", "color": "#3498db",
             "value": "2.4K", "trend": "+8%"},
            {"x": 6, "title": "Orders", "icon": "fa-shopping-cart", "color": "#e74c3c",
             "value": "856", "trend": "+15%"},
            {"x": 9, "title": "Conversion", "icon": "fa-percentage", "color": "#f39c12",
             "value": "3.2%", "trend": "+0.4%"},
        ],
        "charts": [
            {"x": 0, "w": 8, "title": "Sales Trend", "icon": "fa-chart-line",
             "placeholder": "fa-chart-area"},
            {"x": 8, "w": 4, "title": "Traffic Sources", "icon": "fa-chart-pie",
             "placeholder": "fa-chart-pie"},
        ],
        "orders": [
            {"number": 1234, "customer": "John Doe", "total": "$89.99"},
            {"number": 1235, "customer": "Jane Smith", "total": "$156.50"},
            {"number": 1236, "customer": "Bob Johnson", "total": "$45.00"},
        ],
        "services": [
            {"name": "API Server", "state": "Online", "color": "#27ae60"},
            {"name": "Database", "state": "Online", "color": "#27ae60"},
            {"name": "CDN", "state": "Warning", "color": "#f39c12"},
        ],
        "options_json": to_json(
            {"column": 12, "cellHeight": 70, "margin": 15, "animate": True, "float": False}
        ),
    }


def _responsive_context(cdn_base: str) -> dict[str, Any]:
    return {
        "cdn_base": cdn_base,
        "widgets": [
            {"x": 0, "y": 0, "w": 4, "h": 2, "content": "Chart Widget"},
            {"x": 4, "y": 0, "w": 4, "h": 2, "content": "Stats Widget"},
            {"x": 8, "y": 0, "w": 4, "h": 2, "content": "News Widget"},
        ],
        "breakpoints": [
            {"w": 768, "c": 1, "label": "Mobile"},
            {"w": 992, "c": 6, "label": "Tablet"},
            {"w": 1200, "c": 12, "label": "Desktop"},
        ],
    }


def _tailwind_dashboard_context(cdn_base: str) -> dict[str, Any]:
    return {
        "cdn_base": cdn_base,
        "orders": [
            {"number": 1234, "total": "$89.99"},
            {"number": 1235, "total": "$156.50"},
        ],
        "options_json": to_json({"column": 12, "cellHeight": 70, "margin": 15}),
    }


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _Entry:
    descriptor: ResourceDescriptor
    group: str
    template: str
    context: Callable[[ResourceCatalog], dict[str, Any]]


def _entry(
    uri: str,
    name: str,
    description: str,
    mime_type: str,
    template: str,
    context: Callable[[ResourceCatalog], dict[str, Any]],
    *,
    group: str = "resources",
) -> _Entry:
    descriptor = ResourceDescriptor(
        uri=uri, name=name, description=description, mime_type=mime_type
    )
    return _Entry(descriptor, group, template, context)


_ENTRIES: tuple[_Entry, ...] = (
    _entry(
        "gridstack://documentation/api",
        "GridStack API Documentation",
        "Complete GridStack API reference",
        "text/markdown",
        "api.md.j2",
        lambda cat: api_reference_context(cat.operations, cat.list_resources()),
    ),
    _entry(
        "gridstack://examples/basic",
        "Basic GridStack Example",
        "Simple GridStack implementation",
        "text/html",
        "grid_page.html.j2",
        lambda cat: grid_page_context(BASIC_GRID, cdn_base=cat.cdn_base),
    ),
    _entry(
        "gridstack://examples/responsive",
        "Responsive GridStack Example",
        "Responsive grid with breakpoints",
        "text/html",
        "responsive.html.j2",
        lambda cat: _responsive_context(cat.cdn_base),
    ),
    _entry(
        "gridstack://examples/react",
        "React Integration",
        "GridStack with React component",
        "text/javascript",
        "react.js.j2",
        lambda cat: framework_context(Framework.REACT),
        group="frameworks",
    ),
    _entry(
        "gridstack://examples/vue",
        "Vue Integration",
        "GridStack with Vue component",
        "text/javascript",
        "vue.js.j2",
        lambda cat: framework_context(Framework.VUE),
        group="frameworks",
    ),
    _entry(
        "gridstack://examples/angular",
        "Angular Integration",
        "GridStack with Angular component",
        "text/javascript",
        "angular.ts.j2",
        lambda cat: framework_context(Framework.ANGULAR),
        group="frameworks",
    ),
    _entry(
        "gridstack://templates/dashboard",
        "Dashboard Template",
        "Complete dashboard layout template",
        "text/html",
        "dashboard.html.j2",
        lambda cat: _dashboard_context(cat.cdn_base),
    ),
    _entry(
        "gridstack://css/custom",
        "Custom CSS Styles",
        "Custom GridStack styling examples",
        "text/css",
        "custom.css.j2",
        lambda cat: custom_css_context(
            cell_height=80,
            margin=15,
            columns=12,
            colors={"background": "#ffffff", "border": "#e1e5e9", "hover": "#f8f9fa"},
        ),
    ),
    _entry(
        "gridstack://css/tailwind",
        "Tailwind CSS Integration",
        "Complete Tailwind CSS setup for GridStack",
        "text/css",
        "tailwind.css.j2",
        lambda cat: {
            "variants": [
                {"name": "primary", "color": "blue"},
                {"name": "success", "color": "green"},
                {"name": "warning", "color": "yellow"},
            ]
        },
    ),
    _entry(
        "gridstack://css/modules",
        "CSS Modules Examples",
        "Component-scoped CSS modules for GridStack",
        "text/css",
        "modules.css.j2",
        lambda cat: {},
    ),
    _entry(
        "gridstack://examples/tailwind-dashboard",
        "Tailwind Dashboard Example",
        "Modern dashboard using Tailwind CSS",
        "text/html",
        "tailwind_dashboard.html.j2",
        lambda cat: _tailwind_dashboard_context(cat.cdn_base),
    ),
)


class ResourceCatalog:
    """Read-only registry of static GridStack documents.

    Args:
        operations: Catalog the API reference is composed from.
        cdn_base: Base URL for the GridStack CSS/JS assets in HTML pages.
        template_dir: Optional directory whose templates replace packaged ones.
    """

    def __init__(
        self,
        operations: OperationCatalog | None = None,
        *,
        cdn_base: str = DEFAULT_CDN_BASE,
        template_dir: Path | None = None,
    ) -> None:
        if operations is None:
            from gridstack_mcp.catalog import default_catalog

            operations = default_catalog()
        self.operations = operations
        self.cdn_base = cdn_base.rstrip("/")
        self.template_dir = template_dir
        self._entries = {entry.descriptor.uri: entry for entry in _ENTRIES}

    def list_resources(self) -> tuple[ResourceDescriptor, ...]:
        return tuple(entry.descriptor for entry in _ENTRIES)

    def read(self, uri: str) -> ResourceContent:
        """Render the document behind *uri*; raises ResourceNotFound on a miss."""
        entry = self._entries.get(uri)
        if entry is None:
            raise ResourceNotFound(uri)

        env = build_template_environment(entry.group, override_dir=self.template_dir)
        content = env.get_template(entry.template).render(**entry.context(self))
        logger.debug("Rendered resource %s (%d chars)", uri, len(content))
        return ResourceContent(uri=uri, content=content, mime_type=entry.descriptor.mime_type)

    def read_result(self, uri: str) -> ServiceResult:
        try:
            resource = self.read(uri)
        except ResourceNotFound as exc:
            return ServiceResult.failure("read_resource", exc)
        return ServiceResult(ok=True, op="read_resource", data=resource.model_dump())

    def list_result(self) -> ServiceResult:
        items = [descriptor.model_dump() for descriptor in self.list_resources()]
        return ServiceResult(
            ok=True,
            op="list_resources",
            data={"count": len(items), "items": items},
        )
