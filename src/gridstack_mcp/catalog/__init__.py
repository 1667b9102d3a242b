"""The fixed GridStack operation table.

Each category module exports an ``OPERATIONS`` tuple; :func:`build_catalog`
registers them grouped by category so enumeration order is stable.
"""

from __future__ import annotations

from functools import lru_cache

from gridstack_mcp.catalog import events, grid, layout, widgets
from gridstack_mcp.domain.operations import OperationCatalog, OperationDescriptor
from gridstack_mcp.domain.types import Category

_MODULES = (grid, widgets, layout, events)


def all_operations() -> list[OperationDescriptor]:
    """Every descriptor, ordered by category then declaration order."""
    rank = {category: index for index, category in enumerate(Category)}
    declared = [op for module in _MODULES for op in module.OPERATIONS]
    return sorted(declared, key=lambda op: rank[op.category])


def build_catalog() -> OperationCatalog:
    return OperationCatalog(all_operations())


@lru_cache(maxsize=1)
def default_catalog() -> OperationCatalog:
    """Process-wide catalog, built on first use."""
    return build_catalog()


__all__ = ["all_operations", "build_catalog", "default_catalog"]
