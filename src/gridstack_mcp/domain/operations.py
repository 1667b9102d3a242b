"""Operation descriptors and the ordered catalog that owns them.

A descriptor pairs an argument schema with the template function that
turns normalized arguments into generated code, and carries the
description/example/notes text used by the synthesis step. Descriptors
are built once from literal tables and never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from gridstack_mcp.domain.errors import DuplicateOperation
from gridstack_mcp.domain.schema import FieldSpec, ObjectField, defaults, to_json_schema
from gridstack_mcp.domain.types import Category

logger = logging.getLogger(__name__)

TemplateFn = Callable[[Mapping[str, Any]], str]


def arguments(
    properties: Mapping[str, FieldSpec] | None = None,
    *,
    required: tuple[str, ...] = (),
) -> ObjectField:
    """Top-level argument object: declared keys only."""
    return ObjectField(properties=dict(properties or {}), required=required, additional=False)


@dataclass(frozen=True)
class OperationDescriptor:
    """Static metadata and template binding for one operation.

    Attributes:
        name: Unique operation key (``gridstack_add_widget``).
        method: GridStack method label shown in generated titles (``addWidget``).
        category: Presentation group.
        summary: One-line text shown when operations are enumerated.
        parameters: Argument schema.
        template: Renders generated code from normalized arguments.
        description: Longer text for the synthesized document.
        example: Usage example (optional section).
        notes: Caveats (optional section).
    """

    name: str
    method: str
    category: Category
    summary: str
    parameters: ObjectField
    template: TemplateFn
    description: str | None = None
    example: str | None = None
    notes: tuple[str, ...] = ()

    @property
    def defaults(self) -> dict[str, Any]:
        return defaults(self.parameters)

    def input_schema(self) -> dict[str, Any]:
        return to_json_schema(self.parameters, top_level=True)

    def to_listing(self) -> dict[str, Any]:
        """Enumeration entry: name, summary and input schema."""
        return {
            "name": self.name,
            "description": self.summary,
            "inputSchema": self.input_schema(),
        }


class OperationCatalog:
    """Ordered registry of operation descriptors.

    ``list()`` returns descriptors in registration order; callers present
    that order to humans, so it must stay deterministic.
    """

    def __init__(self, descriptors: Iterable[OperationDescriptor] = ()) -> None:
        self._ordered: list[OperationDescriptor] = []
        self._index: dict[str, OperationDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: OperationDescriptor) -> None:
        """Add *descriptor*; raises DuplicateOperation if the name is taken."""
        if descriptor.name in self._index:
            raise DuplicateOperation(descriptor.name)
        self._ordered.append(descriptor)
        self._index[descriptor.name] = descriptor
        logger.debug("Registered operation %s (%s)", descriptor.name, descriptor.category)

    def list(self) -> tuple[OperationDescriptor, ...]:
        return tuple(self._ordered)

    def find(self, name: str) -> OperationDescriptor | None:
        return self._index.get(name)

    def names(self) -> list[str]:
        return [d.name for d in self._ordered]

    def by_category(self) -> dict[Category, list[OperationDescriptor]]:
        """Group descriptors by category, categories in enum order."""
        grouped: dict[Category, list[OperationDescriptor]] = {}
        for category in Category:
            members = [d for d in self._ordered if d.category is category]
            if members:
                grouped[category] = members
        return grouped

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[OperationDescriptor]:
        return iter(self._ordered)

    def __contains__(self, name: object) -> bool:
        return name in self._index
