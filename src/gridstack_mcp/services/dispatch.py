"""Dispatcher: the public entry point of the command surface.

``execute`` runs one invocation and returns a ServiceResult; ``invoke``
flattens that to the single text blob the MCP transport expects and never
raises. Each call goes through the same fixed pipeline:

1. resolve the descriptor (``UnknownOperation`` if absent)
2. merge declared defaults under the caller's arguments and normalize
3. validate (``InvalidArguments`` carrying every violation)
4. run the descriptor's template function
5. synthesize the response document

The dispatcher keeps no state between calls.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

import structlog

from gridstack_mcp.domain.errors import (
    GridstackError,
    InvalidArguments,
    SynthesisFailure,
    UnknownOperation,
)
from gridstack_mcp.domain.operations import OperationCatalog, OperationDescriptor
from gridstack_mcp.domain.schema import normalize
from gridstack_mcp.domain.types import Category
from gridstack_mcp.domain.validation import validate
from gridstack_mcp.services.result import ServiceResult
from gridstack_mcp.services.synthesis import SynthesisEngine
from gridstack_mcp.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)


class Dispatcher:
    """Resolve, validate and synthesize operation invocations."""

    def __init__(
        self,
        catalog: OperationCatalog | None = None,
        engine: SynthesisEngine | None = None,
    ) -> None:
        if catalog is None:
            from gridstack_mcp.catalog import default_catalog

            catalog = default_catalog()
        self.catalog = catalog
        self.engine = engine or SynthesisEngine(catalog)

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    def list_operations(self) -> list[dict[str, Any]]:
        """``{name, description, inputSchema}`` per operation, in catalog order."""
        return [descriptor.to_listing() for descriptor in self.catalog.list()]

    def list_result(self, category: Category | None = None) -> ServiceResult:
        """Enumeration summary for the CLI, optionally one category only."""
        items = [
            {
                "name": descriptor.name,
                "category": descriptor.category.value,
                "method": descriptor.method,
                "description": descriptor.summary,
                "required": list(descriptor.parameters.required),
            }
            for descriptor in self.catalog.list()
            if category is None or descriptor.category is category
        ]
        return ServiceResult(
            ok=True,
            op="list_tools",
            data={"count": len(items), "items": items},
        )

    def describe(self, name: str) -> ServiceResult:
        descriptor = self.catalog.find(name)
        if descriptor is None:
            return ServiceResult.failure("describe", UnknownOperation(name))
        return ServiceResult(
            ok=True,
            op="describe",
            data={
                **descriptor.to_listing(),
                "method": descriptor.method,
                "category": descriptor.category.value,
                "defaults": descriptor.defaults,
            },
        )

    # ------------------------------------------------------------------
    # Invocation
    # ------------------------------------------------------------------

    def prepare(self, descriptor: OperationDescriptor, arguments: Mapping[str, Any]) -> dict[str, Any]:
        """Defaults merged under *arguments*, in canonical key order."""
        merged = copy.deepcopy(descriptor.defaults)
        merged.update(arguments)
        return normalize(descriptor.parameters, merged)

    @traced
    def execute(self, name: str, arguments: Mapping[str, Any] | None = None) -> ServiceResult:
        try:
            params, text = self._run(name, {} if arguments is None else arguments)
        except GridstackError as exc:
            log.info("dispatch.failed", operation=name, code=exc.code, error=exc.message)
            return ServiceResult.failure(name, exc)

        log.debug("dispatch.ok", operation=name)
        return ServiceResult(ok=True, op=name, data={"text": text, "parameters": params})

    def invoke(self, name: str, arguments: Mapping[str, Any] | None = None) -> str:
        """Run *name* and return its document, or ``Error executing <name>: ...``."""
        result = self.execute(name, arguments)
        if result.ok:
            return result.data["text"]
        assert result.error is not None
        return f"Error executing {name}: {result.error.message}"

    def _run(self, name: str, arguments: Any) -> tuple[dict[str, Any], str]:
        descriptor = self.catalog.find(name)
        if descriptor is None:
            raise UnknownOperation(name)
        if not isinstance(arguments, Mapping):
            raise InvalidArguments(["arguments must be an object"])

        # Anything other than a GridstackError past this point is reported
        # as a synthesis failure, never raised to the caller.
        try:
            params = self.prepare(descriptor, arguments)
            with trace_span("validate") as span:
                outcome = validate(descriptor, params)
                if span:
                    span.annotate("violations", len(outcome.violations))
            if not outcome.valid:
                raise InvalidArguments(list(outcome.violations))

            with trace_span("template"):
                code = descriptor.template(params)
            with trace_span("synthesize"):
                text = self.engine.synthesize(name, params, code)
        except GridstackError:
            raise
        except Exception as exc:
            log.exception("dispatch.synthesis_error", operation=name)
            raise SynthesisFailure(f"{type(exc).__name__}: {exc}") from exc
        return params, text
