"""Synthesis: turn generated code plus catalog text into the response document.

The document has a fixed section order::

    ## GridStack <method> (`<operation>`)
    <description>
    ### Generated Code:      (always)
    ### Parameters:          (only when parameters are non-empty)
    ### Example:             (only when the operation has one)
    ### Notes:               (only when the operation has notes)

``SynthesisEngine.format`` is a pure function of the result, so rendering
the same result twice gives byte-identical text.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from gridstack_mcp.domain.encoding import to_json
from gridstack_mcp.domain.operations import OperationCatalog

GENERIC_DESCRIPTION = "GridStack operation"


class SynthesisResult(BaseModel):
    """One rendered invocation, built fresh per call."""

    model_config = {"frozen": True}

    operation: str
    title: str
    parameters: dict[str, Any] = Field(default_factory=dict)
    code: str
    description: str = GENERIC_DESCRIPTION
    example: str | None = None
    notes: tuple[str, ...] = ()


def _fenced(language: str, body: str) -> str:
    return f"```{language}\n{body}\n```"


class SynthesisEngine:
    """Render and format synthesis results for operations in *catalog*.

    Args:
        catalog: Source of per-operation description, example and notes text.
        json_indent: Indent of the parameter echo block.
        echo_parameters: Emit the ``Parameters`` section at all.
    """

    def __init__(
        self,
        catalog: OperationCatalog,
        *,
        json_indent: int = 2,
        echo_parameters: bool = True,
    ) -> None:
        self._catalog = catalog
        self._json_indent = json_indent
        self._echo_parameters = echo_parameters

    def render(self, name: str, params: dict[str, Any], code: str) -> SynthesisResult:
        descriptor = self._catalog.find(name)
        if descriptor is None:
            # Unregistered names degrade to generic text rather than failing.
            return SynthesisResult(
                operation=name,
                title=f"## GridStack {name}",
                parameters=params,
                code=code,
            )
        return SynthesisResult(
            operation=name,
            title=f"## GridStack {descriptor.method} (`{name}`)",
            parameters=params,
            code=code,
            description=descriptor.description or GENERIC_DESCRIPTION,
            example=descriptor.example,
            notes=descriptor.notes,
        )

    def format(self, result: SynthesisResult) -> str:
        sections = [
            result.title,
            result.description,
            "### Generated Code:\n" + _fenced("javascript", result.code),
        ]
        if self._echo_parameters and result.parameters:
            echo = to_json(result.parameters, indent=self._json_indent)
            sections.append("### Parameters:\n" + _fenced("json", echo))
        if result.example:
            sections.append("### Example:\n" + _fenced("javascript", result.example))
        if result.notes:
            sections.append("### Notes:\n" + "\n".join(f"- {note}" for note in result.notes))
        return "\n\n".join(sections)

    def synthesize(self, name: str, params: dict[str, Any], code: str) -> str:
        return self.format(self.render(name, params, code))
