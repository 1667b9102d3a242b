"""Error kinds raised by the command surface.

Each error carries a stable ``code`` that becomes ``ServiceError.code``
when the dispatcher or the resource catalog converts it to a
:class:`~gridstack_mcp.services.result.ServiceResult`.
"""

from __future__ import annotations

from typing import Any


class GridstackError(Exception):
    """Base class for all command-surface errors."""

    code = "GRIDSTACK_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def detail(self) -> dict[str, Any]:
        """Structured context carried into ``ServiceError.detail``."""
        return {}


class UnknownOperation(GridstackError):
    """No descriptor is registered under the requested name."""

    code = "UNKNOWN_OPERATION"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name

    def detail(self) -> dict[str, Any]:
        return {"name": self.name}


class InvalidArguments(GridstackError):
    """The validator rejected the normalized parameters."""

    code = "INVALID_ARGUMENTS"

    def __init__(self, violations: list[str]) -> None:
        super().__init__(", ".join(violations))
        self.violations = list(violations)

    def detail(self) -> dict[str, Any]:
        return {"violations": list(self.violations)}


class ResourceNotFound(GridstackError):
    """No static resource is registered under the requested URI."""

    code = "RESOURCE_NOT_FOUND"

    def __init__(self, uri: str) -> None:
        super().__init__(f"Resource not found: {uri}")
        self.uri = uri

    def detail(self) -> dict[str, Any]:
        return {"uri": self.uri}


class SynthesisFailure(GridstackError):
    """A template function or the formatter could not render its input."""

    code = "SYNTHESIS_FAILURE"


class DuplicateOperation(GridstackError):
    """An operation name was registered twice while building a catalog."""

    code = "DUPLICATE_OPERATION"

    def __init__(self, name: str) -> None:
        super().__init__(f"Operation '{name}' already registered")
        self.name = name
