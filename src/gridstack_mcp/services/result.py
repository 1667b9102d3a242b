"""ServiceResult and ServiceError: the contract every service call returns.

The dispatcher, the resource catalog, the CLI and the MCP adapter all
speak this type; only ``Dispatcher.invoke`` flattens it to plain text.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from gridstack_mcp.domain.errors import GridstackError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: GridstackError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=exc.detail())


class ServiceResult(BaseModel):
    """Universal return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"gridstack_add_widget"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: GridstackError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
