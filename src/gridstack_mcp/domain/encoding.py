"""Canonical text encodings used by template functions.

Structured values are serialized as pretty-printed JSON (two-space
indent, insertion order, non-ASCII preserved); scalars are rendered as
JavaScript literals. Anything that has no faithful JSON form (NaN,
infinities, arbitrary objects) raises :class:`SynthesisFailure`.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any

from gridstack_mcp.domain.errors import SynthesisFailure


def to_json(value: Any, *, indent: int | None = 2) -> str:
    """Stable JSON rendering of *value*; ``indent=None`` gives the compact form."""
    separators = (",", ":") if indent is None else None
    try:
        return json.dumps(
            _plain(value),
            indent=indent,
            separators=separators,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise SynthesisFailure(f"Cannot serialize value: {exc}") from exc


def _plain(value: Any) -> Any:
    """Integral floats become ints so ``3.0`` renders as ``3`` like JSON.stringify."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_plain(item) for item in value]
    return value


def js_string(text: str) -> str:
    """Single-quoted JavaScript string literal."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


def js_literal(value: Any) -> str:
    """JavaScript literal for a scalar or structured value."""
    if isinstance(value, str):
        return js_string(value)
    if isinstance(value, dict | list | tuple):
        return to_json(value)
    return to_json(value, indent=None)


def js_argument(params: Mapping[str, Any], key: str) -> str:
    """Positional JS argument for *key*; ``undefined`` when it was omitted."""
    return js_literal(params[key]) if key in params else "undefined"
