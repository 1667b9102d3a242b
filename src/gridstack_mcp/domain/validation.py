"""Argument validation against an operation's parameter schema.

Four phases run in a fixed order and every violation is collected, so a
caller sees all problems at once:

1. type conformance (primitive type, enum membership, unions, unknown keys)
2. required-field presence
3. dimensional constraints on widget-like objects (coordinates, sizes,
   min/max bounds)
4. collection constraints on arrays of labeled entries (per-entry
   dimensional checks, duplicate keys)

Phases 3 and 4 only look at values that passed phase 1, so a wrongly
typed value is reported once. Validation is a pure predicate: it never
raises and never modifies the parameters.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from gridstack_mcp.domain.schema import (
    ArrayField,
    Bound,
    Dimension,
    FieldSpec,
    NumberField,
    ObjectField,
    UnionField,
    describe,
    is_integer,
    is_number,
    matches,
)

if TYPE_CHECKING:
    from gridstack_mcp.domain.operations import OperationDescriptor


@dataclass(frozen=True)
class ValidationOutcome:
    """Ordered violations; ``valid`` is derived, never stored."""

    violations: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.violations


# Array entry context: (entry label, index)
_Entry = tuple[str, int]


def validate(descriptor: OperationDescriptor, params: Any) -> ValidationOutcome:
    """Validate normalized *params* against *descriptor*'s schema."""
    return validate_arguments(descriptor.parameters, params)


def validate_arguments(spec: ObjectField, params: Any) -> ValidationOutcome:
    if not isinstance(params, Mapping):
        return ValidationOutcome(("arguments must be an object",))

    violations: list[str] = []
    _check_types(spec, params, "", violations)
    _check_required(spec, params, "", violations)
    _check_dimensions(spec, params, violations, entry=None)
    _check_collections(spec, params, violations)
    return ValidationOutcome(tuple(violations))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


def _resolve(spec: FieldSpec, value: Any) -> FieldSpec | None:
    """The concrete spec *value* conforms to, or None."""
    if isinstance(spec, UnionField):
        return next((option for option in spec.options if matches(option, value)), None)
    return spec if matches(spec, value) else None


# ---------------------------------------------------------------------------
# Phase 1: type conformance
# ---------------------------------------------------------------------------


def _check_types(spec: FieldSpec, value: Any, path: str, out: list[str]) -> None:
    resolved = _resolve(spec, value)
    if resolved is None:
        out.append(f"{path} must be {describe(spec)}")
        return

    if isinstance(resolved, ObjectField):
        for name, child_value in value.items():
            child = resolved.properties.get(name)
            if child is None:
                if not resolved.additional:
                    out.append(f"Unknown field: {_join(path, name)}")
                continue
            _check_types(child, child_value, _join(path, name), out)
    elif isinstance(resolved, ArrayField) and resolved.items is not None:
        for index, item in enumerate(value):
            _check_types(resolved.items, item, f"{path}[{index}]", out)


# ---------------------------------------------------------------------------
# Phase 2: required fields
# ---------------------------------------------------------------------------


def _check_required(spec: FieldSpec, value: Any, path: str, out: list[str]) -> None:
    resolved = _resolve(spec, value)
    if isinstance(resolved, ObjectField):
        for name in resolved.required:
            if name not in value:
                out.append(f"Missing required field: {_join(path, name)}")
        for name, child in resolved.properties.items():
            if name in value:
                _check_required(child, value[name], _join(path, name), out)
    elif isinstance(resolved, ArrayField) and resolved.items is not None:
        for index, item in enumerate(value):
            _check_required(resolved.items, item, f"{path}[{index}]", out)


# ---------------------------------------------------------------------------
# Phase 3: dimensional constraints
# ---------------------------------------------------------------------------


def _dimension_ok(dimension: Dimension, value: Any) -> bool:
    if dimension is Dimension.COORDINATE:
        return is_integer(value) and value >= 0
    if dimension is Dimension.SIZE:
        return is_integer(value) and value > 0
    return value > 0


def _dimension_message(name: str, spec: NumberField, entry: _Entry | None) -> str:
    assert spec.dimension is not None
    label = spec.label or name
    requirement = spec.dimension.requirement
    if entry is not None:
        return f"{entry[0]} at index {entry[1]} must have a {requirement} {label} ({name})"
    if spec.dimension is Dimension.EXTENT:
        return f"{label} must be {requirement}"
    return f"{label} must be a {requirement}"


def _bound_messages(bound: Bound, value: Mapping[str, Any]) -> list[str]:
    def number(key: str | None) -> Any:
        if key is None:
            return None
        candidate = value.get(key)
        return candidate if is_number(candidate) else None

    low, high, current = number(bound.minimum), number(bound.maximum), number(bound.value)
    label = bound.label or bound.value
    messages: list[str] = []
    if low is not None and high is not None and low > high:
        messages.append(f"{bound.minimum} cannot be greater than {bound.maximum}")
    if current is not None and low is not None and current < low:
        messages.append(f"{label} cannot be less than {bound.minimum}")
    if current is not None and high is not None and current > high:
        messages.append(f"{label} cannot be greater than {bound.maximum}")
    return messages


def _check_dimensions(
    spec: FieldSpec,
    value: Any,
    out: list[str],
    *,
    entry: _Entry | None,
) -> None:
    """Dimensional checks on *value* and nested objects (arrays are phase 4)."""
    resolved = _resolve(spec, value)
    if not isinstance(resolved, ObjectField):
        return

    for name, child in resolved.properties.items():
        if name not in value:
            continue
        child_value = value[name]
        concrete = _resolve(child, child_value) if isinstance(child, UnionField) else child
        if isinstance(concrete, NumberField) and concrete.dimension is not None:
            if is_number(child_value) and not _dimension_ok(concrete.dimension, child_value):
                out.append(_dimension_message(name, concrete, entry))
        elif isinstance(concrete, ObjectField):
            _check_dimensions(concrete, child_value, out, entry=entry)

    for bound in resolved.bounds:
        for message in _bound_messages(bound, value):
            out.append(f"{entry[0]} at index {entry[1]}: {message}" if entry else message)


# ---------------------------------------------------------------------------
# Phase 4: collections
# ---------------------------------------------------------------------------


def _has_duplicates(values: list[Any]) -> bool:
    """Value-equality duplicate check (entries may be unhashable)."""
    seen: list[Any] = []
    for candidate in values:
        if any(candidate == previous for previous in seen):
            return True
        seen.append(candidate)
    return False


def _check_collections(spec: FieldSpec, value: Any, out: list[str]) -> None:
    resolved = _resolve(spec, value)
    if isinstance(resolved, ObjectField):
        for name, child in resolved.properties.items():
            if name in value:
                _check_collections(child, value[name], out)
        return
    if not isinstance(resolved, ArrayField) or resolved.items is None:
        return

    items = resolved.items
    for index, item in enumerate(value):
        _check_dimensions(items, item, out, entry=(resolved.entry_label, index))
        _check_collections(items, item, out)

    unique = resolved.unique_by
    if unique is None:
        return
    key_spec = items.properties.get(unique.field) if isinstance(items, ObjectField) else None
    keys = [
        item[unique.field]
        for item in value
        if isinstance(item, Mapping)
        and unique.field in item
        and (key_spec is None or matches(key_spec, item[unique.field]))
    ]
    if _has_duplicates(keys):
        out.append(f"{unique.collection} cannot have duplicate {unique.plural}")
