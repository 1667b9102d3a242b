"""Parameter schema tree: a closed set of typed field specs.

Every operation describes its arguments as an :class:`ObjectField` whose
properties are one of six field kinds. Permissive unions (``number | "auto"``)
are modeled as :class:`UnionField` with explicit option specs rather than
loosely typed values, so the validator can check them exactly.

The tree renders to JSON Schema for enumeration (:func:`to_json_schema`)
and supplies defaults and canonical key order to the dispatcher
(:func:`defaults`, :func:`normalize`).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, ClassVar


class _Missing:
    """Sentinel for 'no default declared' (``None`` is a legal default)."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class Dimension(StrEnum):
    """Positional/dimensional role of a numeric field."""

    COORDINATE = "coordinate"  # non-negative integer (x, y)
    SIZE = "size"  # positive integer (w, h, columns)
    EXTENT = "extent"  # positive number (breakpoint widths)

    @property
    def requirement(self) -> str:
        return _REQUIREMENTS[self]


_REQUIREMENTS: dict[Dimension, str] = {
    Dimension.COORDINATE: "non-negative integer",
    Dimension.SIZE: "positive integer",
    Dimension.EXTENT: "positive",
}


@dataclass(frozen=True)
class Bound:
    """Ties a value field to the min/max fields that constrain it.

    ``value`` may be None when only the min/max ordering is checked
    (``minRow``/``maxRow`` have no concrete row count to compare).
    """

    minimum: str
    maximum: str
    value: str | None = None
    label: str | None = None


@dataclass(frozen=True)
class UniqueKey:
    """Entries of an array must not share a value for ``field``."""

    field: str
    plural: str
    collection: str


@dataclass(frozen=True)
class StringField:
    kind: ClassVar[str] = "string"

    description: str = ""
    enum: tuple[str, ...] | None = None
    default: Any = MISSING


@dataclass(frozen=True)
class NumberField:
    kind: ClassVar[str] = "number"

    description: str = ""
    dimension: Dimension | None = None
    label: str | None = None
    default: Any = MISSING


@dataclass(frozen=True)
class BooleanField:
    kind: ClassVar[str] = "boolean"

    description: str = ""
    default: Any = MISSING


@dataclass(frozen=True)
class ObjectField:
    """Object with ordered, declared properties.

    ``additional`` controls whether undeclared keys are accepted. Nested
    GridStack option objects accept them (the library has many more options
    than the catalog documents); top-level argument objects do not.
    """

    kind: ClassVar[str] = "object"

    description: str = ""
    properties: Mapping[str, FieldSpec] = field(default_factory=dict)
    required: tuple[str, ...] = ()
    bounds: tuple[Bound, ...] = ()
    additional: bool = True
    default: Any = MISSING


@dataclass(frozen=True)
class ArrayField:
    kind: ClassVar[str] = "array"

    description: str = ""
    items: FieldSpec | None = None
    unique_by: UniqueKey | None = None
    entry_label: str = "Entry"
    default: Any = MISSING


@dataclass(frozen=True)
class UnionField:
    """Value must conform to at least one of ``options`` (JSON Schema ``oneOf``)."""

    kind: ClassVar[str] = "union"

    options: tuple[FieldSpec, ...] = ()
    description: str = ""
    default: Any = MISSING


FieldSpec = StringField | NumberField | BooleanField | ObjectField | ArrayField | UnionField


# ---------------------------------------------------------------------------
# Primitive type checks
# ---------------------------------------------------------------------------


def is_number(value: Any) -> bool:
    """True for ints and floats; booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    if not is_number(value):
        return False
    return isinstance(value, int) or float(value).is_integer()


def matches(spec: FieldSpec, value: Any) -> bool:
    """Shallow type conformance of *value* against *spec*."""
    if isinstance(spec, StringField):
        if not isinstance(value, str):
            return False
        return spec.enum is None or value in spec.enum
    if isinstance(spec, NumberField):
        return is_number(value)
    if isinstance(spec, BooleanField):
        return isinstance(value, bool)
    if isinstance(spec, ObjectField):
        return isinstance(value, Mapping)
    if isinstance(spec, ArrayField):
        return isinstance(value, list | tuple)
    return any(matches(option, value) for option in spec.options)


def describe(spec: FieldSpec) -> str:
    """Human phrase for the values *spec* accepts (used in violation text)."""
    if isinstance(spec, StringField):
        if spec.enum and len(spec.enum) == 1:
            return f"'{spec.enum[0]}'"
        if spec.enum:
            return "one of: " + ", ".join(spec.enum)
        return "a string"
    if isinstance(spec, NumberField):
        return "a number"
    if isinstance(spec, BooleanField):
        return "a boolean"
    if isinstance(spec, ObjectField):
        return "an object"
    if isinstance(spec, ArrayField):
        return "an array"
    return " or ".join(describe(option) for option in spec.options)


# ---------------------------------------------------------------------------
# JSON Schema rendering
# ---------------------------------------------------------------------------


def to_json_schema(spec: FieldSpec, *, top_level: bool = False) -> dict[str, Any]:
    """Render *spec* as a JSON Schema fragment.

    Key order is fixed (type, enum, properties, required, items, oneOf,
    description, default) so the enumeration output is stable.
    """
    schema: dict[str, Any] = {}
    if isinstance(spec, UnionField):
        schema["oneOf"] = [to_json_schema(option) for option in spec.options]
    elif isinstance(spec, NumberField):
        if spec.dimension in (Dimension.COORDINATE, Dimension.SIZE):
            schema["type"] = "integer"
            schema["minimum"] = 0 if spec.dimension is Dimension.COORDINATE else 1
        else:
            schema["type"] = "number"
            if spec.dimension is Dimension.EXTENT:
                schema["exclusiveMinimum"] = 0
    else:
        schema["type"] = spec.kind

    if isinstance(spec, StringField) and spec.enum is not None:
        schema["enum"] = list(spec.enum)
    if isinstance(spec, ObjectField):
        if spec.properties or top_level:
            schema["properties"] = {
                name: to_json_schema(child) for name, child in spec.properties.items()
            }
        if spec.required:
            schema["required"] = list(spec.required)
        if not spec.additional:
            schema["additionalProperties"] = False
    if isinstance(spec, ArrayField) and spec.items is not None:
        schema["items"] = to_json_schema(spec.items)

    if spec.description:
        schema["description"] = spec.description
    if spec.default is not MISSING:
        schema["default"] = spec.default
    return schema


# ---------------------------------------------------------------------------
# Defaults and canonical ordering
# ---------------------------------------------------------------------------


def defaults(spec: ObjectField) -> dict[str, Any]:
    """Declared top-level defaults of an argument object, in property order."""
    return {
        name: child.default
        for name, child in spec.properties.items()
        if child.default is not MISSING
    }


def normalize(spec: FieldSpec | None, value: Any) -> Any:
    """Return *value* with mapping keys in canonical order.

    Declared properties come first in declaration order; undeclared keys
    follow sorted by name. Two value-equal inputs therefore always produce
    the same serialization regardless of the caller's key order.
    """
    if isinstance(value, Mapping):
        declared: Mapping[str, FieldSpec] = {}
        if isinstance(spec, ObjectField):
            declared = spec.properties
        elif isinstance(spec, UnionField):
            obj = _union_object(spec)
            declared = obj.properties if obj is not None else {}
        ordered: dict[str, Any] = {}
        for name, child in declared.items():
            if name in value:
                ordered[name] = normalize(child, value[name])
        for name in sorted((k for k in value if k not in declared), key=str):
            ordered[name] = normalize(None, value[name])
        return ordered
    if isinstance(value, list | tuple):
        items = spec.items if isinstance(spec, ArrayField) else None
        if isinstance(spec, UnionField):
            array = next((o for o in spec.options if isinstance(o, ArrayField)), None)
            items = array.items if array else None
        return [normalize(items, item) for item in value]
    return value


def _union_object(spec: UnionField) -> ObjectField | None:
    return next((o for o in spec.options if isinstance(o, ObjectField)), None)
