"""Type descriptors produced by type inference.

Descriptors form a closed variant; rendering them into destination syntax
happens only at the emission boundary (see ``src.schematic.rendering``).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PrimitiveKind(str, Enum):
    """Primitive kinds a schema leaf can map to."""
    BOOLEAN = "boolean"
    STRING = "string"
    TIMESTAMP = "timestamp"
    NUMBER = "number"
    INTEGER = "integer"


@dataclass(frozen=True)
class Primitive:
    kind: PrimitiveKind


@dataclass(frozen=True)
class Dynamic:
    """Untyped value (``any``, or array elements without ``items``)."""


@dataclass(frozen=True)
class Nullable:
    """Optional wrapper; never wraps another :class:`Nullable`."""
    inner: TypeDescriptor

    def __post_init__(self) -> None:
        if isinstance(self.inner, Nullable):
            raise ValueError("Nullable descriptors cannot be nested")


@dataclass(frozen=True)
class ListOf:
    element: TypeDescriptor


@dataclass(frozen=True)
class MapOf:
    """Map keyed by string."""
    value: TypeDescriptor


@dataclass(frozen=True)
class FieldDescriptor:
    """One field of an inline composite.

    Attributes:
        name:        Exported identifier of the field.
        key:         Serialization key, the original property name.
        type:        Inferred field type.
        required:    Whether the field must be present.
        description: Property description, passed through for doc comments.
    """
    name: str
    key: str
    type: TypeDescriptor
    required: bool
    description: str = ""

    @property
    def omit_empty(self) -> bool:
        return not self.required


@dataclass(frozen=True)
class Composite:
    """Inline record type; fields are sorted by serialization key."""
    fields: tuple[FieldDescriptor, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Named:
    """Reference to a named type (definition, list range, error)."""
    name: str


TypeDescriptor = Primitive | Dynamic | Nullable | ListOf | MapOf | Composite | Named
