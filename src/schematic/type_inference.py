"""Type inference over resolved schema nodes.

Maps every schema node onto a :mod:`~src.shared.models.types` descriptor:

* ``boolean``, ``string`` (``date-time`` -> timestamp), ``number``,
  ``integer`` and ``any`` map to primitives;
* ``array`` becomes a list of the inferred ``items`` type (dynamic when
  ``items`` is absent);
* ``object`` becomes a string-keyed map when ``patternProperties`` is set
  (only its first entry counts), otherwise an inline composite whose fields
  are sorted by property name;
* ``null`` only makes the result nullable.

Results are wrapped in a single :class:`Nullable` when the node allows
``null`` or when the call site is neither required nor forced.
"""
from __future__ import annotations

import logging

from src.schematic.identifiers import initial_cap
from src.schematic.resolution import SchemaResolver
from src.shared.constants import (
    DATE_TIME_FORMAT,
    TYPE_ANY,
    TYPE_ARRAY,
    TYPE_BOOLEAN,
    TYPE_INTEGER,
    TYPE_NULL,
    TYPE_NUMBER,
    TYPE_OBJECT,
    TYPE_STRING,
)
from src.shared.errors import CyclicReferenceError, TypeNotFoundError, UnknownTypeError
from src.shared.models.schema import Schema
from src.shared.models.types import (
    Composite,
    Dynamic,
    FieldDescriptor,
    ListOf,
    MapOf,
    Nullable,
    Primitive,
    PrimitiveKind,
    TypeDescriptor,
)

logger = logging.getLogger(__name__)


class TypeInferencer:
    """Infers type descriptors for schema nodes of one document."""

    def __init__(self, resolver: SchemaResolver) -> None:
        self._resolver = resolver

    def infer(
        self,
        node: Schema,
        required: bool = True,
        force: bool = True,
        _expanding: frozenset[int] = frozenset(),
    ) -> TypeDescriptor:
        """Infer the descriptor for *node*.

        Args:
            node:     Schema node, resolved before inspection.
            required: Whether the node is in its parent's required set.
            force:    Treat the node as always present regardless of the
                      required set (body and return types).

        Raises:
            UnknownTypeError: On an unrecognized type tag.
            TypeNotFoundError: If no non-null tag is present.
            CyclicReferenceError: If the node is nested inside itself.
        """
        resolved = self._resolver.resolve(node)
        if id(resolved) in _expanding:
            raise CyclicReferenceError(node.ref or resolved.id or "#")
        expanding = _expanding | {id(resolved)}

        types = resolved.types
        candidate: TypeDescriptor | None = None
        for tag in types:
            if tag == TYPE_NULL:
                continue
            if candidate is not None:
                logger.debug("Multiple type tags %s; '%s' takes precedence", types, tag)

            if tag == TYPE_BOOLEAN:
                candidate = Primitive(PrimitiveKind.BOOLEAN)
            elif tag == TYPE_STRING:
                if resolved.format == DATE_TIME_FORMAT:
                    candidate = Primitive(PrimitiveKind.TIMESTAMP)
                else:
                    candidate = Primitive(PrimitiveKind.STRING)
            elif tag == TYPE_NUMBER:
                candidate = Primitive(PrimitiveKind.NUMBER)
            elif tag == TYPE_INTEGER:
                candidate = Primitive(PrimitiveKind.INTEGER)
            elif tag == TYPE_ANY:
                candidate = Dynamic()
            elif tag == TYPE_ARRAY:
                if resolved.items is not None:
                    candidate = ListOf(
                        self.infer(resolved.items, required, force, expanding)
                    )
                else:
                    candidate = ListOf(Dynamic())
            elif tag == TYPE_OBJECT:
                candidate = self._infer_object(resolved, force, expanding)
            else:
                raise UnknownTypeError(tag)

        if candidate is None:
            raise TypeNotFoundError(types)

        if TYPE_NULL in types or not (required or force):
            return Nullable(candidate)
        return candidate

    def _infer_object(
        self, node: Schema, force: bool, expanding: frozenset[int]
    ) -> TypeDescriptor:
        if node.pattern_properties:
            # Only one pattern is supported; the first declared entry wins.
            value = next(iter(node.pattern_properties.values()))
            return MapOf(self.infer(value, True, True, expanding))

        fields: list[FieldDescriptor] = []
        properties = node.properties or {}
        for name in sorted(properties):
            prop = self._resolver.resolve(properties[name])
            required = name in node.required or force
            fields.append(
                FieldDescriptor(
                    name=initial_cap(name),
                    key=name,
                    type=self.infer(prop, required, force, expanding),
                    required=required,
                    description=prop.description or "",
                )
            )
        return Composite(tuple(fields))
