"""Rendering of type descriptors into destination source syntax.

The defaults emit Go: ``*T`` for nullable values, ``[]T`` for lists,
``map[string]T`` for maps and an inline ``struct { ... }`` for composites.
Primitive names come from :class:`~src.shared.config.GeneratorConfig`.
"""
from __future__ import annotations

from src.shared.config import GeneratorConfig
from src.shared.constants import COMMENT_WIDTH
from src.shared.models.types import (
    Composite,
    Dynamic,
    FieldDescriptor,
    ListOf,
    MapOf,
    Named,
    Nullable,
    Primitive,
    PrimitiveKind,
    TypeDescriptor,
)


def json_tag(key: str, required: bool) -> str:
    """Struct tag carrying the serialization key: ``json:"name,omitempty"``."""
    tags = [key]
    if not required:
        tags.append("omitempty")
    return '`json:"%s"`' % ",".join(tags)


def as_comment(text: str, width: int = COMMENT_WIDTH) -> str:
    """Wrap *text* into ``//`` comment lines of at most *width* characters.

    Lines are broken at the last space before the limit; a word longer than
    the limit is cut.  Embedded newlines continue the comment.
    """
    lines: list[str] = []
    remaining = text
    while remaining:
        if len(remaining) < width:
            lines.append(remaining)
            break
        line = remaining[:width]
        space = line.rfind(" ")
        if space != -1:
            line = line[:space]
        lines.append(line)
        remaining = remaining[len(line):]
        if space != -1:
            remaining = remaining[1:]
    return "".join("// %s\n" % line.replace("\n", "\n// ") for line in lines)


class TypeRenderer:
    """Renders descriptors as destination-language type expressions."""

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self._config = config or GeneratorConfig()
        self._primitives = {
            PrimitiveKind.BOOLEAN: self._config.boolean_type,
            PrimitiveKind.STRING: self._config.string_type,
            PrimitiveKind.TIMESTAMP: self._config.timestamp_type,
            PrimitiveKind.NUMBER: self._config.number_type,
            PrimitiveKind.INTEGER: self._config.integer_type,
        }

    def render(self, descriptor: TypeDescriptor) -> str:
        if isinstance(descriptor, Primitive):
            return self._primitives[descriptor.kind]
        if isinstance(descriptor, Dynamic):
            return self._config.dynamic_type
        if isinstance(descriptor, Nullable):
            return "*" + self.render(descriptor.inner)
        if isinstance(descriptor, ListOf):
            return "[]" + self.render(descriptor.element)
        if isinstance(descriptor, MapOf):
            return "map[string]" + self.render(descriptor.value)
        if isinstance(descriptor, Named):
            return descriptor.name
        if isinstance(descriptor, Composite):
            return self.render_composite(descriptor)
        raise TypeError(f"unsupported type descriptor {descriptor!r}")

    def render_composite(self, composite: Composite) -> str:
        body = "".join(self.render_field(f) for f in composite.fields)
        return "struct {\n%s}" % body

    def render_field(self, field: FieldDescriptor) -> str:
        comment = as_comment(field.description) if field.description else ""
        return "%s%s %s %s\n" % (
            comment,
            field.name,
            self.render(field.type),
            json_tag(field.key, field.required),
        )
