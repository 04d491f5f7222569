"""JSON pointer references and URI templates carrying pointer placeholders.

A hyper-schema href such as::

    /apps/{(%23%2Fdefinitions%2Fapp%2Fdefinitions%2Fidentity)}

embeds a percent-encoded JSON pointer in every ``{(...)}`` placeholder.
:class:`HRef` decomposes the template once at construction; binding the
placeholders to schema nodes happens later against a document root and
never mutates the HRef.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import TYPE_CHECKING
from urllib.parse import unquote

from src.schematic.identifiers import initial_low
from src.shared.errors import UnresolvedPointerError

if TYPE_CHECKING:
    from src.shared.models.schema import Schema

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{\(([^)]+)\)\}")

# Keywords followed by a member name, mapped to the model attribute holding them.
_MAPPING_KEYWORDS: dict[str, str] = {
    "definitions": "definitions",
    "properties": "properties",
    "patternProperties": "pattern_properties",
}


class Reference:
    """A local JSON pointer such as ``#/definitions/app``."""

    def __init__(self, pointer: str) -> None:
        self.pointer = pointer

    @property
    def parts(self) -> list[str]:
        """Decoded pointer segments, ``~1`` and ``~0`` unescaped."""
        body = self.pointer[1:] if self.pointer.startswith("#") else self.pointer
        if not body.strip("/"):
            return []
        return [
            part.replace("~1", "/").replace("~0", "~")
            for part in body.lstrip("/").split("/")
        ]

    @property
    def name(self) -> str:
        """Last pointer segment; the name of the referenced definition."""
        parts = self.parts
        return parts[-1] if parts else ""

    def walk(self, root: Schema, resolve: Callable[[Schema], Schema]) -> Schema:
        """Follow the pointer from *root*, resolving every intermediate node.

        The target itself is returned unresolved.

        Raises:
            UnresolvedPointerError: If the pointer is not local or a segment
                does not exist.
        """
        if not self.pointer.startswith("#"):
            raise UnresolvedPointerError(
                self.pointer,
                f"unsupported pointer {self.pointer} (not a local pointer)",
            )

        parts = self.parts
        current = root
        index = 0
        while index < len(parts):
            current = resolve(current)
            keyword = parts[index]

            if keyword in _MAPPING_KEYWORDS:
                if index + 1 >= len(parts):
                    raise UnresolvedPointerError(self.pointer)
                members = getattr(current, _MAPPING_KEYWORDS[keyword]) or {}
                member = parts[index + 1]
                if member not in members:
                    raise UnresolvedPointerError(self.pointer)
                current = members[member]
                index += 2
            elif keyword == "items":
                if current.items is None:
                    raise UnresolvedPointerError(self.pointer)
                current = current.items
                index += 1
            elif keyword == "anyOf":
                try:
                    current = current.any_of[int(parts[index + 1])]
                except (IndexError, ValueError):
                    raise UnresolvedPointerError(self.pointer) from None
                index += 2
            else:
                raise UnresolvedPointerError(
                    self.pointer,
                    f"unsupported segment '{keyword}' in pointer {self.pointer}",
                )

        logger.debug("Walked pointer %s", self.pointer)
        return current

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Reference) and other.pointer == self.pointer

    def __hash__(self) -> int:
        return hash(self.pointer)

    def __repr__(self) -> str:
        return f"Reference({self.pointer!r})"


def placeholder_identifier(reference: Reference) -> str:
    """Identifier for a path parameter: kept segments in lower-camel form.

    ``#/definitions/struct/definitions/uuid`` -> ``structUUID``.
    """
    kept = [part for part in reference.parts if part != "definitions"]
    return initial_low("-".join(kept))


class HRef:
    """A URI template whose placeholders are JSON pointers to parameter schemas.

    Attributes:
        template:    The literal template string.
        order:       Placeholder identifiers in template order, each once.
        arguments:   Placeholder identifier of every ``%v`` in *path_format*;
                     a pointer used twice appears twice.
        pointers:    Placeholder identifier -> :class:`Reference`.
        path_format: The template with every placeholder replaced by ``%v``.
    """

    def __init__(self, template: str) -> None:
        self.template = template
        self.order: list[str] = []
        self.arguments: list[str] = []
        self.pointers: dict[str, Reference] = {}
        for match in _PLACEHOLDER.finditer(template):
            reference = Reference(unquote(match.group(1)))
            name = placeholder_identifier(reference)
            self.arguments.append(name)
            if name not in self.pointers:
                self.order.append(name)
                self.pointers[name] = reference
        self.path_format = _PLACEHOLDER.sub("%v", template)

    def resolve(
        self, root: Schema, resolve: Callable[[Schema], Schema]
    ) -> dict[str, Schema]:
        """Bind every placeholder to its resolved schema node.

        Raises:
            UnresolvedPointerError: If a placeholder pointer is dangling.
        """
        return {
            name: resolve(self.pointers[name].walk(root, resolve))
            for name in self.order
        }

    def __str__(self) -> str:
        return self.template

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HRef) and other.template == self.template

    def __hash__(self) -> int:
        return hash(self.template)

    def __repr__(self) -> str:
        return f"HRef({self.template!r})"
