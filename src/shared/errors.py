"""Custom exception classes raised by the schematic engine."""
from __future__ import annotations


class SchematicError(Exception):
    """Base generation error.

    Every failure aborts the current generation attempt; callers are expected
    to surface it as fatal and discard any partial output.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class InvalidIdentifierError(SchematicError):
    """An identifier could not be normalized (blank name)."""

    def __init__(self, detail: str = "blank identifier") -> None:
        super().__init__(detail=detail)


class UnknownTypeError(SchematicError):
    """A schema node carries a type tag the engine does not know."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(detail=f"unknown type {tag}")


class TypeNotFoundError(SchematicError):
    """No primitive could be derived from a schema node."""

    def __init__(self, types: list[str] | None = None) -> None:
        self.types = list(types or [])
        super().__init__(detail=f"type not found : {self.types}")


class UnresolvedPointerError(SchematicError):
    """A ``$ref`` or href pointer names a node that does not exist."""

    def __init__(self, pointer: str, detail: str | None = None) -> None:
        self.pointer = pointer
        super().__init__(detail=detail or f"unresolved pointer {pointer}")


class CyclicReferenceError(SchematicError):
    """Resolution or inference re-entered a node it is still expanding."""

    def __init__(self, pointer: str) -> None:
        self.pointer = pointer
        super().__init__(detail=f"cyclic reference through {pointer}")


class MissingHRefError(SchematicError):
    """Parameters were requested for a link without an href."""

    def __init__(self, title: str = "") -> None:
        self.title = title
        super().__init__(detail=f"no href property declared for {title}")


class ParsingError(SchematicError):
    """Parsing error."""

    def __init__(self, detail: str = "Parsing error") -> None:
        super().__init__(detail=detail)


class DocumentLoadError(ParsingError):
    """The input description could not be read or does not fit the schema model."""

    def __init__(self, detail: str = "Document could not be loaded") -> None:
        super().__init__(detail=detail)
