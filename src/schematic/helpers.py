"""Capability set handed to the source emitter.

The emitter receives one :class:`TemplateHelpers` instance per document
instead of reaching for process-wide template functions.  Every helper
returns plain text.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from src.schematic.document import Document
from src.schematic.identifiers import initial_cap, initial_low, method_cap
from src.schematic.pointers import HRef
from src.schematic.rendering import TypeRenderer, as_comment, json_tag
from src.shared.models.schema import Link, Schema


class TemplateHelpers:
    """Text helpers bound to one document and one renderer."""

    def __init__(self, document: Document, renderer: TypeRenderer | None = None) -> None:
        self._document = document
        self._renderer = renderer or TypeRenderer(document.config)

    initial_cap = staticmethod(initial_cap)
    initial_low = staticmethod(initial_low)
    method_cap = staticmethod(method_cap)
    as_comment = staticmethod(as_comment)
    json_tag = staticmethod(json_tag)

    def go_type(self, schema: Schema) -> str:
        return self._renderer.render(self._document.go_type(schema))

    def link_type(self, link: Link) -> str:
        return self._renderer.render(self._document.link_type(link))

    def target_type(self, link: Link) -> str:
        return self._renderer.render(self._document.target_type(link))

    def params(self, link: Link) -> str:
        """Parameter list: ``"appIdentity string, o *struct {...}"``."""
        order, params = self._document.link_parameters(link)
        return ", ".join(
            f"{initial_low(name)} {self._renderer.render(params[name])}"
            for name in order
        )

    @staticmethod
    def args(href: HRef) -> str:
        return ", ".join(href.arguments)

    def values(self, link: Link) -> str:
        return ", ".join(
            self._renderer.render(value) for value in self._document.link_values(link)
        )

    def as_funcs(self) -> dict[str, Callable[..., Any]]:
        """Helper name -> callable, in the naming used by emitter templates."""
        return {
            "initialCap": self.initial_cap,
            "initialLow": self.initial_low,
            "methodCap": self.method_cap,
            "asComment": self.as_comment,
            "jsonTag": self.json_tag,
            "params": self.params,
            "args": self.args,
            "values": self.values,
            "goType": self.go_type,
            "linkType": self.link_type,
            "targetType": self.target_type,
        }
