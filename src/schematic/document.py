"""Document: the root schema and the generation entry points built on it."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from src.schematic.identifiers import initial_cap, method_cap
from src.schematic.resolution import SchemaResolver
from src.schematic.signatures import LinkSignatureDeriver
from src.schematic.type_inference import TypeInferencer
from src.shared.config import GeneratorConfig
from src.shared.constants import REL_SELF
from src.shared.logging import trace_scope
from src.shared.models.schema import Link, Schema
from src.shared.models.types import TypeDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionSignature:
    """Signature of one link, ready for emission.

    Attributes:
        title:         Link title as declared.
        method_name:   Normalized method identifier.
        rel:           Link relation (``create``, ``instances``...).
        method:        HTTP method.
        path_format:   Href with placeholders replaced by ``%v``.
        arguments:     Parameter name filling each ``%v`` of *path_format*.
        parameters:    ``(name, type)`` pairs in call order.
        return_values: Return types, error type last.
    """
    title: str
    method_name: str
    rel: str
    method: str
    path_format: str
    arguments: tuple[str, ...] = field(default_factory=tuple)
    parameters: tuple[tuple[str, TypeDescriptor], ...] = field(default_factory=tuple)
    return_values: tuple[TypeDescriptor, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ResourceBinding:
    """A top-level resource with its inferred type and actions.

    ``type`` is ``None`` for resources that declare no ``type`` tag, such
    as link-only resources.
    """
    name: str
    identifier: str
    schema: Schema
    type: TypeDescriptor | None = None
    actions: tuple[ActionSignature, ...] = field(default_factory=tuple)


class Document:
    """Owns the root schema of a hyper-schema description.

    The document is read-only once built; every method is a pure function
    of it, so resources and links can be processed in any order.
    """

    def __init__(self, root: Schema, config: GeneratorConfig | None = None) -> None:
        self._root = root
        self._config = config or GeneratorConfig()
        self._resolver = SchemaResolver(root)
        self._inferencer = TypeInferencer(self._resolver)
        self._signatures = LinkSignatureDeriver(
            self._resolver, self._inferencer, self._config
        )

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], config: GeneratorConfig | None = None
    ) -> Document:
        return cls(Schema.model_validate(data), config)

    # ------------------------------------------------------------------
    # metadata passthrough
    # ------------------------------------------------------------------

    @property
    def root(self) -> Schema:
        return self._root

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def package_name(self) -> str:
        """Lower-cased first word of the document title."""
        words = (self._root.title or "").split(" ")
        return words[0].lower()

    @property
    def url(self) -> str:
        """Base URL: the href of the root ``self`` link, if any."""
        for link in self._root.links or []:
            if link.rel == REL_SELF and link.href is not None:
                return str(link.href)
        return ""

    @property
    def version(self) -> str:
        return self._root.version or ""

    # ------------------------------------------------------------------
    # resolution and inference
    # ------------------------------------------------------------------

    def resolve(self, node: Schema) -> Schema:
        return self._resolver.resolve(node)

    def lookup(self, pointer: str) -> Schema:
        return self._resolver.lookup(pointer)

    def infer_type(
        self, node: Schema, required: bool = True, force: bool = True
    ) -> TypeDescriptor:
        return self._inferencer.infer(node, required, force)

    def go_type(self, node: Schema) -> TypeDescriptor:
        """Type of a node treated as always present."""
        return self._inferencer.infer(node, True, True)

    def link_parameters(self, link: Link) -> tuple[list[str], dict[str, TypeDescriptor]]:
        return self._signatures.parameters(link)

    def link_values(self, link: Link) -> list[TypeDescriptor]:
        return self._signatures.return_values(link)

    def link_type(self, link: Link) -> TypeDescriptor:
        return self._signatures.link_type(link)

    def target_type(self, link: Link) -> TypeDescriptor:
        return self._signatures.target_type(link)

    # ------------------------------------------------------------------
    # resources
    # ------------------------------------------------------------------

    def resources(self) -> Iterator[tuple[str, Schema]]:
        """Yield ``(name, resolved schema)`` for each resource, sorted by name.

        Entries with neither links nor properties are plain definitions and
        are skipped.
        """
        properties = self._root.properties or {}
        for name in sorted(properties):
            schema = self.resolve(properties[name])
            if schema.links is None and schema.properties is None:
                continue
            yield name, schema

    def bindings(self) -> list[ResourceBinding]:
        """Derive the type and action signatures of every resource."""
        with trace_scope():
            bindings = [
                ResourceBinding(
                    name=name,
                    identifier=initial_cap(name),
                    schema=schema,
                    type=self._resource_type(schema),
                    actions=tuple(self._action(link) for link in schema.links or []),
                )
                for name, schema in self.resources()
            ]
            logger.info(
                "Derived bindings for %d resources of '%s'",
                len(bindings),
                self._root.title or "",
            )
        return bindings

    def _resource_type(self, schema: Schema) -> TypeDescriptor | None:
        if not schema.types:
            return None
        return self.go_type(schema)

    def _action(self, link: Link) -> ActionSignature:
        order, params = self.link_parameters(link)
        return ActionSignature(
            title=link.title,
            method_name=method_cap(link.title),
            rel=link.rel,
            method=link.method,
            path_format=link.href.path_format if link.href is not None else "",
            arguments=tuple(link.href.arguments) if link.href is not None else (),
            parameters=tuple((name, params[name]) for name in order),
            return_values=tuple(self.link_values(link)),
        )
