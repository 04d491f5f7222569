"""Parameter and return-value derivation for links."""
from __future__ import annotations

import logging

from src.schematic.identifiers import initial_cap
from src.schematic.resolution import SchemaResolver
from src.schematic.type_inference import TypeInferencer
from src.shared.config import GeneratorConfig
from src.shared.constants import REL_INSTANCES, TYPE_ARRAY
from src.shared.errors import MissingHRefError, TypeNotFoundError
from src.shared.models.schema import Link
from src.shared.models.types import Named, Nullable, TypeDescriptor

logger = logging.getLogger(__name__)


class LinkSignatureDeriver:
    """Builds ordered parameter and return lists for a link.

    Parameters are, in order: one per href placeholder, the request body
    (when the link declares a ``schema``) and the list-range parameter
    (when the response is a collection).  Return values end with the error
    type.
    """

    def __init__(
        self,
        resolver: SchemaResolver,
        inferencer: TypeInferencer,
        config: GeneratorConfig | None = None,
    ) -> None:
        self._resolver = resolver
        self._inferencer = inferencer
        self._config = config or GeneratorConfig()

    def parameters(self, link: Link) -> tuple[list[str], dict[str, TypeDescriptor]]:
        """Return parameter names in order and their types.

        Raises:
            MissingHRefError: If the link declares no href.
            UnresolvedPointerError: If a placeholder pointer is dangling.
        """
        if link.href is None:
            raise MissingHRefError(link.title)

        order: list[str] = []
        params: dict[str, TypeDescriptor] = {}
        for name, schema in self._resolver.bind(link.href).items():
            order.append(name)
            params[name] = self._inferencer.infer(schema, True, True)

        if link.body_schema is not None:
            name = self._config.body_parameter
            order.append(name)
            params[name] = self.link_type(link)

        if self._is_collection(link):
            name = self._config.range_parameter
            order.append(name)
            params[name] = Nullable(Named(self._config.range_type))

        logger.debug("Derived parameters %s for link '%s'", order, link.title)
        return order, params

    def return_values(self, link: Link) -> list[TypeDescriptor]:
        """Return value types, the error type always last."""
        values: list[TypeDescriptor] = []
        target = link.target_schema
        if target is not None and target.reference is not None:
            values.append(Named(initial_cap(target.reference.name)))
        values.append(Named(self._config.error_type))
        return values

    def link_type(self, link: Link) -> TypeDescriptor:
        """Type of the request body; optional fields keep their nullability."""
        if link.body_schema is None:
            raise TypeNotFoundError()
        return self._inferencer.infer(link.body_schema, True, False)

    def target_type(self, link: Link) -> TypeDescriptor:
        """Type of the response body."""
        if link.target_schema is None:
            raise TypeNotFoundError()
        return self._inferencer.infer(link.target_schema, True, True)

    def _is_collection(self, link: Link) -> bool:
        if link.target_schema is None:
            return link.rel == REL_INSTANCES
        return TYPE_ARRAY in self._resolver.resolve(link.target_schema).types
