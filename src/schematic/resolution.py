"""Reference and union resolution for schema nodes."""
from __future__ import annotations

from src.schematic.pointers import HRef, Reference
from src.shared.errors import CyclicReferenceError
from src.shared.models.schema import Schema


class SchemaResolver:
    """Breaks the declarative tree into concrete nodes against one root.

    Resolution follows the first ``anyOf`` alternative, else the ``$ref``
    pointer, else returns the node unchanged.  A visited set of pointers is
    kept per call so a reference cycle fails instead of recursing forever.
    """

    def __init__(self, root: Schema) -> None:
        self._root = root

    @property
    def root(self) -> Schema:
        return self._root

    def resolve(self, node: Schema, _visited: set[str] | None = None) -> Schema:
        """Return the concrete node *node* stands for.

        Raises:
            CyclicReferenceError: If a ``$ref`` chain loops back on itself.
            UnresolvedPointerError: If a ``$ref`` is dangling.
        """
        visited = set() if _visited is None else _visited
        while True:
            if node.any_of:
                node = node.any_of[0]
                continue
            if node.ref is not None:
                if node.ref in visited:
                    raise CyclicReferenceError(node.ref)
                visited.add(node.ref)
                node = self._walk(Reference(node.ref), visited)
                continue
            return node

    def lookup(self, pointer: str | Reference) -> Schema:
        """Resolve the node a JSON pointer designates."""
        reference = pointer if isinstance(pointer, Reference) else Reference(pointer)
        visited: set[str] = set()
        return self.resolve(self._walk(reference, visited), visited)

    def bind(self, href: HRef) -> dict[str, Schema]:
        """Map every placeholder of *href* to its resolved schema node."""
        return href.resolve(self._root, self.resolve)

    def _walk(self, reference: Reference, visited: set[str]) -> Schema:
        # Intermediate nodes get their own copy so sibling chains may share targets.
        return reference.walk(
            self._root, lambda node: self.resolve(node, set(visited))
        )
