"""
Term table for shared and recursive named types.

Maps a declaration to its canonical Struct/Enum node. Nodes elsewhere in
the tree refer to the canonical node by term instead of owning a copy,
which is what keeps recursive schemas finite.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..errors import SchemaInconsistencyError
from .type_nodes import TypeNode


class TermTable:
    """Canonical TypeNode per declaration, filled once per declaration."""

    def __init__(self):
        self._terms: dict[str, TypeNode] = {}

    def insert(self, term: str, node: TypeNode) -> None:
        """
        Register the canonical node of a declaration.

        Args:
            term: The declaration key
            node: The canonical node (carries its children inline)
        """
        if term in self._terms:
            raise SchemaInconsistencyError(f"Term '{term}' is already defined")
        self._terms[term] = node

    def get(self, term: str) -> TypeNode | None:
        """Get the canonical node of a declaration, if present."""
        return self._terms.get(term)

    def resolve(self, term: str) -> TypeNode:
        """Get the canonical node of a declaration, failing if it was never expanded."""
        node = self._terms.get(term)
        if node is None:
            raise SchemaInconsistencyError(f"Term '{term}' is not defined in the term table")
        return node

    def __contains__(self, term: object) -> bool:
        return term in self._terms

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def items(self):
        return self._terms.items()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermTable):
            return NotImplemented
        return self._terms == other._terms

    def __repr__(self) -> str:
        return f"TermTable({sorted(self._terms)!r})"
