"""
Lazy depth-first walk over a normalized schema.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from .type_nodes import TERM_KINDS, TypeKind, TypeNode

if TYPE_CHECKING:
    from .type_schema import TypeSchema


class TypeWalker:
    """Iterates (parent, node) pairs of a TypeSchema in pre-order.

    Reference nodes are expanded through the term table the first time
    their term is met in a walk and left unexpanded afterwards, which keeps
    walks over recursive schemas finite. Every call to iter() starts a new
    walk with its own stack and visited set.
    """

    def __init__(self, schema: TypeSchema, expand_terms: bool = True):
        self.schema = schema
        self.expand_terms = expand_terms

    def __iter__(self) -> Iterator[tuple[TypeNode | None, TypeNode]]:
        stack: list[tuple[TypeNode | None, TypeNode]] = [(None, self.schema.schema)]
        visited_terms: set[str] = set()

        while stack:
            parent, node = stack.pop()
            self._add_nodes(stack, node, visited_terms)
            yield parent, node

    def resolve(self, node: TypeNode) -> TypeNode:
        """Dereference a term-only node; other nodes are returned unchanged."""
        return self.schema.resolve(node)

    def _add_nodes(
        self,
        stack: list[tuple[TypeNode | None, TypeNode]],
        node: TypeNode,
        visited_terms: set[str],
    ) -> None:
        if node.kind == TypeKind.UNDEFINED:
            return

        if node.children is not None:
            for child in reversed(node.children):
                stack.append((node, child))
            return

        if not self.expand_terms or node.kind not in TERM_KINDS or node.term is None:
            return
        if node.term in visited_terms:
            return

        visited_terms.add(node.term)
        canonical = self.schema.terms.get(node.term)
        if canonical is not None and canonical.children is not None:
            for child in reversed(canonical.children):
                stack.append((canonical, child))
