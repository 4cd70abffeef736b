"""
TypeSchema: the normalized root node paired with its term table.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .term_table import TermTable
from .type_nodes import TypeNode


@dataclass
class TypeSchema:
    """The complete normalized schema.

    Read-only once normalization is done; any number of walks and builders
    may share it.
    """

    schema: TypeNode = field(default_factory=TypeNode)
    terms: TermTable = field(default_factory=TermTable)

    def resolve(self, node: TypeNode) -> TypeNode:
        """Return the node that carries the children of `node`.

        Reference nodes are looked up in the term table; every other node
        is returned unchanged.
        """
        if node.children is None and node.term is not None:
            return self.terms.resolve(node.term)
        return node

    def walk(self, expand_terms: bool = True):
        """Walk the schema depth-first. See TypeWalker."""
        from .walker import TypeWalker

        return TypeWalker(self, expand_terms=expand_terms)

    def to_dict(self) -> dict[str, Any]:
        """Convert the schema to JSON-ready data."""
        return {
            "schema": self.schema.to_dict(),
            "terms": {term: node.to_dict() for term, node in sorted(self.terms.items())},
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

