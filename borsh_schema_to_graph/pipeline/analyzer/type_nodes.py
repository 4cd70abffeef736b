"""
Normalized type node definitions.

A TypeNode describes one position of the normalized schema tree. Shared
and recursive named types appear inline only once (in the term table);
every other occurrence is a reference node that carries just the term.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TypeKind(Enum):
    """Kind of a normalized type node."""

    BOOL = "Bool"
    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    ENUM = "Enum"
    VARIANT = "Variant"  # Enum payload shape (positional or empty struct)
    TUPLE = "Tuple"
    STRUCT = "Struct"
    ARRAY = "Array"
    SEQUENCE = "Sequence"  # Vec<T>
    OPTION = "Option"
    RESULT = "Result"
    SET = "Set"  # HashSet<T>
    MAP = "Map"  # HashMap<K, V>, modeled by its entry type
    UNDEFINED = "Undefined"


# Kinds that receive an identity of their own during a graph traversal
CONTAINER_KINDS = frozenset(
    {
        TypeKind.STRUCT,
        TypeKind.TUPLE,
        TypeKind.SEQUENCE,
        TypeKind.ARRAY,
        TypeKind.SET,
        TypeKind.MAP,
        TypeKind.VARIANT,
    }
)

# Kinds whose canonical definition lives in the term table
TERM_KINDS = frozenset({TypeKind.STRUCT, TypeKind.ENUM})


@dataclass
class TypeNode:
    """A normalized schema node."""

    kind: TypeKind = TypeKind.UNDEFINED

    # Field name in the parent; None for positional fields
    name: str | None = None

    # Declaration key into the term table (Struct and Enum only)
    term: str | None = None

    # Numeric details (Int and Float only)
    signed: bool | None = None
    byte_length: int | None = None

    # Array length, Tuple/Variant arity or Enum variant count
    length: int | None = None

    # Inline children; None for reference nodes and leaves
    children: list[TypeNode] | None = None

    @property
    def is_container(self) -> bool:
        return self.kind in CONTAINER_KINDS

    @property
    def is_reference(self) -> bool:
        """Whether this node must be resolved through the term table."""
        return self.kind in TERM_KINDS and self.children is None and self.term is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert the node to JSON-ready data, omitting unset attributes."""
        d: dict[str, Any] = {"kind": self.kind.value}
        if self.name is not None:
            d["name"] = self.name
        if self.term is not None:
            d["term"] = self.term
        if self.signed is not None:
            d["signed"] = self.signed
        if self.byte_length is not None:
            d["byte_length"] = self.byte_length
        if self.length is not None:
            d["length"] = self.length
        if self.children is not None:
            d["children"] = [child.to_dict() for child in self.children]
        return d
