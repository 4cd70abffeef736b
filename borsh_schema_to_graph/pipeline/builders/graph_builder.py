"""
Builder producing graph statements.

Containers become subjects with a unique instance identity typed by their
class address and linked from the enclosing container. Leaves become
literal statements on the innermost container, with their class address
as predicate.
"""

from __future__ import annotations

from ..analyzer.type_nodes import TypeKind, TypeNode
from ..graph.statements import (
    IRI,
    RDF_TYPE,
    RDF_VALUE,
    XSD_BOOLEAN,
    XSD_DOUBLE,
    XSD_FLOAT,
    XSD_INTEGER,
    Literal,
    OutputGraph,
)
from .base import Builder


class GraphBuilder(Builder):
    """Accumulates statements into an OutputGraph."""

    def reset(self) -> None:
        super().reset()
        self.graph = OutputGraph()

    def build_container(self, node: TypeNode, literal: str | None) -> None:
        instance = self.identities[-1]
        class_iri = self.class_address()
        self.graph.add(instance, RDF_TYPE, class_iri)

        parent = self.parent_identity()
        if parent is not None:
            self.graph.add(parent, class_iri, instance)

        # Sequences report their length
        if literal is not None:
            self.graph.add(instance, RDF_VALUE, Literal(literal, XSD_INTEGER if literal.isdigit() else None))

    def build_leaf(self, node: TypeNode, literal: str) -> None:
        instance = self.current_identity()
        class_iri = self.class_address()
        if self.is_root_frame():
            # A literal or tagged root is its own subject
            self.graph.add(instance, RDF_TYPE, class_iri)
        self.graph.add(instance, class_iri, Literal(literal, self._datatype(node)))

    def _datatype(self, node: TypeNode) -> IRI | None:
        if node.kind == TypeKind.BOOL:
            return XSD_BOOLEAN
        if node.kind == TypeKind.INT:
            return XSD_INTEGER
        if node.kind == TypeKind.FLOAT:
            return XSD_FLOAT if node.byte_length == 4 else XSD_DOUBLE
        return None
