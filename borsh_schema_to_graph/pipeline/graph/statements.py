"""
Statement and term definitions for the output graph.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
XSD_NS = "http://www.w3.org/2001/XMLSchema#"


@dataclass(frozen=True)
class IRI:
    """An IRI term."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Literal:
    """A literal term with an optional datatype IRI."""

    value: str
    datatype: IRI | None = None

    def __str__(self) -> str:
        return self.value


RDF_TYPE = IRI(RDF_NS + "type")
RDF_VALUE = IRI(RDF_NS + "value")

XSD_BOOLEAN = IRI(XSD_NS + "boolean")
XSD_INTEGER = IRI(XSD_NS + "integer")
XSD_FLOAT = IRI(XSD_NS + "float")
XSD_DOUBLE = IRI(XSD_NS + "double")


@dataclass(frozen=True)
class Statement:
    """A (subject, predicate, object) statement."""

    subject: IRI
    predicate: IRI
    object: IRI | Literal


@dataclass
class OutputGraph:
    """Append-only collection of statements, kept in insertion order."""

    statements: list[Statement] = field(default_factory=list)

    def add(self, subject: IRI, predicate: IRI, obj: IRI | Literal) -> Statement:
        statement = Statement(subject, predicate, obj)
        self.statements.append(statement)
        return statement

    def triples(
        self,
        subject: IRI | None = None,
        predicate: IRI | None = None,
        obj: IRI | Literal | None = None,
    ) -> list[Statement]:
        """Statements matching a pattern; None matches anything."""
        return [
            s
            for s in self.statements
            if (subject is None or s.subject == subject)
            and (predicate is None or s.predicate == predicate)
            and (obj is None or s.object == obj)
        ]

    def serialize(self, format: str = "nt", comment: str | None = None) -> str:
        """Render the graph as text. Only N-Triples ("nt") is supported."""
        from .serializer import NTriplesSerializer

        if format != "nt":
            raise ValueError(f"Unsupported graph format: {format}")
        return NTriplesSerializer().serialize(self, comment=comment)

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)
