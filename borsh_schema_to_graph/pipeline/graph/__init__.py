"""
Graph module.

Contains the statement model, the output graph and its N-Triples serializer.
"""

from __future__ import annotations

from .serializer import NTriplesSerializer, escape_literal, format_term
from .statements import (
    IRI,
    RDF_TYPE,
    RDF_VALUE,
    XSD_BOOLEAN,
    XSD_DOUBLE,
    XSD_FLOAT,
    XSD_INTEGER,
    Literal,
    OutputGraph,
    Statement,
)

__all__ = [
    "IRI",
    "Literal",
    "NTriplesSerializer",
    "OutputGraph",
    "RDF_TYPE",
    "RDF_VALUE",
    "Statement",
    "XSD_BOOLEAN",
    "XSD_DOUBLE",
    "XSD_FLOAT",
    "XSD_INTEGER",
    "escape_literal",
    "format_term",
]
