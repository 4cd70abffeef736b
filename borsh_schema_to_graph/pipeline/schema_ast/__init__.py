"""
Schema AST module.

Contains the flat declaration table model and its JSON parser.
"""

from __future__ import annotations

from .nodes import (
    ArrayDef,
    Definition,
    EnumDef,
    FieldsKind,
    SchemaContainer,
    SequenceDef,
    StructDef,
    TupleDef,
)
from .parser import SchemaContainerParser, parse_container

__all__ = [
    "ArrayDef",
    "Definition",
    "EnumDef",
    "FieldsKind",
    "SchemaContainer",
    "SchemaContainerParser",
    "SequenceDef",
    "StructDef",
    "TupleDef",
    "parse_container",
]
