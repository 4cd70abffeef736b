"""
Pipeline - Borsh schema to graph description.

This module provides a multi-phase architecture for describing values of a
Borsh-reflected type:

1. Phase 1 (Parser): Parse the flat schema container into declarations
2. Phase 2 (Analyzer): Normalize declarations into a cycle-safe TypeSchema
3. Phase 3 (Visit plan): Emit push/build/pop calls for a concrete value
4. Phase 4 (Builder): Track schema, path and identity stacks and emit output
5. Phase 5 (Serializer): Render the statements as N-Triples
"""

from __future__ import annotations

from .analyzer import TypeKind, TypeNode, TypeSchema, TypeWalker, get_schema
from .builders import Builder, DebugBuilder, DeterministicTokenGenerator, GraphBuilder, RandomTokenGenerator
from .config import GraphConfig, OutputFormat, TokenSource
from .errors import (
    InvalidNumericWidthError,
    MissingLiteralForLeafError,
    SchemaFormatError,
    SchemaGraphError,
    SchemaInconsistencyError,
    TraversalIndexOutOfRangeError,
    ValueMismatchError,
)
from .generator import GraphPipeline
from .graph import OutputGraph
from .schema_ast import parse_container
from .visit_plan import EnumValue, Err, Ok, ValueVisitor, visit_value

__all__ = [
    "Builder",
    "DebugBuilder",
    "DeterministicTokenGenerator",
    "EnumValue",
    "Err",
    "GraphBuilder",
    "GraphConfig",
    "GraphPipeline",
    "InvalidNumericWidthError",
    "MissingLiteralForLeafError",
    "Ok",
    "OutputFormat",
    "OutputGraph",
    "RandomTokenGenerator",
    "SchemaFormatError",
    "SchemaGraphError",
    "SchemaInconsistencyError",
    "TokenSource",
    "TraversalIndexOutOfRangeError",
    "TypeKind",
    "TypeNode",
    "TypeSchema",
    "TypeWalker",
    "ValueMismatchError",
    "ValueVisitor",
    "get_schema",
    "parse_container",
    "visit_value",
]
