"""
Analyzer module.

Contains the normalized type model, the term table, the schema normalizer
and the schema walker.
"""

from __future__ import annotations

from .normalizer import SchemaNormalizer, get_schema
from .term_table import TermTable
from .type_nodes import CONTAINER_KINDS, TERM_KINDS, TypeKind, TypeNode
from .type_schema import TypeSchema
from .walker import TypeWalker

__all__ = [
    "CONTAINER_KINDS",
    "TERM_KINDS",
    "SchemaNormalizer",
    "TermTable",
    "TypeKind",
    "TypeNode",
    "TypeSchema",
    "TypeWalker",
    "get_schema",
]
