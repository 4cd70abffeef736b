"""Borsh Schema to Graph

A Python package for describing values of Borsh-reflected types.
Normalizes the flat schema container into a cycle-safe type tree and walks
values in lockstep with it to produce debug traces or graph statements.
"""

__version__ = "0.1.0"

from .pipeline import (
    GraphConfig,
    GraphPipeline,
    OutputFormat,
    SchemaGraphError,
    TokenSource,
    TypeSchema,
    get_schema,
)

__all__ = [
    "GraphPipeline",
    "GraphConfig",
    "OutputFormat",
    "SchemaGraphError",
    "TokenSource",
    "TypeSchema",
    "get_schema",
]
