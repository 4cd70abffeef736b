"""
Builders module.

Contains the traversal engine and its debug and graph variants.
"""

from __future__ import annotations

from .base import Builder, TraversalFrame
from .debug_builder import DebugBuilder
from .graph_builder import GraphBuilder
from .identity import (
    DeterministicTokenGenerator,
    RandomTokenGenerator,
    TokenGenerator,
    class_address,
    instance_address,
    make_token_generator,
)

__all__ = [
    "Builder",
    "DebugBuilder",
    "DeterministicTokenGenerator",
    "GraphBuilder",
    "RandomTokenGenerator",
    "TokenGenerator",
    "TraversalFrame",
    "class_address",
    "instance_address",
    "make_token_generator",
]
