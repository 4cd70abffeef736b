"""
Unique token generators and address helpers.

Class addresses depend on the traversal path only. Instance identities add
a token from a TokenGenerator, so tests and reproducible runs can swap the
random source for a deterministic one.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from urllib.parse import quote

from ..config import GraphConfig, TokenSource
from ..graph.statements import IRI


class TokenGenerator(ABC):
    """Source of instance disambiguation tokens."""

    @abstractmethod
    def next_token(self) -> str:
        """Return a token not returned before by this generator."""


class RandomTokenGenerator(TokenGenerator):
    """Random UUID4 tokens; output differs between runs."""

    def next_token(self) -> str:
        return uuid.uuid4().hex


class DeterministicTokenGenerator(TokenGenerator):
    """UUID5 tokens derived from a seed and a counter."""

    def __init__(self, seed: str = ""):
        self.seed = seed
        self.counter = 0

    def next_token(self) -> str:
        token = uuid.uuid5(uuid.NAMESPACE_URL, f"{self.seed}:{self.counter}").hex
        self.counter += 1
        return token


def make_token_generator(config: GraphConfig) -> TokenGenerator:
    """Create the token generator selected by the configuration."""
    if TokenSource(config.token_source) == TokenSource.DETERMINISTIC:
        return DeterministicTokenGenerator(config.seed)
    return RandomTokenGenerator()


def class_address(base_uri: str, path: list[str]) -> IRI:
    """Deterministic address of a path, used for classes and predicates."""
    return IRI(base_uri + "/".join(quote(segment, safe="") for segment in path))


def instance_address(base_uri: str, path: list[str], token: str) -> IRI:
    """Unique address of one occurrence of a path."""
    return IRI(f"{class_address(base_uri, path).value}#{token}")
