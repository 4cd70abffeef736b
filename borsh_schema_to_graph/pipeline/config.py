"""
Configuration for the schema-to-graph pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenSource(str, Enum):
    """Source of the unique tokens that disambiguate instance identities.

    RANDOM tokens make every run produce fresh subjects; DETERMINISTIC tokens
    make the graph output byte-reproducible for a given seed.
    """

    RANDOM = "random"
    DETERMINISTIC = "deterministic"


class OutputFormat(str, Enum):
    """Textual output produced by the pipeline."""

    NTRIPLES = "nt"
    DEBUG = "debug"


@dataclass
class GraphConfig:
    """Configuration options for graph generation."""

    # Prefix of every class address and instance identity
    base_uri: str = "urn:borsh:"

    # Where instance tokens come from
    token_source: TokenSource = TokenSource.RANDOM

    # Namespace seed for deterministic tokens
    seed: str = ""

    # Output format used by the command line
    output_format: OutputFormat = OutputFormat.NTRIPLES

    # Add generation comment at top of serialized output
    add_generation_comment: bool = True

    @staticmethod
    def from_dict(d: dict) -> GraphConfig:
        """Create a config from a dictionary."""
        config = GraphConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        # Enum members may arrive as plain strings from JSON
        config.token_source = TokenSource(config.token_source)
        config.output_format = OutputFormat(config.output_format)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "base_uri": self.base_uri,
            "token_source": self.token_source.value,
            "seed": self.seed,
            "output_format": self.output_format.value,
            "add_generation_comment": self.add_generation_comment,
        }
