"""
Pipeline facade tying the phases together:

1. Parse the schema container document
2. Normalize it into a TypeSchema
3. Drive a builder over a value with the visit plan
4. Serialize the resulting graph or debug trace
"""

from __future__ import annotations

import logging
from typing import Any

from .analyzer.normalizer import get_schema
from .analyzer.type_schema import TypeSchema
from .analyzer.walker import TypeWalker
from .builders.debug_builder import DebugBuilder
from .builders.graph_builder import GraphBuilder
from .builders.identity import TokenGenerator, make_token_generator
from .config import GraphConfig, OutputFormat
from .graph.statements import OutputGraph
from .schema_ast.nodes import SchemaContainer
from .visit_plan import visit_value

logger = logging.getLogger(__name__)


class GraphPipeline:
    """Normalizes a schema once and describes any number of values with it."""

    def __init__(
        self,
        source: SchemaContainer | dict[str, Any] | TypeSchema,
        config: GraphConfig | None = None,
        token_generator: TokenGenerator | None = None,
    ):
        """
        Initialize the pipeline.

        Args:
            source: Schema container (parsed or JSON document) or an already normalized schema
            config: Graph configuration
            token_generator: Shared token source; defaults to the one selected by config
        """
        self.config = config or GraphConfig()
        self.schema = source if isinstance(source, TypeSchema) else get_schema(source)
        self.token_generator = token_generator or make_token_generator(self.config)
        logger.debug("Schema ready with root %s and %d terms", self.schema.schema.kind.value, len(self.schema.terms))

    def walk(self, expand_terms: bool = True) -> TypeWalker:
        return TypeWalker(self.schema, expand_terms=expand_terms)

    def to_graph(self, value: Any) -> OutputGraph:
        """Describe a value as graph statements."""
        builder = GraphBuilder(self.schema, self.config, self.token_generator)
        visit_value(value, builder)
        logger.info("Built %d statements", len(builder.graph))
        return builder.graph

    def to_debug_lines(self, value: Any) -> list[str]:
        """Describe a value as one debug line per visited node."""
        builder = DebugBuilder(self.schema, self.config, self.token_generator)
        visit_value(value, builder)
        return builder.lines

    def generate(self, value: Any, comment: str | None = None) -> str:
        """Render a value in the configured output format."""
        if OutputFormat(self.config.output_format) == OutputFormat.DEBUG:
            return "\n".join(self.to_debug_lines(value)) + "\n"
        if not self.config.add_generation_comment:
            comment = None
        return self.to_graph(value).serialize("nt", comment=comment)
