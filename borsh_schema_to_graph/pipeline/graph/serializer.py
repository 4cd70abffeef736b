"""
N-Triples serialization of an OutputGraph through a Jinja2 template.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import jinja2

from .statements import IRI, Literal

if TYPE_CHECKING:
    from .statements import OutputGraph

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
}


def escape_literal(text: str) -> str:
    """Escape a string for use inside an N-Triples literal."""
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def format_term(term: IRI | Literal) -> str:
    """Format one term in N-Triples syntax."""
    if isinstance(term, IRI):
        return f"<{term.value}>"
    text = f'"{escape_literal(term.value)}"'
    if term.datatype is not None:
        text += f"^^<{term.datatype.value}>"
    return text


class NTriplesSerializer:
    """Renders statements one per line, in insertion order."""

    TEMPLATE_NAME = "graph.nt.jinja2"

    def __init__(self):
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates"
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.jinja_env.filters["nt"] = format_term
        self.template = self.jinja_env.get_template(self.TEMPLATE_NAME)

    def serialize(self, graph: OutputGraph, comment: str | None = None) -> str:
        """
        Serialize a graph.

        Args:
            graph: The statements to render
            comment: Optional comment line placed before the statements

        Returns:
            N-Triples text
        """
        return self.template.render(statements=list(graph), comment=comment)
