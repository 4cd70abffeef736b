"""
Builder producing a line-oriented debug trace.
"""

from __future__ import annotations

import logging

from ..analyzer.type_nodes import TypeNode
from .base import Builder

logger = logging.getLogger(__name__)


class DebugBuilder(Builder):
    """Records one line per built node: path, kind and literal."""

    def reset(self) -> None:
        super().reset()
        self.lines: list[str] = []

    def build_container(self, node: TypeNode, literal: str | None) -> None:
        line = f"{'/'.join(self.path)} {node.kind.value}"
        if literal is not None:
            line += f": {literal}"
        self._emit(line)

    def build_leaf(self, node: TypeNode, literal: str) -> None:
        self._emit(f"{'/'.join(self.path)} {node.kind.value}: {literal}")

    def _emit(self, line: str) -> None:
        logger.debug(line)
        self.lines.append(line)

    def render(self) -> str:
        return "\n".join(self.lines)
