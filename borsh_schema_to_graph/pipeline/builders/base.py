"""
Base class for value/schema traversal builders.

A visit plan drives a builder with push(index) / build(literal) / pop()
calls. The builder keeps three stacks in lockstep: the schema frames, the
path segments and the identities of the root and of the containers
entered so far.
Subclasses decide what build() emits.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..analyzer.type_nodes import TypeKind, TypeNode
from ..analyzer.type_schema import TypeSchema
from ..config import GraphConfig
from ..errors import MissingLiteralForLeafError, TraversalIndexOutOfRangeError
from ..graph.statements import IRI
from .identity import TokenGenerator, class_address, instance_address, make_token_generator

logger = logging.getLogger(__name__)


@dataclass
class TraversalFrame:
    """A schema node being visited and its index in the parent."""

    node: TypeNode
    index: int
    # Set when entering this frame pushed an identity
    identity: IRI | None = None


class Builder(ABC):
    """Abstract traversal engine driven by a visit plan."""

    def __init__(
        self,
        schema: TypeSchema,
        config: GraphConfig | None = None,
        token_generator: TokenGenerator | None = None,
    ):
        """
        Initialize the builder.

        Args:
            schema: The normalized schema, borrowed for the traversal
            config: Graph configuration (base URI, token source)
            token_generator: Overrides the generator selected by config
        """
        self.schema = schema
        self.config = config or GraphConfig()
        self.token_generator = token_generator or make_token_generator(self.config)
        self.reset()

    def reset(self) -> None:
        """Clear all stacks so the builder can run another traversal."""
        self.stack: list[TraversalFrame] = []
        self.path: list[str] = []
        self.identities: list[IRI] = []
        self.root = True

    def is_root(self) -> bool:
        """True until the first push."""
        return self.root

    def push(self, index: int) -> None:
        """
        Descend into the field at `index` of the current node.

        The first push enters the schema root and ignores `index`.
        """
        if self.root:
            self.root = False
            node = self.schema.schema
            segment = self.path_element(node, 0, True)
            index = 0
        else:
            if not self.stack:
                raise TraversalIndexOutOfRangeError("push after the root node was popped")
            parent = self.current_node()
            children = parent.children or []
            if not 0 <= index < len(children):
                raise TraversalIndexOutOfRangeError(
                    f"Index {index} out of range for {parent.kind.value} at '{'/'.join(self.path)}' with {len(children)} children"
                )
            node = children[index]
            segment = self.path_element(node, index, False)

        frame = TraversalFrame(node, index)
        self.stack.append(frame)
        self.path.append(segment)
        # The root always gets an identity so tagged and literal roots have a subject
        if node.is_container or self.is_root_frame():
            frame.identity = instance_address(self.config.base_uri, self.path, self.token_generator.next_token())
            self.identities.append(frame.identity)
        logger.debug("push %s -> %s", index, "/".join(self.path))

    def pop(self) -> None:
        """Ascend out of the current node."""
        if not self.stack:
            raise TraversalIndexOutOfRangeError("pop with an empty traversal stack")
        frame = self.stack.pop()
        self.path.pop()
        if frame.identity is not None:
            self.identities.pop()

    # Names used by generated visit plans
    stack_push = push
    stack_pop = pop

    def build(self, literal: str | None = None) -> None:
        """
        Emit output for the node on top of the stack.

        Args:
            literal: Textual rendering of the value; required for non-container kinds
        """
        if not self.stack:
            raise TraversalIndexOutOfRangeError("build called outside of a push/pop pair")
        node = self.current_node()
        if node.is_container:
            self.build_container(node, literal)
            return
        if literal is None:
            raise MissingLiteralForLeafError(f"{node.kind.value} at '{'/'.join(self.path)}' was built without literal text")
        self.build_leaf(node, literal)

    def current_node(self) -> TypeNode:
        """The node on top of the stack, resolved through the term table."""
        if not self.stack:
            raise TraversalIndexOutOfRangeError("no node is being visited")
        return self.schema.resolve(self.stack[-1].node)

    def current_frame(self) -> TraversalFrame:
        if not self.stack:
            raise TraversalIndexOutOfRangeError("no node is being visited")
        return self.stack[-1]

    def path_element(self, node: TypeNode, index: int, root: bool) -> str:
        """Path segment of a node: root struct term, field name or positional index."""
        if root and node.kind == TypeKind.STRUCT and node.term is not None:
            return node.term
        if node.name is not None:
            return node.name
        return str(index)

    def class_address(self) -> IRI:
        """Deterministic address of the current path."""
        return class_address(self.config.base_uri, self.path)

    def current_identity(self) -> IRI:
        """Identity of the innermost container entered, or of the root node."""
        if not self.identities:
            raise TraversalIndexOutOfRangeError("no node is being visited")
        return self.identities[-1]

    def is_root_frame(self) -> bool:
        """True while the node on top of the stack is the schema root."""
        return len(self.stack) == 1

    def parent_identity(self) -> IRI | None:
        """Identity enclosing the current container, if any.

        Tagged roots (Enum, Option, Result) hold an identity too, so their
        payload links back to them.
        """
        if len(self.identities) > 1:
            return self.identities[-2]
        return None

    @abstractmethod
    def build_container(self, node: TypeNode, literal: str | None) -> None:
        """Emit output for a container node (its identity is on top of the identity stack)."""

    @abstractmethod
    def build_leaf(self, node: TypeNode, literal: str) -> None:
        """Emit output for a literal node."""
