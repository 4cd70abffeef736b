"""
Schema normalizer.

Converts the flat declaration table into a TypeSchema: a root TypeNode plus
a term table holding one canonical node per named struct or enum. Named
types are expanded once and referenced afterwards, so shared and recursive
definitions never expand without bound.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from ..errors import InvalidNumericWidthError, SchemaInconsistencyError
from ..schema_ast.nodes import (
    ArrayDef,
    Definition,
    EnumDef,
    FieldsKind,
    SchemaContainer,
    SequenceDef,
    StructDef,
    TupleDef,
)
from ..schema_ast.parser import parse_container
from .type_nodes import TypeKind, TypeNode
from .type_schema import TypeSchema

logger = logging.getLogger(__name__)

_UNSIGNED_INT = re.compile(r"^u(\d+)$")
_SIGNED_INT = re.compile(r"^i(\d+)$")
_FLOAT = re.compile(r"^f(\d+)$")

INT_BITS = (8, 16, 32, 64, 128)
FLOAT_BITS = (32, 64)

# Parametric declaration prefixes, checked before plain definitions
_PARAMETRIC_KINDS = (
    ("Option<", TypeKind.OPTION),
    ("Result<", TypeKind.RESULT),
    ("HashSet<", TypeKind.SET),
    ("Set<", TypeKind.SET),
    ("HashMap<", TypeKind.MAP),
    ("Map<", TypeKind.MAP),
    ("Tuple<", TypeKind.TUPLE),
    ("Array<", TypeKind.ARRAY),
    ("Vec<", TypeKind.SEQUENCE),
)


class SchemaNormalizer:
    """Normalizes a SchemaContainer into a TypeSchema."""

    def __init__(self, container: SchemaContainer):
        """
        Initialize the normalizer.

        Args:
            container: The flat schema source (read only)
        """
        self.container = container
        self.result = TypeSchema()

    def normalize(self) -> TypeSchema:
        """Normalize the container starting from its root declaration."""
        declaration = self.container.declaration
        self.result.schema = self.get_type(declaration, field_name=declaration, root=True)
        logger.debug("Normalized '%s' with %d terms", declaration, len(self.result.terms))
        return self.result

    def get_type(self, declaration: str, field_name: str | None = None, root: bool = False) -> TypeNode:
        """
        Produce the TypeNode of a declaration.

        Args:
            declaration: The declaration key
            field_name: Name of the field in its parent, None for positional fields
            root: Whether this is the root of the tree

        Returns:
            Leaf, inline, reference or Undefined TypeNode
        """
        primitive = self._get_primitive(declaration, field_name)
        if primitive is not None:
            return primitive

        for prefix, kind in _PARAMETRIC_KINDS:
            if declaration.startswith(prefix):
                return self._get_parametric(kind, declaration, field_name)

        definition = self.container.get(declaration)
        if isinstance(definition, StructDef):
            return self._get_struct(definition, declaration, field_name, root)
        if isinstance(definition, EnumDef):
            return self._get_enum(definition, declaration, field_name)
        if isinstance(definition, ArrayDef):
            return self._get_array(definition, field_name)
        if isinstance(definition, SequenceDef):
            return TypeNode(kind=TypeKind.SEQUENCE, name=field_name, children=[self.get_type(definition.elements)])
        if isinstance(definition, TupleDef):
            return self._get_tuple(definition, field_name)

        logger.debug("Declaration '%s' has no definition, using Undefined", declaration)
        return TypeNode(kind=TypeKind.UNDEFINED, name=field_name)

    def _get_primitive(self, declaration: str, field_name: str | None) -> TypeNode | None:
        """Build a leaf node for bool, string, u<N>, i<N> and f<N>."""
        if declaration == "bool":
            return TypeNode(kind=TypeKind.BOOL, name=field_name)
        if declaration == "string":
            return TypeNode(kind=TypeKind.STRING, name=field_name)

        for pattern, signed in ((_UNSIGNED_INT, False), (_SIGNED_INT, True)):
            match = pattern.match(declaration)
            if match:
                bits = int(match.group(1))
                if bits not in INT_BITS:
                    raise InvalidNumericWidthError(f"Invalid {'signed' if signed else 'unsigned'} integer width in '{declaration}'")
                return TypeNode(kind=TypeKind.INT, name=field_name, signed=signed, byte_length=bits // 8)

        match = _FLOAT.match(declaration)
        if match:
            bits = int(match.group(1))
            if bits not in FLOAT_BITS:
                raise InvalidNumericWidthError(f"Invalid float width in '{declaration}'")
            return TypeNode(kind=TypeKind.FLOAT, name=field_name, byte_length=bits // 8)

        return None

    def _get_struct(self, definition: StructDef, declaration: str, field_name: str | None, root: bool) -> TypeNode:
        """Build a Struct (named fields) or Variant (positional/empty) node."""
        if definition.fields_kind == FieldsKind.UNNAMED:
            children = [self.get_type(d) for d in definition.unnamed_fields]
            return TypeNode(kind=TypeKind.VARIANT, name=field_name, length=len(children), children=children)

        if definition.fields_kind == FieldsKind.EMPTY:
            return TypeNode(kind=TypeKind.VARIANT, name=field_name)

        if root:
            children = [self.get_type(d, name) for name, d in definition.named_fields]
            return TypeNode(kind=TypeKind.STRUCT, name=field_name, term=declaration, children=children)

        if declaration not in self.result.terms:
            # Register before expanding so recursive fields become references
            canonical = TypeNode(kind=TypeKind.STRUCT, term=declaration, children=[])
            self.result.terms.insert(declaration, canonical)
            logger.debug("Expanding struct '%s'", declaration)
            canonical.children.extend(self.get_type(d, name) for name, d in definition.named_fields)
        else:
            logger.debug("Reusing struct term '%s'", declaration)

        return TypeNode(kind=TypeKind.STRUCT, name=field_name, term=declaration)

    def _get_enum(self, definition: EnumDef, declaration: str, field_name: str | None) -> TypeNode:
        """Build a reference to the canonical Enum node, expanding it on first use."""
        if declaration not in self.result.terms:
            canonical = TypeNode(kind=TypeKind.ENUM, term=declaration, length=len(definition.variants), children=[])
            self.result.terms.insert(declaration, canonical)
            logger.debug("Expanding enum '%s'", declaration)
            canonical.children.extend(self.get_type(d, variant) for variant, d in definition.variants)
        else:
            logger.debug("Reusing enum term '%s'", declaration)

        return TypeNode(kind=TypeKind.ENUM, name=field_name, term=declaration)

    def _get_array(self, definition: ArrayDef, field_name: str | None) -> TypeNode:
        return TypeNode(
            kind=TypeKind.ARRAY,
            name=field_name,
            length=definition.length,
            children=[self.get_type(definition.elements)],
        )

    def _get_tuple(self, definition: TupleDef, field_name: str | None) -> TypeNode:
        children = [self.get_type(d) for d in definition.elements]
        return TypeNode(kind=TypeKind.TUPLE, name=field_name, length=len(children), children=children)

    def _get_parametric(self, kind: TypeKind, declaration: str, field_name: str | None) -> TypeNode:
        """Build Option/Result/Set/Map/Tuple/Array/Vec nodes from their named definition."""
        definition = self.container.get(declaration)
        if definition is None:
            raise SchemaInconsistencyError(f"'{declaration}' has no definition")

        if kind == TypeKind.TUPLE:
            self._expect(declaration, definition, TupleDef)
            return self._get_tuple(definition, field_name)

        if kind == TypeKind.ARRAY:
            self._expect(declaration, definition, ArrayDef)
            return self._get_array(definition, field_name)

        if kind in (TypeKind.SEQUENCE, TypeKind.SET, TypeKind.MAP):
            self._expect(declaration, definition, SequenceDef)
            return TypeNode(kind=kind, name=field_name, children=[self.get_type(definition.elements)])

        self._expect(declaration, definition, EnumDef)
        if len(definition.variants) != 2:
            raise SchemaInconsistencyError(f"'{declaration}' must have exactly two variants, found {len(definition.variants)}")

        if kind == TypeKind.OPTION:
            # Variant 0 is None, variant 1 carries the Some payload
            children = [self.get_type(definition.variants[1][1])]
        else:
            children = [
                self.get_type(definition.variants[0][1]),  # Ok
                self.get_type(definition.variants[1][1]),  # Err
            ]
        return TypeNode(kind=kind, name=field_name, children=children)

    def _expect(self, declaration: str, definition: Definition, expected: type) -> None:
        if not isinstance(definition, expected):
            raise SchemaInconsistencyError(
                f"'{declaration}' is defined as {type(definition).__name__}, expected {expected.__name__}"
            )


def get_schema(source: SchemaContainer | dict[str, Any]) -> TypeSchema:
    """
    Normalize a schema container.

    Args:
        source: A parsed SchemaContainer or its JSON document

    Returns:
        A fresh TypeSchema; calling this twice yields equal but distinct trees
    """
    container = source if isinstance(source, SchemaContainer) else parse_container(source)
    return SchemaNormalizer(container).normalize()
