"""
Schema container parser.

Reads the JSON export of a Borsh schema container (serde's externally
tagged encoding) into a SchemaContainer. No normalization happens here.
"""

from __future__ import annotations

from typing import Any

from ..errors import SchemaFormatError
from .nodes import (
    ArrayDef,
    Definition,
    EnumDef,
    FieldsKind,
    SchemaContainer,
    SequenceDef,
    StructDef,
    TupleDef,
)


class SchemaContainerParser:
    """Parses a schema container document into declaration nodes."""

    DEFINITION_TAGS = {"Struct", "Enum", "Array", "Sequence", "Tuple"}

    def parse(self, document: dict[str, Any]) -> SchemaContainer:
        """
        Parse a schema container document.

        Args:
            document: Dictionary with "declaration" and "definitions" keys

        Returns:
            SchemaContainer with one definition per declaration
        """
        if not isinstance(document, dict):
            raise SchemaFormatError(f"Schema container must be an object, got {type(document).__name__}")

        declaration = document.get("declaration")
        if not isinstance(declaration, str) or not declaration:
            raise SchemaFormatError("Schema container is missing its root 'declaration'")

        raw_definitions = document.get("definitions", {})
        if not isinstance(raw_definitions, dict):
            raise SchemaFormatError("'definitions' must be an object mapping declarations to definitions")

        container = SchemaContainer(declaration=declaration)
        for key, raw in raw_definitions.items():
            container.definitions[key] = self._parse_definition(key, raw)
        return container

    def _parse_definition(self, key: str, raw: Any) -> Definition:
        """Parse one externally tagged definition."""
        if not isinstance(raw, dict) or len(raw) != 1:
            raise SchemaFormatError(f"Definition of '{key}' must be an object with a single shape tag")

        tag, body = next(iter(raw.items()))
        if tag not in self.DEFINITION_TAGS:
            raise SchemaFormatError(f"Definition of '{key}' has unknown shape '{tag}'")
        if not isinstance(body, dict):
            raise SchemaFormatError(f"Body of {tag} definition '{key}' must be an object")

        if tag == "Struct":
            return self._parse_struct(key, body)
        if tag == "Enum":
            return EnumDef(variants=self._parse_pairs(key, self._require(key, body, "variants")))
        if tag == "Array":
            length = self._require(key, body, "length")
            if not isinstance(length, int) or isinstance(length, bool) or length < 0:
                raise SchemaFormatError(f"Array '{key}' has invalid length {length!r}")
            return ArrayDef(elements=self._parse_declaration(key, self._require(key, body, "elements")), length=length)
        if tag == "Sequence":
            return SequenceDef(elements=self._parse_declaration(key, self._require(key, body, "elements")))
        return TupleDef(elements=self._parse_declarations(key, self._require(key, body, "elements")))

    def _parse_struct(self, key: str, body: dict[str, Any]) -> StructDef:
        """Parse the fields of a struct definition."""
        fields = self._require(key, body, "fields")

        # Unit structs serialize their fields as the bare string "Empty"
        if fields == FieldsKind.EMPTY.value:
            return StructDef(fields_kind=FieldsKind.EMPTY)

        if not isinstance(fields, dict) or len(fields) != 1:
            raise SchemaFormatError(f"Struct '{key}' has malformed fields")

        fields_tag, fields_body = next(iter(fields.items()))
        if fields_tag == FieldsKind.NAMED.value:
            return StructDef(fields_kind=FieldsKind.NAMED, named_fields=self._parse_pairs(key, fields_body))
        if fields_tag == FieldsKind.UNNAMED.value:
            return StructDef(fields_kind=FieldsKind.UNNAMED, unnamed_fields=self._parse_declarations(key, fields_body))
        if fields_tag == FieldsKind.EMPTY.value:
            return StructDef(fields_kind=FieldsKind.EMPTY)
        raise SchemaFormatError(f"Struct '{key}' has unknown fields kind '{fields_tag}'")

    def _require(self, key: str, body: dict[str, Any], member: str) -> Any:
        if member not in body:
            raise SchemaFormatError(f"Definition of '{key}' is missing '{member}'")
        return body[member]

    def _parse_declaration(self, key: str, value: Any) -> str:
        if not isinstance(value, str):
            raise SchemaFormatError(f"Definition of '{key}' refers to a non-string declaration {value!r}")
        return value

    def _parse_declarations(self, key: str, values: Any) -> list[str]:
        if not isinstance(values, list):
            raise SchemaFormatError(f"Definition of '{key}' expects a list of declarations")
        return [self._parse_declaration(key, v) for v in values]

    def _parse_pairs(self, key: str, values: Any) -> list[tuple[str, str]]:
        """Parse [[name, declaration], ...] pairs."""
        if not isinstance(values, list):
            raise SchemaFormatError(f"Definition of '{key}' expects a list of [name, declaration] pairs")
        pairs = []
        for pair in values:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2 or not all(isinstance(p, str) for p in pair):
                raise SchemaFormatError(f"Definition of '{key}' has malformed pair {pair!r}")
            pairs.append((pair[0], pair[1]))
        return pairs


def parse_container(document: dict[str, Any]) -> SchemaContainer:
    """Parse a schema container document."""
    return SchemaContainerParser().parse(document)
