"""
Declaration table node definitions.

These nodes mirror the flat schema container exported by Borsh's schema
reflection: a root declaration plus a mapping from declaration to definition.
Nothing is resolved at this stage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FieldsKind(Enum):
    """How a struct definition lists its fields."""

    NAMED = "NamedFields"
    UNNAMED = "UnnamedFields"
    EMPTY = "Empty"


@dataclass
class StructDef:
    """A struct definition with named, positional or no fields."""

    fields_kind: FieldsKind = FieldsKind.EMPTY
    named_fields: list[tuple[str, str]] = field(default_factory=list)  # [(field_name, declaration), ...]
    unnamed_fields: list[str] = field(default_factory=list)  # [declaration, ...]


@dataclass
class EnumDef:
    """An enum definition; each variant points at its payload declaration."""

    variants: list[tuple[str, str]] = field(default_factory=list)  # [(variant_name, declaration), ...]


@dataclass
class ArrayDef:
    """A fixed-length array definition."""

    elements: str = ""
    length: int = 0


@dataclass
class SequenceDef:
    """A growable sequence definition (Vec, HashSet and HashMap entries)."""

    elements: str = ""


@dataclass
class TupleDef:
    """A tuple definition."""

    elements: list[str] = field(default_factory=list)


Definition = StructDef | EnumDef | ArrayDef | SequenceDef | TupleDef


@dataclass
class SchemaContainer:
    """The flat schema source: root declaration and its definitions."""

    declaration: str = ""
    definitions: dict[str, Definition] = field(default_factory=dict)

    def get(self, declaration: str) -> Definition | None:
        """Get the definition of a declaration, if it has one."""
        return self.definitions.get(declaration)
