"""
Visit plan for plain Python values.

Emits the push(index) / build(literal) / pop() sequence a generated
serializer would emit for a value, in field declaration order. The plan is
schema-directed: at each step it asks the builder which node is being
visited and reads the matching part of the value.

Accepted values per kind:
- Struct: dataclass, mapping or any object with the field attributes
- Tuple / Variant: tuple, list or dataclass (fields in order)
- Sequence / Set / Array: any non-string iterable, including bytes for u8 elements
- Map: mapping
- Option: None or the payload
- Result: Ok(...), Err(...), {"Ok": ...} or {"Err": ...}
- Enum: enum.Enum member, EnumValue, variant name, {"Variant": payload},
  or a dataclass named after the variant
"""

from __future__ import annotations

import dataclasses
import enum
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .analyzer.type_nodes import TypeKind, TypeNode
from .builders.base import Builder
from .errors import ValueMismatchError


@dataclass(frozen=True)
class Ok:
    """Success value of a Result."""

    value: Any = None


@dataclass(frozen=True)
class Err:
    """Error value of a Result."""

    value: Any = None


@dataclass(frozen=True)
class EnumValue:
    """An enum variant chosen by name, with its payload."""

    variant: str
    payload: Any = None


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_float(value: float) -> str:
    """Render a float like Rust's Debug formatting: `1.0`, `1e20`, `1e-5`, `NaN`, `inf`."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        text = f"{mantissa}e{int(exponent)}"
    return text


class ValueVisitor:
    """Drives a Builder over a Python value."""

    def __init__(self, builder: Builder):
        self.builder = builder
        self._handlers = {
            TypeKind.BOOL: self._visit_bool,
            TypeKind.INT: self._visit_int,
            TypeKind.FLOAT: self._visit_float,
            TypeKind.STRING: self._visit_string,
            TypeKind.STRUCT: self._visit_struct,
            TypeKind.TUPLE: self._visit_positional,
            TypeKind.VARIANT: self._visit_positional,
            TypeKind.SEQUENCE: self._visit_sequence,
            TypeKind.SET: self._visit_sequence,
            TypeKind.ARRAY: self._visit_array,
            TypeKind.MAP: self._visit_map,
            TypeKind.OPTION: self._visit_option,
            TypeKind.RESULT: self._visit_result,
            TypeKind.ENUM: self._visit_enum,
            TypeKind.UNDEFINED: self._visit_undefined,
        }

    def visit(self, value: Any) -> None:
        """Visit a value; enters the schema root first when the builder is fresh."""
        if self.builder.is_root():
            self._visit_field(0, value)
        else:
            self._visit_node(value)

    def _visit_field(self, index: int, value: Any) -> None:
        self.builder.push(index)
        self._visit_node(value)
        self.builder.pop()

    def _visit_node(self, value: Any) -> None:
        node = self.builder.current_node()
        self._handlers[node.kind](node, value)

    def _visit_bool(self, node: TypeNode, value: Any) -> None:
        if not isinstance(value, bool):
            raise self._mismatch(node, value)
        self.builder.build(format_bool(value))

    def _visit_int(self, node: TypeNode, value: Any) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise self._mismatch(node, value)
        bits = (node.byte_length or 16) * 8
        if node.signed:
            low, high = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
        else:
            low, high = 0, 2**bits - 1
        if not low <= value <= high:
            raise ValueMismatchError(f"{value} does not fit in {'i' if node.signed else 'u'}{bits} at '{self._path()}'")
        self.builder.build(str(value))

    def _visit_float(self, node: TypeNode, value: Any) -> None:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise self._mismatch(node, value)
        self.builder.build(format_float(value))

    def _visit_string(self, node: TypeNode, value: Any) -> None:
        if not isinstance(value, str):
            raise self._mismatch(node, value)
        self.builder.build(value)

    def _visit_undefined(self, node: TypeNode, value: Any) -> None:
        # The unit type carries no data
        pass

    def _visit_struct(self, node: TypeNode, value: Any) -> None:
        self.builder.build()
        for index, child in enumerate(node.children or []):
            self._visit_field(index, self._get_field(node, value, child.name))

    def _visit_positional(self, node: TypeNode, value: Any) -> None:
        children = node.children or []
        items = [] if not children and value is None else self._as_items(node, value)
        if len(items) != len(children):
            raise ValueMismatchError(f"{node.kind.value} at '{self._path()}' expects {len(children)} items, got {len(items)}")
        self.builder.build()
        for index, item in enumerate(items):
            self._visit_field(index, item)

    def _visit_sequence(self, node: TypeNode, value: Any) -> None:
        if isinstance(value, (str, Mapping)) or not isinstance(value, Iterable):
            raise self._mismatch(node, value)
        self._visit_elements(list(value))

    def _visit_array(self, node: TypeNode, value: Any) -> None:
        if isinstance(value, (str, Mapping)) or not isinstance(value, Iterable):
            raise self._mismatch(node, value)
        items = list(value)
        if node.length is not None and len(items) != node.length:
            raise ValueMismatchError(f"Array at '{self._path()}' expects {node.length} elements, got {len(items)}")
        self._visit_elements(items)

    def _visit_map(self, node: TypeNode, value: Any) -> None:
        if not isinstance(value, Mapping):
            raise self._mismatch(node, value)
        self._visit_elements(list(value.items()))

    def _visit_elements(self, items: list[Any]) -> None:
        self.builder.build(str(len(items)))
        for item in items:
            self._visit_field(0, item)

    def _visit_option(self, node: TypeNode, value: Any) -> None:
        if value is None:
            self.builder.build("None")
            return
        self.builder.build("Some")
        self._visit_field(0, value)

    def _visit_result(self, node: TypeNode, value: Any) -> None:
        tagged = self._single_key(value)
        if tagged is not None and tagged[0] in ("Ok", "Err"):
            value = Ok(tagged[1]) if tagged[0] == "Ok" else Err(tagged[1])

        if isinstance(value, Ok):
            self.builder.build("Ok")
            self._visit_field(0, value.value)
        elif isinstance(value, Err):
            self.builder.build("Err")
            self._visit_field(1, value.value)
        else:
            raise self._mismatch(node, value)

    def _visit_enum(self, node: TypeNode, value: Any) -> None:
        if isinstance(value, EnumValue):
            variant, payload = value.variant, value.payload
        elif isinstance(value, enum.Enum):
            variant, payload = value.name, None
        elif isinstance(value, str):
            variant, payload = value, None
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            variant, payload = type(value).__name__, value
        elif self._single_key(value) is not None:
            variant, payload = self._single_key(value)
        else:
            raise self._mismatch(node, value)

        names = [child.name for child in node.children or []]
        if variant not in names:
            raise ValueMismatchError(f"'{variant}' is not a variant of {node.term} at '{self._path()}'")
        self.builder.build(variant)
        self._visit_field(names.index(variant), payload)

    def _get_field(self, node: TypeNode, value: Any, name: str | None) -> Any:
        if isinstance(value, Mapping):
            if name not in value:
                raise ValueMismatchError(f"Field '{name}' of {node.term} is missing at '{self._path()}'")
            return value[name]
        if name is None or not hasattr(value, name):
            raise ValueMismatchError(f"{type(value).__name__} has no field '{name}' required by {node.term} at '{self._path()}'")
        return getattr(value, name)

    def _single_key(self, value: Any) -> tuple[str, Any] | None:
        """Unpack serde's externally tagged form {"Tag": payload}."""
        if isinstance(value, Mapping) and len(value) == 1:
            key, payload = next(iter(value.items()))
            if isinstance(key, str):
                return key, payload
        return None

    def _as_items(self, node: TypeNode, value: Any) -> list[Any]:
        if isinstance(value, (tuple, list)):
            return list(value)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return [getattr(value, f.name) for f in dataclasses.fields(value)]
        raise self._mismatch(node, value)

    def _mismatch(self, node: TypeNode, value: Any) -> ValueMismatchError:
        return ValueMismatchError(f"{type(value).__name__} value {value!r} does not match {node.kind.value} at '{self._path()}'")

    def _path(self) -> str:
        return "/".join(self.builder.path)


def visit_value(value: Any, builder: Builder) -> Builder:
    """Drive `builder` over `value` and return it."""
    ValueVisitor(builder).visit(value)
    return builder
