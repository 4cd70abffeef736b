import json
from pathlib import Path

import pytest

from borsh_schema_to_graph.pipeline.errors import SchemaFormatError
from borsh_schema_to_graph.pipeline.schema_ast import (
    ArrayDef,
    EnumDef,
    FieldsKind,
    SequenceDef,
    StructDef,
    TupleDef,
    parse_container,
)

TEST_DATA = Path(__file__).parent / "test_data"


def _load(name):
    with open(TEST_DATA / name) as f:
        return json.load(f)


class TestSchemaContainerParser:
    """Parsing of serde-encoded Borsh schema containers"""

    def test_parse_person_schema(self):
        container = parse_container(_load("person_schema.json"))

        assert container.declaration == "Person"
        assert container.get("Person") == StructDef(
            fields_kind=FieldsKind.NAMED,
            named_fields=[("name", "string"), ("info", "Vec<Tuple<InfoItem, u8>>")],
        )
        assert container.get("Vec<Tuple<InfoItem, u8>>") == SequenceDef(elements="Tuple<InfoItem, u8>")
        assert container.get("Tuple<InfoItem, u8>") == TupleDef(elements=["InfoItem", "u8"])
        assert container.get("u8") is None

    def test_parse_all_shapes(self):
        container = parse_container(
            {
                "declaration": "Root",
                "definitions": {
                    "Unit": {"Struct": {"fields": "Empty"}},
                    "UnitTagged": {"Struct": {"fields": {"Empty": None}}},
                    "Pair": {"Struct": {"fields": {"UnnamedFields": ["u8", "u16"]}}},
                    "Color": {"Enum": {"variants": [["Red", "ColorRed"], ["Green", "ColorGreen"]]}},
                    "Array<u8, 4>": {"Array": {"length": 4, "elements": "u8"}},
                },
            }
        )

        assert container.get("Unit").fields_kind == FieldsKind.EMPTY
        assert container.get("UnitTagged").fields_kind == FieldsKind.EMPTY
        assert container.get("Pair") == StructDef(fields_kind=FieldsKind.UNNAMED, unnamed_fields=["u8", "u16"])
        assert container.get("Color") == EnumDef(variants=[("Red", "ColorRed"), ("Green", "ColorGreen")])
        assert container.get("Array<u8, 4>") == ArrayDef(elements="u8", length=4)

    def test_unknown_shape_is_rejected(self):
        with pytest.raises(SchemaFormatError, match="unknown shape 'Record'"):
            parse_container(_load("malformed_schema.json"))

    @pytest.mark.parametrize(
        "document",
        [
            [],
            {"definitions": {}},
            {"declaration": "", "definitions": {}},
            {"declaration": "A", "definitions": []},
            {"declaration": "A", "definitions": {"A": {"Struct": {}}}},
            {"declaration": "A", "definitions": {"A": {"Struct": {"fields": {"Whatever": []}}}}},
            {"declaration": "A", "definitions": {"A": {"Enum": {"variants": [["Only"]]}}}},
            {"declaration": "A", "definitions": {"A": {"Array": {"length": -1, "elements": "u8"}}}},
            {"declaration": "A", "definitions": {"A": {"Array": {"length": True, "elements": "u8"}}}},
            {"declaration": "A", "definitions": {"A": {"Sequence": {"elements": 3}}}},
            {"declaration": "A", "definitions": {"A": {"Tuple": {"elements": "u8"}}}},
            {"declaration": "A", "definitions": {"A": {"Tuple": {"elements": []}, "Sequence": {"elements": "u8"}}}},
        ],
    )
    def test_malformed_documents(self, document):
        with pytest.raises(SchemaFormatError):
            parse_container(document)
