"""
Tests for the push/build/pop traversal contract shared by all builders.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from borsh_schema_to_graph.pipeline import GraphConfig
from borsh_schema_to_graph.pipeline.analyzer import TypeKind, get_schema
from borsh_schema_to_graph.pipeline.builders import DebugBuilder, DeterministicTokenGenerator, GraphBuilder
from borsh_schema_to_graph.pipeline.errors import MissingLiteralForLeafError, TraversalIndexOutOfRangeError

TEST_DATA = Path(__file__).parent / "test_data"


@pytest.fixture
def person_schema():
    with open(TEST_DATA / "person_schema.json") as f:
        return get_schema(json.load(f))


@pytest.fixture
def builder(person_schema):
    return DebugBuilder(person_schema, token_generator=DeterministicTokenGenerator("test"))


def test_first_push_enters_root_and_ignores_index(builder, person_schema):
    assert builder.is_root()

    builder.push(42)

    assert not builder.is_root()
    assert builder.current_frame().node is person_schema.schema
    assert builder.current_frame().index == 0
    assert builder.path == ["Person"]
    assert len(builder.identities) == 1


def test_path_elements_use_names_then_indices(builder):
    builder.push(0)
    builder.push(1)  # info
    builder.push(0)  # sequence element
    builder.push(0)  # InfoItem inside the tuple
    builder.push(0)  # data

    assert builder.path == ["Person", "info", "0", "0", "data"]
    assert builder.current_node().kind == TypeKind.STRING


def test_push_resolves_shared_struct_through_term_table(builder, person_schema):
    builder.push(0)
    builder.push(1)
    builder.push(0)
    builder.push(0)

    assert builder.current_frame().node.children is None
    assert builder.current_node() is person_schema.terms.resolve("InfoItem")

    builder.push(0)
    assert builder.current_frame().node is person_schema.terms.resolve("InfoItem").children[0]


def test_identity_stack_follows_containers(builder):
    builder.push(0)  # Person
    builder.push(1)  # info
    builder.push(0)  # tuple
    assert len(builder.identities) == 3

    builder.push(1)  # u8 leaf
    assert len(builder.identities) == 3
    builder.pop()
    assert len(builder.identities) == 3

    builder.pop()
    assert len(builder.identities) == 2
    builder.pop()
    builder.pop()
    assert builder.identities == []
    assert builder.path == []
    assert builder.stack == []


def test_instance_identity_is_unique_but_class_address_is_stable(builder):
    builder.push(0)
    builder.push(1)

    builder.push(0)
    first_class, first_instance = builder.class_address(), builder.identities[-1]
    builder.pop()

    builder.push(0)
    second_class, second_instance = builder.class_address(), builder.identities[-1]
    builder.pop()

    assert first_class == second_class
    assert first_class.value == "urn:borsh:Person/info/0"
    assert first_instance != second_instance
    assert first_instance.value.startswith("urn:borsh:Person/info/0#")


def test_push_past_children_fails(builder):
    builder.push(0)
    with pytest.raises(TraversalIndexOutOfRangeError):
        builder.push(2)
    with pytest.raises(TraversalIndexOutOfRangeError):
        builder.push(-1)


def test_push_into_leaf_fails(builder):
    builder.push(0)
    builder.push(0)
    with pytest.raises(TraversalIndexOutOfRangeError):
        builder.push(0)


def test_pop_on_empty_stack_fails(builder):
    with pytest.raises(TraversalIndexOutOfRangeError):
        builder.pop()


def test_push_after_root_was_popped_fails(builder):
    builder.push(0)
    builder.pop()
    assert not builder.is_root()
    with pytest.raises(TraversalIndexOutOfRangeError):
        builder.push(0)


def test_build_before_push_fails(builder):
    with pytest.raises(TraversalIndexOutOfRangeError):
        builder.build()


def test_leaf_without_literal_fails(builder):
    builder.push(0)
    builder.push(0)
    with pytest.raises(MissingLiteralForLeafError):
        builder.build(None)


def test_debug_lines(builder):
    builder.push(0)
    builder.build()
    builder.push(0)
    builder.build("Bob")
    builder.pop()
    builder.push(1)
    builder.build("0")
    builder.pop()
    builder.pop()

    assert builder.lines == ["Person Struct", "Person/name String: Bob", "Person/info Sequence: 0"]
    assert builder.render() == "Person Struct\nPerson/name String: Bob\nPerson/info Sequence: 0"


def test_stack_aliases_and_reset(person_schema):
    builder = GraphBuilder(person_schema, GraphConfig(base_uri="http://example.org/"))
    builder.stack_push(0)
    builder.build()
    builder.stack_pop()
    assert len(builder.graph) == 1

    builder.reset()
    assert builder.is_root()
    assert len(builder.graph) == 0
    builder.stack_push(0)
    assert builder.class_address().value == "http://example.org/Person"


def test_path_segments_are_quoted():
    schema = get_schema(
        {
            "declaration": "Odd Name",
            "definitions": {"Odd Name": {"Struct": {"fields": {"NamedFields": [["a/b", "u8"]]}}}},
        }
    )
    builder = GraphBuilder(schema)
    builder.push(0)
    builder.push(0)

    assert builder.path == ["Odd Name", "a/b"]
    assert builder.class_address().value == "urn:borsh:Odd%20Name/a%2Fb"


def test_leaf_root_gets_its_own_identity():
    schema = get_schema({"declaration": "u32", "definitions": {}})
    builder = GraphBuilder(schema, token_generator=DeterministicTokenGenerator("leaf"))

    builder.push(0)
    assert len(builder.identities) == 1
    builder.build("7")
    builder.pop()
    assert builder.identities == []

    type_statement, value_statement = builder.graph
    assert type_statement.subject == value_statement.subject
    assert type_statement.subject.value.startswith("urn:borsh:u32#")
    assert type_statement.object.value == "urn:borsh:u32"
    assert value_statement.predicate.value == "urn:borsh:u32"
    assert value_statement.object.value == "7"
