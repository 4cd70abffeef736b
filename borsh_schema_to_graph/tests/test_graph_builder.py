"""
End-to-end tests: schema + value -> graph statements.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import pytest

from borsh_schema_to_graph.pipeline import GraphConfig, GraphPipeline, TokenSource
from borsh_schema_to_graph.pipeline.builders import DeterministicTokenGenerator
from borsh_schema_to_graph.pipeline.graph import IRI, RDF_TYPE, RDF_VALUE, XSD_INTEGER, Literal
from borsh_schema_to_graph.pipeline.visit_plan import EnumValue

TEST_DATA = Path(__file__).parent / "test_data"


@dataclass
class InfoItem:
    data: str


@dataclass
class Person:
    name: str
    info: list[tuple[InfoItem, int]]


def _load(name):
    with open(TEST_DATA / name) as f:
        return json.load(f)


def _iri(path):
    return IRI("urn:borsh:" + path)


@pytest.fixture
def pipeline():
    return GraphPipeline(_load("person_schema.json"), token_generator=DeterministicTokenGenerator("person"))


BOB = Person(name="Bob", info=[(InfoItem(data="Hello"), 10), (InfoItem(data="World"), 20)])


@pytest.mark.parametrize("value", [BOB, _load("person_value.json")], ids=["dataclasses", "json"])
def test_person_scenario(pipeline, value):
    graph = pipeline.to_graph(value)

    (person_type,) = graph.triples(None, RDF_TYPE, _iri("Person"))
    person = person_type.subject
    assert graph.triples(person, _iri("Person/name"), None)[0].object == Literal("Bob")

    (sequence_type,) = graph.triples(None, RDF_TYPE, _iri("Person/info"))
    sequence = sequence_type.subject
    assert graph.triples(person, _iri("Person/info"), sequence)
    assert graph.triples(sequence, RDF_VALUE, None)[0].object == Literal("2", XSD_INTEGER)

    tuple_types = graph.triples(None, RDF_TYPE, _iri("Person/info/0"))
    assert len(tuple_types) == 2
    tuples = [s.subject for s in tuple_types]
    assert tuples[0] != tuples[1]
    assert [s.object for s in graph.triples(sequence, _iri("Person/info/0"), None)] == tuples

    item_types = graph.triples(None, RDF_TYPE, _iri("Person/info/0/0"))
    assert len(item_types) == 2
    for tuple_instance, item_type, text, count in zip(tuples, item_types, ["Hello", "World"], ["10", "20"]):
        item = item_type.subject
        assert graph.triples(tuple_instance, _iri("Person/info/0/0"), item)
        assert graph.triples(item, _iri("Person/info/0/0/data"), Literal(text))
        assert graph.triples(tuple_instance, _iri("Person/info/0/1"), Literal(count, XSD_INTEGER))

    # 1 person + 1 name + 3 sequence + 2 * (2 tuple + 2 item + 1 data + 1 count)
    assert len(graph) == 17


def test_person_debug_trace(pipeline):
    assert pipeline.to_debug_lines(BOB) == [
        "Person Struct",
        "Person/name String: Bob",
        "Person/info Sequence: 2",
        "Person/info/0 Tuple",
        "Person/info/0/0 Struct",
        "Person/info/0/0/data String: Hello",
        "Person/info/0/1 Int: 10",
        "Person/info/0 Tuple",
        "Person/info/0/0 Struct",
        "Person/info/0/0/data String: World",
        "Person/info/0/1 Int: 20",
    ]


def test_unit_struct_emits_only_class_statement():
    pipeline = GraphPipeline({"declaration": "Marker", "definitions": {"Marker": {"Struct": {"fields": {"NamedFields": []}}}}})

    graph = pipeline.to_graph({})

    assert len(graph) == 1
    (statement,) = graph
    assert statement.predicate == RDF_TYPE
    assert statement.object == _iri("Marker")


SHAPE_SCHEMA = {
    "declaration": "Shape",
    "definitions": {
        "Shape": {"Enum": {"variants": [["Circle", "ShapeCircle"], ["Dot", "ShapeDot"]]}},
        "ShapeCircle": {"Struct": {"fields": {"UnnamedFields": ["u32"]}}},
        "ShapeDot": {"Struct": {"fields": "Empty"}},
    },
}


def test_root_enum_payload_links_to_enum_subject():
    graph = GraphPipeline(SHAPE_SCHEMA, token_generator=DeterministicTokenGenerator("shape")).to_graph(
        EnumValue("Circle", [3])
    )

    (enum_type,) = graph.triples(None, RDF_TYPE, _iri("Shape"))
    shape = enum_type.subject
    assert graph.triples(shape, _iri("Shape"), Literal("Circle"))

    (circle_type,) = graph.triples(None, RDF_TYPE, _iri("Shape/Circle"))
    circle = circle_type.subject
    assert graph.triples(shape, _iri("Shape/Circle"), circle)
    assert graph.triples(circle, _iri("Shape/Circle/0"), Literal("3", XSD_INTEGER))
    assert len(graph) == 5


def test_root_unit_variant():
    graph = GraphPipeline(SHAPE_SCHEMA).to_graph("Dot")

    (enum_type,) = graph.triples(None, RDF_TYPE, _iri("Shape"))
    (dot_type,) = graph.triples(None, RDF_TYPE, _iri("Shape/Dot"))
    assert graph.triples(enum_type.subject, _iri("Shape/Dot"), dot_type.subject)


def test_deterministic_tokens_are_reproducible():
    config = GraphConfig(token_source=TokenSource.DETERMINISTIC, seed="demo")
    document = _load("person_schema.json")

    first = GraphPipeline(document, config).to_graph(BOB).serialize("nt")
    second = GraphPipeline(document, config).to_graph(BOB).serialize("nt")

    assert first == second


def test_random_tokens_differ_between_runs():
    document = _load("person_schema.json")

    first = GraphPipeline(document).to_graph(BOB).serialize("nt")
    second = GraphPipeline(document).to_graph(BOB).serialize("nt")

    assert first != second


def test_ntriples_rendering():
    pipeline = GraphPipeline(
        _load("person_schema.json"),
        GraphConfig(base_uri="http://example.org/", token_source=TokenSource.DETERMINISTIC, seed="nt"),
    )
    graph = pipeline.to_graph(Person(name='Say "hi"\n', info=[]))

    lines = graph.serialize("nt", comment="Generated by test").splitlines()

    assert lines[0] == "# Generated by test"
    assert len(lines) == 1 + len(graph)
    assert all(line.endswith(" .") for line in lines[1:])
    assert lines[1].startswith("<http://example.org/Person#")
    assert lines[1].endswith("<http://www.w3.org/1999/02/22-rdf-syntax-ns#type> <http://example.org/Person> .")
    assert lines[2].endswith('<http://example.org/Person/name> "Say \\"hi\\"\\n" .')
    assert lines[-1].endswith('"0"^^<http://www.w3.org/2001/XMLSchema#integer> .')


def test_unsupported_graph_format(pipeline):
    with pytest.raises(ValueError):
        pipeline.to_graph(BOB).serialize("turtle")


def test_generate_uses_configured_format():
    document = _load("person_schema.json")

    debug = GraphPipeline(document, GraphConfig.from_dict({"output_format": "debug"})).generate(BOB)
    assert debug.splitlines()[0] == "Person Struct"

    nt = GraphPipeline(document, GraphConfig(add_generation_comment=False)).generate(BOB, comment="ignored")
    assert not nt.startswith("#")
    assert len(nt.splitlines()) == 17


def test_schema_is_shared_by_independent_traversals(pipeline):
    first = pipeline.to_graph(BOB)
    second = pipeline.to_graph(BOB)

    assert len(first) == len(second) == 17
    assert first.statements[0].subject != second.statements[0].subject
