"""Tests for the connection materializer."""

from family_graph.graph.builder import GraphBuilder
from family_graph.graph.connections import materialize
from family_graph.schemas import RelationshipEntity


def rel(person1, person2, type_):
    return RelationshipEntity(person1=person1, person2=person2, type=type_, confidence=0.9)


def as_tuples(connections):
    return [(c.source, c.target, c.type) for c in connections]


def test_child_connections_point_parent_to_child():
    graph = GraphBuilder().build([rel("Anna", "Erik", "mor"), rel("Bo", "Anna", "dotter")])

    assert as_tuples(materialize(graph.members)) == [
        ("anna", "erik", "child"),
        ("anna", "bo", "child"),
    ]


def test_spouse_pair_emitted_once_from_lower_id():
    graph = GraphBuilder().build([rel("Lena", "Erik", "maka")])

    assert as_tuples(materialize(graph.members)) == [("erik", "lena", "spouse")]


def test_one_sided_spouse_link_is_still_emitted():
    # Erik remarries; Lena still points at Erik
    graph = GraphBuilder().build([rel("Erik", "Lena", "make"), rel("Erik", "Karin", "make")])

    assert as_tuples(materialize(graph.members)) == [
        ("erik", "karin", "spouse"),
        ("lena", "erik", "spouse"),
    ]


def test_other_relation_types_produce_no_connections():
    graph = GraphBuilder().build([rel("Sara", "Mats", "kusin")])

    assert materialize(graph.members) == []


def test_to_dict_uses_from_and_to():
    graph = GraphBuilder().build([rel("Anna", "Erik", "far")])

    assert materialize(graph.members)[0].to_dict() == {"from": "anna", "to": "erik", "type": "child"}


def test_self_spouse_produces_no_connection():
    graph = GraphBuilder().build([rel("Erik", "Erik", "make"), rel("Erik", "Lena", "make")])

    assert as_tuples(materialize(graph.members)) == [("erik", "lena", "spouse")]
