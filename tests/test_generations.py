"""Tests for generation assignment."""

import pytest

from family_graph.graph.generations import (
    GenerationCycleError,
    assign_generations,
    count_generations,
)
from family_graph.graph.models import Member


def make_members(names, parent_links):
    """Build members from names and (parent, child) id pairs."""
    members = {name: Member(id=name, name=name.title()) for name in names}
    for parent, child in parent_links:
        members[parent].add_child(child)
        members[child].add_parent(parent)
    return members


def test_roots_get_generation_zero():
    members = make_members(["a", "b", "c"], [("a", "b")])
    assign_generations(members)

    assert members["a"].generation == 0
    assert members["c"].generation == 0
    assert members["b"].generation == 1


def test_generation_is_longest_path_from_a_root():
    # a -> b -> c and a -> c: c must sit below b
    members = make_members(["c", "b", "a"], [("a", "b"), ("b", "c"), ("a", "c")])
    assign_generations(members)

    assert [members[m].generation for m in ("a", "b", "c")] == [0, 1, 2]


def test_children_are_strictly_below_every_parent():
    links = [("a", "c"), ("b", "d"), ("d", "c"), ("c", "e"), ("f", "e")]
    members = make_members(["e", "d", "c", "b", "a", "f"], links)
    assign_generations(members)

    for parent, child in links:
        assert members[child].generation > members[parent].generation


def test_reverse_ordered_chain_converges_within_member_count():
    names = [f"m{i}" for i in range(8)]
    links = [(names[i], names[i + 1]) for i in range(7)]
    members = make_members(list(reversed(names)), links)

    passes = assign_generations(members)

    assert passes <= len(members)
    assert [members[n].generation for n in names] == list(range(8))


def test_mutual_parents_raise_cycle_error():
    members = make_members(["a", "b"], [("a", "b"), ("b", "a")])

    with pytest.raises(GenerationCycleError) as exc_info:
        assign_generations(members)

    assert set(exc_info.value.member_ids) == {"a", "b"}


def test_cycle_below_a_root_raises():
    members = make_members(["r", "a", "b"], [("r", "a"), ("a", "b"), ("b", "a")])

    with pytest.raises(GenerationCycleError):
        assign_generations(members)


def test_self_parent_raises():
    members = make_members(["a"], [("a", "a")])

    with pytest.raises(GenerationCycleError):
        assign_generations(members)


def test_cycle_error_is_a_value_error():
    assert issubclass(GenerationCycleError, ValueError)


def test_empty_members():
    assert assign_generations({}) == 0
    assert count_generations({}) == 0


def test_count_generations_counts_distinct_values():
    members = make_members(["a", "b", "x", "y"], [("a", "b")])
    assign_generations(members)

    assert count_generations(members) == 2


def test_cycle_error_names_only_unsettled_members():
    # r -> a <-> b cycles; p -> c is a separate lineage that settles
    members = make_members(
        ["r", "a", "b", "p", "c"], [("r", "a"), ("a", "b"), ("b", "a"), ("p", "c")]
    )

    with pytest.raises(GenerationCycleError) as exc_info:
        assign_generations(members)

    assert sorted(exc_info.value.member_ids) == ["a", "b"]
    assert members["c"].generation == 1
