"""Tests for the networkx projection and data validation."""

from graph import build_graph, iter_families
from parsing import normalize
from validation import validate_tree


def test_build_graph_edges_and_declared_flags():
    house = normalize({
        "families": [{"parents": ["A"], "parents2": ["D"], "children": ["B", "C"]}],
        "people": {"A": None, "B": None, "C": None},
    })
    G = build_graph(house)

    assert set(G.edges()) == {("A", "B"), ("A", "C"), ("D", "B"), ("D", "C")}
    assert G.edges["A", "B"]["relationship_type"] == "PARENT_OF"
    assert G.nodes["A"]["declared"] is True
    assert G.nodes["A"]["houses"] == [()]
    assert G.nodes["D"]["declared"] is False


def test_iter_families_includes_sub_families():
    house = normalize({"families": [{"parents": ["A"], "families": [{"parents": ["B"]}]}]})
    assert [f.parents for f in iter_families(house.families)] == [["A"], ["B"]]


def test_clean_tree_has_no_warnings():
    house = normalize({
        "families": [{"parents": ["A"], "children": ["B"]}],
        "people": {"A": None, "B": None},
    })
    assert validate_tree(house) == []


def test_cycle_is_reported():
    house = normalize({
        "families": [
            {"parents": ["A"], "children": ["B"]},
            {"parents": ["B"], "children": ["A"]},
        ],
        "people": {"A": None, "B": None},
    })
    warnings = validate_tree(house)
    assert any(w.startswith("Cycle detected") for w in warnings)


def test_undeclared_person_is_reported():
    house = normalize({"families": [{"parents": ["X"], "children": ["A"]}], "people": {"A": None}})
    assert validate_tree(house) == ["Undeclared person referenced by a family: X"]


def test_duplicate_declaration_is_reported():
    house = normalize({"people": {"A": None}, "houses": {"H": {"people": {"A": None}}}})
    assert validate_tree(house) == ["Person A declared in several houses: <root>, H"]


def test_empty_family_is_reported():
    house = normalize({"houses": {"H": {"families": [None]}}})
    assert validate_tree(house) == ["Empty family (no parents, no children) in H"]
