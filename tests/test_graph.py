import math

import pytest

from airpath.algorithms import search
from airpath.graph import Graph, InvalidArgument, InvalidWeight, NO_EDGE


def test_add_node_is_idempotent():
    g = Graph()
    g.add_node("A")
    g.add_node("A")
    assert g.node_count() == 1
    assert g.has_node("A")


@pytest.mark.parametrize("bad", ["", None, 42])
def test_add_node_rejects_bad_ids(bad):
    g = Graph()
    with pytest.raises(InvalidArgument):
        g.add_node(bad)
    assert g.node_count() == 0


def test_add_edge_is_symmetric():
    g = Graph()
    g.add_edge("A", "B", 7)
    assert ("B", 7) in g.neighbors("A")
    assert ("A", 7) in g.neighbors("B")
    assert g.edge_weight("A", "B") == g.edge_weight("B", "A") == 7
    assert g.degree("A") == g.degree("B") == 1
    assert g.degree("Z") == 0


def test_add_edge_auto_inserts_endpoints():
    g = Graph()
    g.add_edge("X", "Y", 1)
    assert g.has_node("X") and g.has_node("Y")
    assert g.node_count() == 2


def test_reinserting_edge_updates_weight_in_place():
    g = Graph()
    g.add_edge("A", "B", 5)
    g.add_edge("B", "A", 9)
    assert g.neighbors("A") == [("B", 9)]
    assert g.neighbors("B") == [("A", 9)]
    assert g.edge_count() == 1


@pytest.mark.parametrize("bad", [-1, -0.001, math.inf, -math.inf, math.nan, "5", None, True])
def test_add_edge_rejects_invalid_weight_and_leaves_graph_unchanged(bad):
    g = Graph()
    g.add_edge("A", "B", 3)
    with pytest.raises(InvalidWeight):
        g.add_edge("A", "C", bad)
    assert g.node_count() == 2
    assert not g.has_node("C")
    assert g.neighbors("A") == [("B", 3)]


def test_add_edge_rejects_invalid_weight_on_existing_edge():
    g = Graph()
    g.add_edge("A", "B", 3)
    with pytest.raises(InvalidWeight):
        g.add_edge("A", "B", -2)
    assert g.edge_weight("A", "B") == 3


def test_zero_weight_is_allowed():
    g = Graph()
    g.add_edge("A", "B", 0)
    assert g.edge_weight("A", "B") == 0


def test_self_loop_is_stored_and_ignored_by_searches():
    g = Graph()
    g.add_edge("A", "A", 1)
    g.add_edge("A", "B", 4)
    assert g.has_edge("A", "A")
    assert g.edge_weight("A", "A") == 1
    assert g.node_count() == 2
    assert g.edge_count() == 2
    for algorithm in ("dijkstra", "astar"):
        result = search(g, "A", "B", algorithm=algorithm)
        assert result.path == ["A", "B"]
        assert result.total_cost == 4


def test_self_loop_still_validates_weight():
    g = Graph()
    with pytest.raises(InvalidWeight):
        g.add_edge("A", "A", -1)
    assert g.node_count() == 0


def test_lookups_on_unknown_nodes():
    g = Graph()
    g.add_node("A")
    assert g.neighbors("nope") == []
    assert g.edge_weight("A", "nope") is NO_EDGE
    assert not g.has_edge("A", "nope")
    assert not g.has_node("nope")


def test_neighbors_keep_insertion_order(triangle):
    assert [n for n, _ in triangle.neighbors("A")] == ["B", "C"]


def test_counts_and_path_cost(triangle):
    assert triangle.node_count() == 3
    assert triangle.edge_count() == 3
    assert triangle.path_cost(["A", "B", "C"]) == 10
    assert triangle.path_cost(["A"]) == 0
    triangle.add_node("D")
    assert triangle.path_cost(["A", "D"]) == math.inf
