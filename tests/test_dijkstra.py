import math

import pytest

from airpath.algorithms import search
from airpath.algorithms.dijkstra import dijkstra
from airpath.graph import Graph, InvalidArgument


def test_prefers_cheaper_two_hop_path(triangle):
    result = dijkstra(triangle, "A", "C")
    assert result.path == ["A", "B", "C"]
    assert result.total_cost == 10
    assert result.visited_count == 3
    assert result.step_count == 3
    assert result.algorithm == "dijkstra"


def test_path_without_direct_edge(chain):
    result = dijkstra(chain, "A", "C")
    assert result.path == ["A", "B", "C"]
    assert result.total_cost == 10


def test_disconnected_target_is_not_an_error(triangle):
    triangle.add_node("D")
    result = dijkstra(triangle, "A", "D")
    assert result.path == []
    assert result.total_cost == math.inf
    assert not result.found
    assert result.visited_count == 3


def test_source_equals_target(triangle):
    result = dijkstra(triangle, "B", "B")
    assert result.path == ["B"]
    assert result.total_cost == 0


@pytest.mark.parametrize("source,target", [("A", "Z"), ("Z", "A"), ("", "A"), (None, "A")])
def test_unknown_endpoints_raise(triangle, source, target):
    with pytest.raises(InvalidArgument):
        dijkstra(triangle, source, target)


def test_ties_are_broken_deterministically():
    g = Graph()
    g.add_edge("A", "B", 1)
    g.add_edge("A", "C", 1)
    g.add_edge("B", "D", 1)
    g.add_edge("C", "D", 1)
    results = [dijkstra(g, "A", "D") for _ in range(5)]
    assert all(r.path == ["A", "B", "D"] for r in results)
    assert all(r.total_cost == 2 for r in results)


def test_weight_update_changes_route(triangle):
    triangle.add_edge("A", "C", 3)
    assert dijkstra(triangle, "A", "C").path == ["A", "C"]


def test_search_dispatches_and_ignores_positions(triangle):
    result = search(triangle, "A", "C", algorithm="dijkstra", positions={"A": (0, 0)})
    assert result.path == ["A", "B", "C"]


def test_search_rejects_unknown_algorithm(triangle):
    with pytest.raises(InvalidArgument):
        search(triangle, "A", "C", algorithm="bfs")


def test_result_to_dict_uses_null_for_infinite_cost(triangle):
    triangle.add_node("D")
    d = dijkstra(triangle, "A", "D").to_dict()
    assert d["path"] == []
    assert d["totalCost"] is None
