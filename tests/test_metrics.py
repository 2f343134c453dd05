import math

import pytest

from airpath.engine import compare, measure, timed_search
from airpath.engine.metrics import RunMetrics
from airpath.graph import InvalidArgument


LINE = {"A": (0, 0), "B": (5, 0), "C": (10, 0)}


def test_measure_reports_search_and_graph_numbers(triangle):
    m = measure("dijkstra", triangle, "A", "C")
    assert m.label == "Dijkstra's Algorithm"
    assert m.path == ["A", "B", "C"]
    assert m.path_cost == 10
    assert m.path_found
    assert m.visited_count == 3
    assert m.step_count == 3
    assert m.node_count == 3
    assert m.edge_count == 3
    assert m.wall_time_ms >= 0


def test_measure_unreachable_serialises_null_cost(triangle):
    triangle.add_node("D")
    m = measure("astar", triangle, "A", "D", positions=LINE)
    assert not m.path_found
    assert m.path_cost == math.inf
    assert m.to_dict()["path_cost"] is None


def test_measure_unknown_algorithm(triangle):
    with pytest.raises(InvalidArgument):
        measure("dfs", triangle, "A", "C")


def test_compare_picks_lower_values():
    left = RunMetrics(label="Dijkstra", visited_count=8, step_count=9, path_cost=10.0, wall_time_ms=1.0)
    right = RunMetrics(label="A*", visited_count=4, step_count=9, path_cost=10.0, wall_time_ms=2.0)
    result = compare(left, right)
    assert result.winner_visited == "A*"
    assert result.winner_steps == "tie"
    assert result.winner_cost == "tie"
    assert result.winner_time == "Dijkstra"


def test_compare_real_runs_agree_on_cost(triangle):
    left = measure("dijkstra", triangle, "A", "C")
    right = measure("astar", triangle, "A", "C", positions=LINE)
    assert compare(left, right).winner_cost == "tie"


def test_timed_search_returns_the_measured_result(triangle):
    result, m = timed_search("dijkstra", triangle, "A", "C")
    assert result.path == m.path == ["A", "B", "C"]
    assert result.total_cost == m.path_cost
    assert result.visited_count == m.visited_count
