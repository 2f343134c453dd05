"""
metrics.py — Run Metrics & Comparison
=====================================
Times an authoritative search and packages the numbers the analytics
panel shows.  Comparison mode runs two algorithms on the SAME graph and
endpoints, then calls compare(left, right).

Usage:
    left  = measure("dijkstra", g, "JFK", "DFW")
    right = measure("astar",    g, "JFK", "DFW", positions)
    compare(left, right).winner_visited      # "A* Search" / … / "tie"
"""

import time
from dataclasses import dataclass, field, asdict
from typing import List, Mapping, Optional, Tuple

from airpath.graph import Graph
from airpath.algorithms import SearchResult, require_algorithm, search
from airpath.algorithms.astar import Position
from airpath.algorithms.result import finite_or_none


@dataclass
class RunMetrics:
    algorithm:     str         = ""
    label:         str         = ""
    source:        str         = ""
    target:        str         = ""
    path:          List[str]   = field(default_factory=list)
    path_cost:     float       = float("inf")
    path_found:    bool        = False
    visited_count: int         = 0
    step_count:    int         = 0
    node_count:    int         = 0     # graph size, for complexity reporting
    edge_count:    int         = 0
    wall_time_ms:  float       = 0.0

    def to_dict(self) -> dict:
        data = asdict(self)
        data["path_cost"] = finite_or_none(self.path_cost)
        return data


@dataclass
class ComparisonResult:
    left:            RunMetrics = field(default_factory=RunMetrics)
    right:           RunMetrics = field(default_factory=RunMetrics)
    winner_visited:  str = ""   # which algo closed fewer nodes
    winner_steps:    str = ""
    winner_cost:     str = ""   # which algo found the cheaper path
    winner_time:     str = ""


def timed_search(
    algorithm: str,
    graph: Graph,
    source: str,
    target: str,
    positions: Optional[Mapping[str, Position]] = None,
    heuristic: str = "euclidean",
) -> Tuple[SearchResult, RunMetrics]:
    """Run `search()` once; return its result together with the timing."""
    info = require_algorithm(algorithm)
    start = time.perf_counter()
    result = search(graph, source, target, algorithm=algorithm,
                    positions=positions, heuristic=heuristic)
    wall_ms = (time.perf_counter() - start) * 1000

    metrics = RunMetrics(
        algorithm=info.key,
        label=info.label,
        source=source,
        target=target,
        path=list(result.path),
        path_cost=result.total_cost,
        path_found=result.found,
        visited_count=result.visited_count,
        step_count=result.step_count,
        node_count=graph.node_count(),
        edge_count=graph.edge_count(),
        wall_time_ms=round(wall_ms, 3),
    )
    return result, metrics


def measure(
    algorithm: str,
    graph: Graph,
    source: str,
    target: str,
    positions: Optional[Mapping[str, Position]] = None,
    heuristic: str = "euclidean",
) -> RunMetrics:
    return timed_search(algorithm, graph, source, target, positions, heuristic)[1]


def compare(left: RunMetrics, right: RunMetrics) -> ComparisonResult:
    """Given two RunMetrics, pick a winner per metric (lower is better)."""

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return left.label if l_val < r_val else right.label

    return ComparisonResult(
        left=left,
        right=right,
        winner_visited=winner(left.visited_count, right.visited_count),
        winner_steps=winner(left.step_count, right.step_count),
        winner_cost=winner(left.path_cost, right.path_cost),
        winner_time=winner(left.wall_time_ms, right.wall_time_ms),
    )
