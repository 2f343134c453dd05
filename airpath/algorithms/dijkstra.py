"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
================================================
Uniform-cost search over a PriorityFrontier keyed by g (cost so far).

  1. Seed the frontier with (source, 0)
  2. Pop minimum-cost node → closed (its cost is now final)
  3. Target popped → reconstruct path, done
  4. Relax every open neighbour: better g → update, (re)queue
  5. Frontier empty → unreachable (empty path, cost ∞)

Ties pop in insertion order, so identical graphs give identical paths.

Correctness note: Dijkstra requires non-negative weights.  Graph.add_edge
refuses anything else, so no check is needed here.
"""

import logging
import math
from typing import Dict, List

from airpath.graph import Graph, InvalidArgument
from airpath.algorithms.frontier import PriorityFrontier
from airpath.algorithms.result import SearchResult, reconstruct_path

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source, target):",        # 0
    "    g ← {v: ∞ for v in V}",                   # 1
    "    g[source] ← 0",                           # 2
    "    frontier ← [(0, source)]",                # 3
    "    came_from ← {}",                          # 4
    "    while frontier is not empty:",            # 5
    "        node ← frontier.pop_min()",           # 6
    "        closed.add(node)",                    # 7
    "        if node == target: return path",      # 8
    "        for (nbr, w) in adj(node):",          # 9
    "            new_g ← g[node] + w",             # 10
    "            if new_g < g[nbr]:",              # 11
    "                g[nbr] ← new_g",              # 12
    "                came_from[nbr] ← node",       # 13
    "                frontier.push(nbr, new_g)",   # 14
    "    return NOT FOUND",                        # 15
]


def dijkstra(graph: Graph, source: str, target: str) -> SearchResult:
    check_endpoints(graph, source, target)
    log.debug("Dijkstra %s → %s on %r", source, target, graph)

    g_score: Dict[str, float] = {source: 0.0}
    came_from: Dict[str, str] = {}
    closed: set = set()
    frontier = PriorityFrontier()
    frontier.push(source, 0.0)
    steps = 0

    while frontier:
        node, _ = frontier.pop()
        steps += 1
        closed.add(node)

        if node == target:
            path = reconstruct_path(came_from, source, target)
            log.debug("Dijkstra reached %s: cost=%s visited=%d", target, g_score[target], len(closed))
            return SearchResult(
                path=path,
                total_cost=g_score[target],
                visited_count=len(closed),
                step_count=steps,
                algorithm="dijkstra",
            )

        for nbr, weight in graph.neighbors(node):
            if nbr in closed:
                continue
            new_g = g_score[node] + weight
            if new_g < g_score.get(nbr, math.inf):
                g_score[nbr]   = new_g
                came_from[nbr] = node
                frontier.push(nbr, new_g)

    log.debug("Dijkstra: %s unreachable from %s (visited=%d)", target, source, len(closed))
    return SearchResult(
        path=[],
        total_cost=math.inf,
        visited_count=len(closed),
        step_count=steps,
        algorithm="dijkstra",
    )


def check_endpoints(graph: Graph, source: str, target: str) -> None:
    """Both endpoints must already be in the graph."""
    for label, node_id in (("source", source), ("target", target)):
        if not isinstance(node_id, str) or not node_id:
            raise InvalidArgument(f"{label} must be a non-empty node id, got {node_id!r}")
        if not graph.has_node(node_id):
            raise InvalidArgument(f"{label} {node_id!r} is not in the graph")
