"""
astar.py — A* Search
====================
Same control structure as Dijkstra, but the frontier is ordered by
f = g + h, where h is a straight-line estimate to the target computed from
caller-supplied 2-D layout positions.

Built-in heuristics (take two (x, y) points, return float):
  • euclidean   – √(Δx² + Δy²)       (default)
  • zero        – h = 0 → A* degrades to Dijkstra

A node with no position gets h = 0 for that node only; the search never
fails because of missing layout data.

PRECONDITION: the heuristic must be admissible, i.e. never larger than
the true remaining cost.  Positions are in layout units and weights come
from the policy, so it is the caller's job to keep their scales
compatible.  Nothing here checks it.  A closed node is reopened if a
cheaper route to it turns up later, so an admissible heuristic that is not
consistent still yields the optimal cost.
"""

import logging
import math
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from airpath.graph import Graph, InvalidArgument
from airpath.algorithms.dijkstra import check_endpoints
from airpath.algorithms.frontier import PriorityFrontier
from airpath.algorithms.result import SearchResult, reconstruct_path

log = logging.getLogger(__name__)

Position = Tuple[float, float]


# ---------------------------------------------------------------------------
# Built-in heuristics
# ---------------------------------------------------------------------------
def euclidean(a: Position, b: Position) -> float:
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2)

def zero(a: Position, b: Position) -> float:
    """h=0 → A* degrades to Dijkstra."""
    return 0.0

HEURISTICS: Dict[str, Callable[[Position, Position], float]] = {
    "euclidean": euclidean,
    "zero":      zero,
}


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def AStar(graph, source, target, h):",        # 0
    "    g[source] ← 0",                           # 1
    "    f[source] ← h(source)",                   # 2
    "    open ← [(f[source], source)]",            # 3
    "    came_from ← {}",                          # 4
    "    while open:",                             # 5
    "        node ← open.pop_min()",               # 6
    "        if node == target: return path",      # 7
    "        closed.add(node)",                    # 8
    "        for (nbr, w) in adj(node):",          # 9
    "            tentative_g ← g[node] + w",       # 10
    "            if tentative_g < g[nbr]:",        # 11
    "                came_from[nbr] ← node",       # 12
    "                g[nbr] ← tentative_g",        # 13
    "                f[nbr] ← g[nbr] + h(nbr)",    # 14
    "                open.push(nbr, f[nbr])",      # 15
    "    return NOT FOUND",                        # 16
]


def heuristic_table(
    nodes,
    target: str,
    positions: Optional[Mapping[str, Position]],
    heuristic: str = "euclidean",
) -> Dict[str, float]:
    """h for every node in `nodes`, computed once for a fixed target."""
    h_fn = get_heuristic(heuristic)
    positions = positions or {}
    goal = positions.get(target)
    table = {}
    for n in nodes:
        pos = positions.get(n)
        table[n] = h_fn(pos, goal) if pos is not None and goal is not None else 0.0
    return table


def get_heuristic(name: str) -> Callable[[Position, Position], float]:
    h_fn = HEURISTICS.get(name)
    if h_fn is None:
        raise InvalidArgument(f"Unknown heuristic {name!r}; choose from {sorted(HEURISTICS)}")
    return h_fn


def astar(
    graph: Graph,
    source: str,
    target: str,
    positions: Optional[Mapping[str, Position]] = None,
    heuristic: str = "euclidean",
) -> SearchResult:
    """
    Args:
        graph     : The graph.
        source    : Start node id.
        target    : Goal node id.
        positions : {node_id: (x, y)} layout coordinates; may be partial.
        heuristic : Key into HEURISTICS.
    """
    check_endpoints(graph, source, target)
    h = heuristic_table(graph.nodes(), target, positions, heuristic)
    log.debug("A* %s → %s on %r (heuristic=%s)", source, target, graph, heuristic)

    g_score: Dict[str, float] = {source: 0.0}
    came_from: Dict[str, str] = {}
    closed: set = set()
    frontier = PriorityFrontier()
    frontier.push(source, h[source])
    steps = 0

    while frontier:
        node, _ = frontier.pop()
        steps += 1

        if node == target:
            closed.add(node)
            path = reconstruct_path(came_from, source, target)
            log.debug("A* reached %s: cost=%s visited=%d", target, g_score[target], len(closed))
            return SearchResult(
                path=path,
                total_cost=g_score[target],
                visited_count=len(closed),
                step_count=steps,
                algorithm="astar",
            )

        closed.add(node)

        for nbr, weight in graph.neighbors(node):
            tentative_g = g_score[node] + weight
            if tentative_g < g_score.get(nbr, math.inf):
                came_from[nbr] = node
                g_score[nbr]   = tentative_g
                closed.discard(nbr)                 # reopen
                frontier.push(nbr, tentative_g + h[nbr])

    log.debug("A*: %s unreachable from %s (visited=%d)", target, source, len(closed))
    return SearchResult(
        path=[],
        total_cost=math.inf,
        visited_count=len(closed),
        step_count=steps,
        algorithm="astar",
    )
