"""
airpath/algorithms — Algorithm Registry
=======================================
Single source of truth for the search algorithms the engine knows about.

    from airpath.algorithms import REGISTRY, get_algorithm, search

AlgoInfo is a lightweight dataclass.  The trace recorder, the metrics
helper and the HTTP layer all consume it, so `search()` is the one entry
point callers need for an authoritative answer.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional

from airpath.graph import Graph, InvalidArgument
from airpath.algorithms.dijkstra import dijkstra as _dijkstra, PSEUDOCODE as _dij_pc
from airpath.algorithms.astar    import astar    as _astar,    PSEUDOCODE as _ast_pc, Position
from airpath.algorithms.frontier import PriorityFrontier
from airpath.algorithms.result   import SearchResult


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "dijkstra"
    label:            str                    # human label, e.g. "Dijkstra's Algorithm"
    fn:               Callable[..., SearchResult]
    pseudocode:       List[str]
    tags:             List[str] = field(default_factory=list)
    has_heuristic:    bool      = False      # accepts positions / heuristic?
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""

    def to_dict(self) -> dict:
        return {
            "key":             self.key,
            "label":           self.label,
            "tags":            list(self.tags),
            "hasHeuristic":    self.has_heuristic,
            "complexityTime":  self.complexity_time,
            "complexitySpace": self.complexity_space,
            "description":     self.description,
            "pseudocode":      list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=_dij_pc,
        tags=["weighted", "shortest-path"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily expands the cheapest node. Optimal for non-negative weights.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A* Search", fn=_astar, pseudocode=_ast_pc,
        tags=["weighted", "shortest-path", "heuristic"],
        has_heuristic=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Dijkstra + straight-line guidance. Optimal when h is admissible.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def require_algorithm(key: str) -> AlgoInfo:
    info = get_algorithm(key)
    if info is None:
        raise InvalidArgument(f"Unknown algorithm {key!r}; choose from {sorted(REGISTRY)}")
    return info


def search(
    graph: Graph,
    source: str,
    target: str,
    algorithm: str = "dijkstra",
    positions: Optional[Mapping[str, Position]] = None,
    heuristic: str = "euclidean",
) -> SearchResult:
    """Authoritative shortest path.  `positions` is ignored by Dijkstra."""
    info = require_algorithm(algorithm)
    if info.has_heuristic:
        return info.fn(graph, source, target, positions=positions, heuristic=heuristic)
    return info.fn(graph, source, target)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "PriorityFrontier",
    "SearchResult",
    "get_algorithm",
    "list_algorithms",
    "require_algorithm",
    "search",
]
