"""
result.py — Authoritative Search Result
=======================================
What Dijkstra / A* hand back.  "No path" is a normal result: empty path,
infinite cost.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class SearchResult:
    """
    Attributes:
        path          : Node ids source → target, or [] when unreachable.
        total_cost    : Sum of edge weights along `path`, or +∞.
        visited_count : Nodes finalised (closed) during the search.
        step_count    : Frontier pops, stale entries included.
        algorithm     : Registry key of the algorithm that produced this.
    """

    path:          List[str] = field(default_factory=list)
    total_cost:    float     = math.inf
    visited_count: int       = 0
    step_count:    int       = 0
    algorithm:     str       = ""

    @property
    def found(self) -> bool:
        return bool(self.path)

    def to_dict(self) -> Dict[str, object]:
        return {
            "algorithm":    self.algorithm,
            "path":         list(self.path),
            "totalCost":    finite_or_none(self.total_cost),
            "visitedCount": self.visited_count,
            "stepCount":    self.step_count,
        }


def finite_or_none(value: float) -> Optional[float]:
    """JSON has no ∞; unreachable costs serialise as null."""
    return value if math.isfinite(value) else None


def reconstruct_path(came_from: Dict[str, str], source: str, target: str) -> List[str]:
    """Walk predecessors back from `target`; [] if the chain misses `source`."""
    path, cur = [target], target
    while cur != source:
        cur = came_from.get(cur)
        if cur is None:
            return []
        path.append(cur)
    path.reverse()
    return path
