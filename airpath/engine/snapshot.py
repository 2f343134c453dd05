"""
snapshot.py — Trace Step Snapshot
=================================
A Snapshot is a frozen-in-time picture of one step of a traced search:

    • which node is being expanded right now
    • which nodes are closed (visited) and which are waiting (frontier)
    • the g-score of every node, plus h and f for A*

Design decisions:
  - Snapshot is a frozen dataclass; its mappings are read-only proxies
    over private copies, so a consumer cannot alter a recorded step.
  - `visited` keeps visit order and `frontier` keeps pop order, both as
    tuples, because a renderer animates in that order.
  - SnapshotBuilder is the only writer.  The recorder feeds it live
    search state and it copies everything on build().
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from airpath.algorithms.frontier import PriorityFrontier
from airpath.algorithms.result import finite_or_none


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        step_index   : 0-based index of this step in the trace.
        current_node : Node being expanded in this step (the source at step 0).
        visited      : Closed nodes, in the order they were closed.
        frontier     : Open nodes, in the order they would be popped.
        g_scores     : {node_id: best known cost from source} (∞ = undiscovered).
        h_scores     : {node_id: heuristic to target}  (A* only, else None).
        f_scores     : {node_id: g + h}                (A* only, else None).
    """

    step_index:   int
    current_node: str
    visited:      Tuple[str, ...]
    frontier:     Tuple[str, ...]
    g_scores:     Mapping[str, float]
    h_scores:     Optional[Mapping[str, float]] = None
    f_scores:     Optional[Mapping[str, float]] = None

    @property
    def visited_set(self) -> frozenset:
        return frozenset(self.visited)

    @property
    def frontier_set(self) -> frozenset:
        return frozenset(self.frontier)

    def to_dict(self) -> dict:
        return {
            "stepIndex":   self.step_index,
            "currentNode": self.current_node,
            "visited":     list(self.visited),
            "frontier":    list(self.frontier),
            "gScores":     _jsonable(self.g_scores),
            "hScores":     _jsonable(self.h_scores),
            "fScores":     _jsonable(self.f_scores),
        }


def _jsonable(scores: Optional[Mapping[str, float]]) -> Optional[Dict[str, Optional[float]]]:
    if scores is None:
        return None
    return {n: finite_or_none(v) for n, v in scores.items()}


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------
class SnapshotBuilder:
    """
    Turns live search state into Snapshots.

    Usage inside the recorder:
        sb = SnapshotBuilder(h_scores)          # h_scores=None for Dijkstra
        snapshots.append(sb.build(current, visited, frontier, g_score))
    """

    def __init__(self, h_scores: Optional[Mapping[str, float]] = None):
        # h is fixed for the whole run (the target never changes), so one
        # read-only copy is shared by every snapshot
        self._h = MappingProxyType(dict(h_scores)) if h_scores is not None else None
        self._next_index = 0

    def build(
        self,
        current_node: str,
        visited: Iterable[str],
        frontier: PriorityFrontier,
        g_score: Mapping[str, float],
    ) -> Snapshot:
        g = dict(g_score)
        f = None
        if self._h is not None:
            f = MappingProxyType({
                n: (gv + self._h.get(n, 0.0)) if math.isfinite(gv) else math.inf
                for n, gv in g.items()
            })
        snap = Snapshot(
            step_index=self._next_index,
            current_node=current_node,
            visited=tuple(visited),
            frontier=tuple(frontier.nodes()),
            g_scores=MappingProxyType(g),
            h_scores=self._h,
            f_scores=f,
        )
        self._next_index += 1
        return snap
