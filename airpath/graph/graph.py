"""
graph.py — Weighted Undirected Graph
====================================
Single source of truth for the network structure.  Search algorithms and
the trace recorder only ever read from it.

Responsibilities:
  1. Node / edge insertion                  (add_node / add_edge)
  2. Adjacency queries                      (neighbors, edge_weight, …)
  3. Small reporting helpers                (node_count, path_cost)

Design decisions:
  - Node ids are plain strings.  Positions, names and route attributes
    live with the caller (see network.py), not here.
  - `_adj[node_id] → {neighbour_id: weight}` — a dict per node, so an
    edge lookup is O(1) and re-inserting an edge updates it in place.
    Dicts keep insertion order, which is what makes neighbour iteration
    (and therefore tie-breaking in the searches) deterministic.
  - Weights are validated BEFORE anything is touched, so a rejected
    add_edge leaves the graph exactly as it was.
  - No locking.  Readers must not race with writers; callers serialise
    mutation themselves.
"""

import math
from numbers import Real
from typing import Dict, List, NamedTuple, Optional, Sequence

from airpath.graph.errors import InvalidArgument, InvalidWeight


# returned by edge_weight() when the pair is not connected
NO_EDGE = None


class Neighbor(NamedTuple):
    node:   str
    weight: float


class Graph:
    """
    Attributes:
        _adj : {node_id: {neighbour_id: weight}}
    """

    def __init__(self):
        self._adj: Dict[str, Dict[str, float]] = {}

    # ==================================================================
    # NODES
    # ==================================================================
    def add_node(self, node_id: str) -> None:
        """Insert `node_id`.  No-op if it already exists."""
        _check_node_id(node_id)
        self._adj.setdefault(node_id, {})

    def has_node(self, node_id: str) -> bool:
        return node_id in self._adj

    def nodes(self) -> List[str]:
        """All node ids in insertion order."""
        return list(self._adj.keys())

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_edge(self, u: str, v: str, weight: float) -> None:
        """
        Insert (or update) the undirected edge u ↔ v.

        Both endpoints are created if missing.  A self loop (u == v) is
        stored like any other edge; it never shortens a path.  Raises
        InvalidWeight for a negative or non-finite weight and InvalidArgument
        for bad ids; in both cases the graph is unchanged.
        """
        _check_node_id(u)
        _check_node_id(v)
        w = _check_weight(weight)

        self._adj.setdefault(u, {})[v] = w
        self._adj.setdefault(v, {})[u] = w

    def has_edge(self, u: str, v: str) -> bool:
        return v in self._adj.get(u, {})

    def edge_weight(self, u: str, v: str) -> Optional[float]:
        """Weight of u ↔ v, or NO_EDGE.  Searches treat NO_EDGE as ∞."""
        return self._adj.get(u, {}).get(v, NO_EDGE)

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbors(self, node_id: str) -> List[Neighbor]:
        """[(neighbour, weight)] for `node_id`; empty for unknown nodes."""
        return [Neighbor(n, w) for n, w in self._adj.get(node_id, {}).items()]

    def degree(self, node_id: str) -> int:
        return len(self._adj.get(node_id, {}))

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        # a self loop has one adjacency entry, every other edge has two
        loops = sum(1 for n, nbrs in self._adj.items() if n in nbrs)
        return (sum(len(nbrs) for nbrs in self._adj.values()) + loops) // 2

    def path_cost(self, path: Sequence[str]) -> float:
        """Sum of edge weights along `path`; ∞ if any hop is missing."""
        total = 0.0
        for a, b in zip(path, path[1:]):
            w = self.edge_weight(a, b)
            if w is NO_EDGE:
                return math.inf
            total += w
        return total

    def __contains__(self, node_id) -> bool:
        return node_id in self._adj

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------
def _check_node_id(node_id) -> None:
    if not isinstance(node_id, str) or not node_id:
        raise InvalidArgument(f"Node id must be a non-empty string, got {node_id!r}")


def _check_weight(weight) -> float:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidWeight(f"Edge weight must be a number, got {weight!r}")
    w = float(weight)
    if not math.isfinite(w) or w < 0:
        raise InvalidWeight(f"Edge weight must be finite and >= 0, got {weight!r}")
    return w
