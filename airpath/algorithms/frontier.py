"""
frontier.py — Priority Frontier
===============================
Min-priority open set shared by Dijkstra, A* and the trace recorder.

Backed by heapq with lazy deletion:
  - every push gets a monotonically increasing sequence number, so equal
    priorities pop in insertion order (deterministic tie-break);
  - pushing a node that is already queued with a WORSE priority retires
    the old entry and queues a new one (decrease-key);
  - pushing with an equal or worse priority is a no-op.

Each node appears in the frontier at most once from the caller's point of
view, even though the heap may hold retired entries for it.
"""

import heapq
import itertools
from typing import Dict, List, Tuple


_REMOVED = object()     # placeholder for a retired entry's node


class PriorityFrontier:

    def __init__(self):
        self._heap: List[list] = []                 # [priority, seq, node]
        self._entries: Dict[str, list] = {}         # node → live heap entry
        self._counter = itertools.count()

    def push(self, node: str, priority: float) -> bool:
        """Queue `node` (or lower its priority).  True if the frontier changed."""
        entry = self._entries.get(node)
        if entry is not None:
            if priority >= entry[0]:
                return False
            entry[-1] = _REMOVED
        new_entry = [priority, next(self._counter), node]
        self._entries[node] = new_entry
        heapq.heappush(self._heap, new_entry)
        return True

    def pop(self) -> Tuple[str, float]:
        """Remove and return (node, priority) with the lowest priority."""
        while self._heap:
            priority, _, node = heapq.heappop(self._heap)
            if node is not _REMOVED:
                del self._entries[node]
                return node, priority
        raise IndexError("pop from an empty frontier")

    def discard(self, node: str) -> None:
        entry = self._entries.pop(node, None)
        if entry is not None:
            entry[-1] = _REMOVED

    def priority(self, node: str) -> float:
        return self._entries[node][0]

    def items(self) -> List[Tuple[str, float]]:
        """Live (node, priority) pairs in pop order.  Does not mutate."""
        live = sorted(e for e in self._heap if e[-1] is not _REMOVED)
        return [(node, priority) for priority, _, node in live]

    def nodes(self) -> List[str]:
        return [node for node, _ in self.items()]

    def __contains__(self, node) -> bool:
        return node in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"PriorityFrontier({self.items()})"
