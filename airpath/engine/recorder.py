"""
recorder.py — Step-Trace Recorder
=================================
Re-runs Dijkstra or A* in instrumented form and records a Snapshot per
step, for a renderer to replay.  The authoritative answer still comes from
`airpath.algorithms.search`; a trace is a presentation artefact.

Usage:
    rec = TraceRecorder(step_cap=15, expansion_limit=3)
    tr  = rec.record(graph, "JFK", "DFW", positions, algorithm="astar")
    for snap in tr: ...                  # replay = re-read from index 0
    tr.truncated                         # cap hit before the target?

How a trace is built:
  - Step 0 shows only the source: frontier {source}, g(source)=0, every
    other g = ∞.  For A*, h is computed once for every node up front.
  - Every later step pops the best frontier node, closes it and relaxes
    its neighbours FIRST, then takes the snapshot, so nodes discovered in
    a step already sit in that step's frontier.
  - Popping the target records one last snapshot and stops.

Two presentation throttles, neither of which touches the real search:
  - step_cap        : at most this many snapshots.  Hitting it before the
                      target is closed sets `Trace.truncated`; consult the
                      authoritative search for the real answer.
  - expansion_limit : at most this many successful relaxations per step.
                      Because of it `Trace.path` can be longer or costlier
                      than the true shortest path, and a skipped relaxation
                      can strand the target.  `Trace.throttled` records that
                      work was skipped; a run that then ends short of the
                      target is `truncated`, never reported as "no path".

A Trace is a fixed tuple of snapshots.  It cannot be resumed; recording
again always starts from scratch.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from airpath import config
from airpath.graph import Graph, InvalidArgument
from airpath.algorithms import require_algorithm
from airpath.algorithms.astar import Position, heuristic_table
from airpath.algorithms.dijkstra import check_endpoints
from airpath.algorithms.frontier import PriorityFrontier
from airpath.algorithms.result import reconstruct_path
from airpath.engine.snapshot import Snapshot, SnapshotBuilder

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Trace — the recorded sequence
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Trace:
    """
    Attributes:
        algorithm       : Registry key the trace simulates.
        source, target  : Endpoints.
        snapshots       : Every recorded step, index == step_index.
        truncated       : True if the run ended short of the target because the
                          step cap or the expansion limit dropped work.
        throttled       : True if expansion_limit skipped a relaxation anywhere.
        reached         : True if the target was popped (or source == target).
        path            : Path found by the traced run, () if not reached.
        step_cap        : Cap used for this recording.
        expansion_limit : Per-step relaxation limit used for this recording.
    """

    algorithm:       str
    source:          str
    target:          str
    snapshots:       Tuple[Snapshot, ...]
    truncated:       bool
    throttled:       bool
    reached:         bool
    path:            Tuple[str, ...]
    step_cap:        int
    expansion_limit: int

    @property
    def final(self) -> Snapshot:
        return self.snapshots[-1]

    def __len__(self) -> int:
        return len(self.snapshots)

    def __getitem__(self, idx):
        return self.snapshots[idx]

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self.snapshots)

    def to_dict(self) -> dict:
        return {
            "algorithm":      self.algorithm,
            "source":         self.source,
            "target":         self.target,
            "truncated":      self.truncated,
            "throttled":      self.throttled,
            "reached":        self.reached,
            "path":           list(self.path),
            "stepCap":        self.step_cap,
            "expansionLimit": self.expansion_limit,
            "steps":          [s.to_dict() for s in self.snapshots],
        }


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class TraceRecorder:
    """
    Attributes:
        step_cap        : Max snapshots per trace (>= 1).
        expansion_limit : Max successful relaxations per step (>= 1).
        heuristic       : A* heuristic key.
    """

    def __init__(
        self,
        step_cap: Optional[int] = None,
        expansion_limit: Optional[int] = None,
        heuristic: str = "euclidean",
    ):
        self.step_cap = config.TRACE_STEP_CAP if step_cap is None else step_cap
        self.expansion_limit = (
            config.TRACE_EXPANSION_LIMIT if expansion_limit is None else expansion_limit
        )
        self.heuristic = heuristic
        if not isinstance(self.step_cap, int) or self.step_cap < 1:
            raise InvalidArgument(f"step_cap must be a positive integer, got {self.step_cap!r}")
        if not isinstance(self.expansion_limit, int) or self.expansion_limit < 1:
            raise InvalidArgument(
                f"expansion_limit must be a positive integer, got {self.expansion_limit!r}"
            )

    def record(
        self,
        graph: Graph,
        source: str,
        target: str,
        positions: Optional[Mapping[str, Position]] = None,
        algorithm: str = "astar",
    ) -> Trace:
        """Run the instrumented search and return the full Trace."""
        info = require_algorithm(algorithm)
        check_endpoints(graph, source, target)

        nodes = graph.nodes()
        h: Optional[Dict[str, float]] = None
        if info.has_heuristic:
            h = heuristic_table(nodes, target, positions, self.heuristic)

        g_score: Dict[str, float] = {n: math.inf for n in nodes}
        g_score[source] = 0.0
        came_from: Dict[str, str] = {}
        visited: List[str] = []
        closed: set = set()
        frontier = PriorityFrontier()
        frontier.push(source, h[source] if h is not None else 0.0)

        sb = SnapshotBuilder(h)
        snapshots = [sb.build(source, visited, frontier, g_score)]
        current = source
        capped = False
        throttled = False

        while frontier and current != target:
            if len(snapshots) >= self.step_cap:
                capped = True
                break

            current, _ = frontier.pop()
            visited.append(current)
            closed.add(current)

            if current != target:
                if self._expand(graph, current, closed, frontier, g_score, came_from, h):
                    throttled = True

            snapshots.append(sb.build(current, visited, frontier, g_score))

        reached = current == target
        # an empty frontier only means "no path" if nothing was dropped
        truncated = not reached and (capped or throttled)
        path = tuple(reconstruct_path(came_from, source, target)) if reached else ()

        if truncated:
            log.info(
                "Trace %s %s → %s truncated after %d steps (visited %d of %d nodes, capped=%s)",
                info.key, source, target, len(snapshots), len(visited), len(nodes), capped,
            )
        else:
            log.debug("Trace %s %s → %s: %d steps, reached=%s",
                      info.key, source, target, len(snapshots), reached)

        return Trace(
            algorithm=info.key,
            source=source,
            target=target,
            snapshots=tuple(snapshots),
            truncated=truncated,
            throttled=throttled,
            reached=reached,
            path=path,
            step_cap=self.step_cap,
            expansion_limit=self.expansion_limit,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _expand(
        self,
        graph: Graph,
        node: str,
        closed: set,
        frontier: PriorityFrontier,
        g_score: Dict[str, float],
        came_from: Dict[str, str],
        h: Optional[Dict[str, float]],
    ) -> bool:
        """
        Relax open neighbours of `node`, at most expansion_limit of them.
        Returns True if an improving relaxation was skipped because of the limit.
        """
        relaxed = 0
        for nbr, weight in graph.neighbors(node):
            if nbr in closed:
                continue
            tentative_g = g_score[node] + weight
            if tentative_g >= g_score[nbr]:
                continue
            if relaxed >= self.expansion_limit:
                return True
            g_score[nbr]   = tentative_g
            came_from[nbr] = node
            frontier.push(nbr, tentative_g + (h[nbr] if h is not None else 0.0))
            relaxed += 1
        return False


def trace(
    graph: Graph,
    source: str,
    target: str,
    positions: Optional[Mapping[str, Position]] = None,
    algorithm: str = "astar",
    step_cap: Optional[int] = None,
    expansion_limit: Optional[int] = None,
    heuristic: str = "euclidean",
) -> Trace:
    """One-shot convenience wrapper around TraceRecorder.record()."""
    rec = TraceRecorder(step_cap=step_cap, expansion_limit=expansion_limit, heuristic=heuristic)
    return rec.record(graph, source, target, positions=positions, algorithm=algorithm)
