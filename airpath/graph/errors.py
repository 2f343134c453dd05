"""
errors.py — Graph Error Types
=============================
Every failure the engine reports is raised synchronously at the call that
caused it.  "No path" and "trace truncated" are NOT errors; they are
ordinary results (empty path / `Trace.truncated`).
"""


class GraphError(Exception):
    """Base class for everything the engine raises."""

    kind = "graph_error"


class InvalidArgument(GraphError, ValueError):
    """Missing / empty node id, or an endpoint that is not in the graph."""

    kind = "invalid_argument"


class InvalidWeight(GraphError, ValueError):
    """Negative, NaN, infinite or non-numeric edge weight."""

    kind = "invalid_weight"
