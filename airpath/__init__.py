"""
airpath — Airport shortest-path engine with replayable exploration traces.

    from airpath import Graph, edge_weight, search, trace

    g = Graph()
    g.add_edge("JFK", "ORD", edge_weight(1190, delay_minutes=0, frequency_per_day=4))
    result = search(g, "JFK", "ORD")                  # authoritative answer
    steps  = trace(g, "JFK", "ORD", positions=pos)    # presentation trace
"""

from airpath.graph import (
    Graph, AirportNetwork, Airport, Route,
    WeightPolicy, edge_weight,
    GraphError, InvalidArgument, InvalidWeight,
)
from airpath.algorithms import search, SearchResult
from airpath.engine import trace, Trace, Snapshot

__version__ = "0.1.0"

__all__ = [
    "Graph", "AirportNetwork", "Airport", "Route",
    "WeightPolicy", "edge_weight",
    "GraphError", "InvalidArgument", "InvalidWeight",
    "search", "SearchResult",
    "trace", "Trace", "Snapshot",
]
