"""
airpath.graph
-------------
Core data layer.  Public API:

    from airpath.graph import Graph, Neighbor, NO_EDGE
    from airpath.graph import Airport, Route, AirportNetwork
    from airpath.graph import WeightPolicy, edge_weight
    from airpath.graph import GraphError, InvalidArgument, InvalidWeight
"""

from airpath.graph.errors  import GraphError, InvalidArgument, InvalidWeight
from airpath.graph.graph   import Graph, Neighbor, NO_EDGE
from airpath.graph.airport import Airport
from airpath.graph.route   import Route
from airpath.graph.weights import WeightPolicy, WeightBreakdown, DEFAULT_POLICY, edge_weight
from airpath.graph.network import AirportNetwork

__all__ = [
    "GraphError",   "InvalidArgument", "InvalidWeight",
    "Graph",        "Neighbor",        "NO_EDGE",
    "Airport",      "Route",           "AirportNetwork",
    "WeightPolicy", "WeightBreakdown", "DEFAULT_POLICY", "edge_weight",
]
