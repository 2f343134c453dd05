"""
network.py — Airport Network
============================
Caller-side owner of airports and route attributes.  Builds a fresh Graph
on demand, applying the weight policy to every route.

Usage:
    net = AirportNetwork.load("data/graph.json")
    net.set_delay("JFK", "ORD", 45)       # invalidates earlier results
    g = net.build_graph()
    result = search(g, "JFK", "DFW", positions=net.positions())

The network never patches an existing Graph behind the caller's back:
after set_delay / set_frequency / disable the caller rebuilds (or calls
Graph.add_edge with `weight_of(...)` itself).
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple, Union

from airpath.graph.airport import Airport
from airpath.graph.errors import InvalidArgument
from airpath.graph.graph import Graph
from airpath.graph.route import Route, route_key, validate_delay, validate_frequency
from airpath.graph.weights import DEFAULT_POLICY, WeightPolicy

log = logging.getLogger(__name__)


class AirportNetwork:
    """
    Attributes:
        policy    : WeightPolicy used by build_graph() / weight_of().
        _airports : {airport_id: Airport}   (insertion order)
        _routes   : {(a, b) sorted: Route}  (insertion order)
        _disabled : airport ids left out of built graphs
    """

    def __init__(
        self,
        airports: Iterable[Airport] = (),
        routes: Iterable[Route] = (),
        policy: Optional[WeightPolicy] = None,
    ):
        self.policy = policy or DEFAULT_POLICY
        self._airports: Dict[str, Airport] = {}
        self._routes: Dict[Tuple[str, str], Route] = {}
        self._disabled: Set[str] = set()
        for a in airports:
            self.add_airport(a)
        for r in routes:
            self.add_route(r)

    # ==================================================================
    # AIRPORTS
    # ==================================================================
    def add_airport(self, airport: Airport) -> Airport:
        if airport.id in self._airports:
            raise InvalidArgument(f"Airport {airport.id!r} already exists")
        self._airports[airport.id] = airport
        return airport

    def remove_airport(self, airport_id: str) -> None:
        """Drop the airport and every route touching it."""
        self._require_airport(airport_id)
        del self._airports[airport_id]
        self._disabled.discard(airport_id)
        self._routes = {
            k: r for k, r in self._routes.items() if airport_id not in k
        }

    def get_airport(self, airport_id: str) -> Optional[Airport]:
        return self._airports.get(airport_id)

    def airports(self) -> List[Airport]:
        return list(self._airports.values())

    def disable(self, airport_id: str) -> None:
        self._require_airport(airport_id)
        self._disabled.add(airport_id)

    def enable(self, airport_id: str) -> None:
        self._disabled.discard(airport_id)

    def is_enabled(self, airport_id: str) -> bool:
        return airport_id in self._airports and airport_id not in self._disabled

    def positions(self) -> Dict[str, Tuple[float, float]]:
        """{airport_id: (x, y)} for every airport that has a position."""
        return {a.id: a.position for a in self._airports.values() if a.position is not None}

    # ==================================================================
    # ROUTES
    # ==================================================================
    def add_route(self, route: Route) -> Route:
        self._require_airport(route.source)
        self._require_airport(route.target)
        if route.source == route.target:
            raise InvalidArgument(f"Route {route.source!r} → itself is not allowed")
        if route.key in self._routes:
            raise InvalidArgument(
                f"Route already exists between {route.source!r} and {route.target!r}"
            )
        self._routes[route.key] = route
        return route

    def get_route(self, a: str, b: str) -> Optional[Route]:
        return self._routes.get(route_key(a, b))

    def routes(self) -> List[Route]:
        return list(self._routes.values())

    def set_delay(self, a: str, b: str, delay_minutes: float) -> float:
        """Update a route's delay; returns the re-derived weight."""
        route = self._require_route(a, b)
        validate_delay(delay_minutes)
        route.delay_minutes = delay_minutes
        log.debug("Delay %s-%s set to %s min", a, b, delay_minutes)
        return self.weight_of(route)

    def set_frequency(self, a: str, b: str, frequency_per_day: int) -> float:
        """Update a route's daily frequency; returns the re-derived weight."""
        route = self._require_route(a, b)
        validate_frequency(frequency_per_day)
        route.frequency_per_day = frequency_per_day
        log.debug("Frequency %s-%s set to %s/day", a, b, frequency_per_day)
        return self.weight_of(route)

    def weight_of(self, route: Route) -> float:
        return self.policy.weight(route.distance_km, route.delay_minutes, route.frequency_per_day)

    # ==================================================================
    # GRAPH CONSTRUCTION
    # ==================================================================
    def build_graph(self) -> Graph:
        """Fresh Graph over the enabled airports, weights from the policy."""
        g = Graph()
        for airport_id in self._airports:
            if airport_id not in self._disabled:
                g.add_node(airport_id)
        for route in self._routes.values():
            if self.is_enabled(route.source) and self.is_enabled(route.target):
                g.add_edge(route.source, route.target, self.weight_of(route))
        log.debug("Built %r (%d airports disabled)", g, len(self._disabled))
        return g

    def flight_time_minutes(self, path: Sequence[str]) -> float:
        """
        Scheduled time along `path`: per hop, whole flight minutes at the
        policy's cruise speed plus the route's current delay.
        """
        total = 0.0
        for a, b in zip(path, path[1:]):
            route = self._require_route(a, b)
            flight = round(route.distance_km / self.policy.avg_speed_kmh * 60)
            total += flight + route.delay_minutes
        return total

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "airports": [a.to_dict() for a in self._airports.values()],
            "routes":   [r.to_dict() for r in self._routes.values()],
        }

    @classmethod
    def from_dict(cls, data: dict, policy: Optional[WeightPolicy] = None) -> "AirportNetwork":
        try:
            airports = [Airport.from_dict(a) for a in data.get("airports", [])]
            routes = [Route.from_dict(r) for r in data.get("routes", [])]
        except (KeyError, TypeError, AttributeError) as exc:
            raise InvalidArgument(f"Malformed network data: {exc!r}") from exc
        return cls(airports=airports, routes=routes, policy=policy)

    @classmethod
    def load(cls, path: Union[str, Path], policy: Optional[WeightPolicy] = None) -> "AirportNetwork":
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        net = cls.from_dict(data, policy=policy)
        log.info("Loaded %d airports and %d routes from %s",
                 len(net._airports), len(net._routes), path)
        return net

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _require_airport(self, airport_id: str) -> Airport:
        airport = self._airports.get(airport_id)
        if airport is None:
            raise InvalidArgument(f"Unknown airport {airport_id!r}")
        return airport

    def _require_route(self, a: str, b: str) -> Route:
        route = self.get_route(a, b)
        if route is None:
            raise InvalidArgument(f"No route between {a!r} and {b!r}")
        return route

    def __repr__(self) -> str:
        return f"AirportNetwork(airports={len(self._airports)}, routes={len(self._routes)})"
