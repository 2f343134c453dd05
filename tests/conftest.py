import pytest

from airpath.graph import Airport, AirportNetwork, Graph, Route


@pytest.fixture
def triangle():
    """A-B 5, B-C 5, A-C 20."""
    g = Graph()
    for n in ("A", "B", "C"):
        g.add_node(n)
    g.add_edge("A", "B", 5)
    g.add_edge("B", "C", 5)
    g.add_edge("A", "C", 20)
    return g


@pytest.fixture
def chain():
    """A-B 5, B-C 5, no A-C."""
    g = Graph()
    g.add_edge("A", "B", 5)
    g.add_edge("B", "C", 5)
    return g


@pytest.fixture
def small_network():
    airports = [
        Airport("A", x=0, y=0),
        Airport("B", x=10, y=0),
        Airport("C", x=20, y=0),
        Airport("D", x=10, y=10),
    ]
    routes = [
        Route("A", "B", distance_km=800, frequency_per_day=1),
        Route("B", "C", distance_km=800, frequency_per_day=1),
        Route("A", "D", distance_km=1600, frequency_per_day=1),
        Route("D", "C", distance_km=1600, frequency_per_day=1),
    ]
    return AirportNetwork(airports, routes)
