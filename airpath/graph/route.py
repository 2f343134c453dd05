"""
route.py — Route Attributes
===========================
One flight route between two airports.  Owned by the caller (see
network.py), never by Graph: the graph only ever sees the scalar weight
the policy derives from these attributes.

`distance_km` is fixed when the route is defined; `delay_minutes` and
`frequency_per_day` may change at any time.  After a change the caller
must re-derive the weight and call Graph.add_edge again — nothing is
recomputed automatically.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from airpath.graph.errors import InvalidArgument


MIN_FREQUENCY = 1
MAX_FREQUENCY = 10


@dataclass
class Route:
    """
    Attributes:
        source            : Airport id at one end.
        target            : Airport id at the other end.
        distance_km       : Great-circle-ish distance, >= 0.
        delay_minutes     : Current delay, >= 0.
        frequency_per_day : Flights per day, integer in [1, 10].
    """

    source:            str
    target:            str
    distance_km:       float
    delay_minutes:     float = 0.0
    frequency_per_day: int   = 1

    def __post_init__(self):
        if not self.source or not self.target:
            raise InvalidArgument("Route endpoints must be non-empty")
        validate_distance(self.distance_km)
        validate_delay(self.delay_minutes)
        validate_frequency(self.frequency_per_day)

    @property
    def key(self) -> Tuple[str, str]:
        """Order-independent identity: A-B and B-A are the same route."""
        return route_key(self.source, self.target)

    # ------------------------------------------------------------------
    # Serialisation  (graph.json shape)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "source":    self.source,
            "target":    self.target,
            "distance":  self.distance_km,
            "delay":     self.delay_minutes,
            "frequency": self.frequency_per_day,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Route":
        return cls(
            source=str(data["source"]),
            target=str(data["target"]),
            distance_km=data.get("distance", 0.0),
            delay_minutes=data.get("delay", 0.0),
            frequency_per_day=data.get("frequency", 1),
        )


def route_key(a: str, b: str) -> Tuple[str, str]:
    return (a, b) if a <= b else (b, a)


# ---------------------------------------------------------------------------
# Attribute validation (shared with weights.py)
# ---------------------------------------------------------------------------
def _finite_non_negative(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidArgument(f"{name} must be finite and >= 0, got {value!r}")


def validate_distance(value) -> None:
    _finite_non_negative("distance_km", value)


def validate_delay(value) -> None:
    _finite_non_negative("delay_minutes", value)


def validate_frequency(value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"frequency_per_day must be an integer, got {value!r}")
    if not MIN_FREQUENCY <= value <= MAX_FREQUENCY:
        raise InvalidArgument(
            f"frequency_per_day must be in [{MIN_FREQUENCY}, {MAX_FREQUENCY}], got {value}"
        )
