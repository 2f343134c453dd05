"""
airport.py — Airport Node Record
================================
Identity plus an optional 2-D layout position.  The position is a
schematic grid coordinate (0-100 in the bundled data), not latitude /
longitude; A* uses it for its straight-line heuristic.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from airpath.graph.errors import InvalidArgument


@dataclass
class Airport:
    """
    Attributes:
        id    : Unique identifier (string; numeric ids in JSON are coerced).
        name  : Human-readable name shown on the canvas.
        x, y  : Layout coordinates, or None when the airport has no position.
    """

    id:   str
    name: str             = ""
    x:    Optional[float] = None
    y:    Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise InvalidArgument(f"Airport id must be a non-empty string, got {self.id!r}")
        self.name = self.name or f"Airport {self.id}"

    @property
    def position(self) -> Optional[Tuple[float, float]]:
        if self.x is None or self.y is None:
            return None
        return (self.x, self.y)

    # ------------------------------------------------------------------
    # Serialisation  (graph.json shape)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = {"id": self.id, "name": self.name}
        if self.position is not None:
            data["position"] = {"x": self.x, "y": self.y}
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Airport":
        pos = data.get("position") or {}
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            x=pos.get("x"),
            y=pos.get("y"),
        )
