"""
Route results and planner errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from route_planner.config import DISTANCE_UNITS


class PlannerError(ValueError):
    """A user action was rejected; the message is suitable for display."""


@dataclass
class RouteResult:
    """
    Complete record of a route query.

    Attributes:
        source: Starting city
        target: Destination city
        path: Cities from source to target, inclusive
        distance: Total road length (dijkstra) or number of roads (bfs)
        algorithm: Algorithm that produced the route
        timestamp: When the route was computed
    """

    source: str
    target: str
    path: list[str]
    distance: float
    algorithm: str
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def units(self) -> str:
        """Label for distance ("units" or "hops")."""
        return DISTANCE_UNITS.get(self.algorithm, "units")

    @property
    def hops(self) -> int:
        """Number of roads travelled."""
        return len(self.path) - 1

    def uses_city(self, name: str) -> bool:
        return name in self.path

    def describe(self) -> str:
        """One-line summary, e.g. 'A -> B -> C (15 units)'."""
        return f"{' -> '.join(self.path)} ({self.distance:g} {self.units})"
