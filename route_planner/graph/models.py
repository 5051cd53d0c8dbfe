"""
Value types returned by the graph engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Node:
    """
    A city in the road network.

    Attributes:
        id: Unique identifier (the city name)
    """

    id: str


@dataclass(frozen=True)
class Edge:
    """
    One undirected road, reported once regardless of direction.

    Attributes:
        source: Endpoint visited first when the edge was enumerated
        target: The other endpoint
        weight: Road length (1 in unweighted mode)
    """

    source: str
    target: str
    weight: float = 1

    @property
    def key(self) -> tuple[str, str]:
        """Canonical endpoint pair, identical for (a, b) and (b, a)."""
        return canonical_key(self.source, self.target)


@dataclass
class PathResult:
    """
    Outcome of a shortest-path query.

    Attributes:
        path: Node ids from start to end, inclusive
        distance: Summed weight (dijkstra) or hop count (bfs)
    """

    path: list[str] = field(default_factory=list)
    distance: float = 0

    @property
    def hops(self) -> int:
        """Number of edges on the path."""
        return max(len(self.path) - 1, 0)


def canonical_key(a: str, b: str) -> tuple[str, str]:
    """Sorted endpoint pair used to de-duplicate undirected edges."""
    return (a, b) if a <= b else (b, a)
