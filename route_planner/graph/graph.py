"""
Undirected weighted graph of cities and roads.

Usage:
    from route_planner.graph import Graph

    graph = Graph()
    graph.add_edge("Hyderabad", "Warangal", 150)
    graph.dijkstra("Hyderabad", "Warangal")

Every road is stored in both endpoints' neighbor maps with the same weight.
All mutations act in place; call snapshot() first when the previous state
must stay untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from route_planner.config import DEFAULT_EDGE_WEIGHT
from route_planner.graph import paths
from route_planner.graph.models import Edge, Node, PathResult, canonical_key

logger = logging.getLogger(__name__)


class Graph:
    """
    In-memory road network.

    Nodes are plain string ids kept in insertion order. The adjacency
    structure maps each node id to a {neighbor_id: weight} dict and is kept
    symmetric by every mutation.

    Weights are not validated: negative or non-finite weights and self-loops
    are accepted as given, and shortest-path results over them are undefined.
    """

    def __init__(self, graph: Graph | None = None) -> None:
        """
        Create an empty graph, or an independent copy of another one.

        Args:
            graph: Graph to copy. The copy shares no mutable state with it.
        """
        self._adjacency: dict[str, dict[str, float]] = {}
        if graph is not None:
            for node_id, neighbors in graph._adjacency.items():
                self._adjacency[node_id] = dict(neighbors)

    def snapshot(self) -> Graph:
        """Return an independent deep copy of this graph."""
        return Graph(self)

    # =========================================================================
    # Mutations
    # =========================================================================

    def add_node(self, node_id: str) -> None:
        """Insert a node; no-op if it already exists."""
        if node_id not in self._adjacency:
            self._adjacency[node_id] = {}
            logger.debug(f"Added node '{node_id}'")

    def remove_node(self, node_id: str) -> None:
        """Remove a node and every road touching it; no-op if absent."""
        neighbors = self._adjacency.pop(node_id, None)
        if neighbors is None:
            return

        for neighbor_id in neighbors:
            # A self-loop's entry left with the popped map
            if neighbor_id != node_id:
                self._adjacency[neighbor_id].pop(node_id, None)
        logger.debug(f"Removed node '{node_id}' and {len(neighbors)} edge(s)")

    def add_edge(
        self,
        source: str,
        target: str,
        weight: float = DEFAULT_EDGE_WEIGHT,
    ) -> None:
        """
        Connect two nodes, creating either endpoint if missing.

        Re-adding an existing pair replaces its weight rather than adding a
        parallel edge.
        """
        self.add_node(source)
        self.add_node(target)

        self._adjacency[source][target] = weight
        self._adjacency[target][source] = weight
        logger.debug(f"Set edge '{source}' <-> '{target}' = {weight}")

    def remove_edge(self, source: str, target: str) -> None:
        """Delete the road between two nodes; no-op if there is none."""
        if source in self._adjacency:
            self._adjacency[source].pop(target, None)
        if target in self._adjacency:
            self._adjacency[target].pop(source, None)

    # =========================================================================
    # Queries
    # =========================================================================

    def has_node(self, node_id: str) -> bool:
        return node_id in self._adjacency

    def get_nodes(self) -> list[Node]:
        """All nodes in insertion order."""
        return [Node(node_id) for node_id in self._adjacency]

    def get_edges(self) -> list[Edge]:
        """
        Enumerate every undirected edge exactly once.

        The first visit of a pair decides which endpoint is reported as
        source; the reverse entry is skipped by its canonical key.
        """
        edges: list[Edge] = []
        seen: set[tuple[str, str]] = set()

        for source, targets in self._adjacency.items():
            for target, weight in targets.items():
                key = canonical_key(source, target)
                if key not in seen:
                    seen.add(key)
                    edges.append(Edge(source, target, weight))

        return edges

    def get_neighbors(self, node_id: str) -> Mapping[str, float] | None:
        """
        Read-only {neighbor_id: weight} view, or None if node_id is unknown.
        """
        neighbors = self._adjacency.get(node_id)
        if neighbors is None:
            return None
        return MappingProxyType(neighbors)

    # =========================================================================
    # Shortest Paths
    # =========================================================================

    def dijkstra(self, start: str, end: str) -> PathResult:
        """Shortest path by summed edge weight. See paths.dijkstra."""
        return paths.dijkstra(self, start, end)

    def bfs(self, start: str, end: str) -> PathResult:
        """Shortest path by hop count. See paths.bfs."""
        return paths.bfs(self, start, end)

    # =========================================================================
    # Container Protocol
    # =========================================================================

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adjacency == other._adjacency

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={len(self.get_edges())})"
