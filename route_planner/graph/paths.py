"""
Shortest-path algorithms over a Graph.

- dijkstra: minimum summed edge weight (weighted road network)
- bfs: minimum number of roads (unweighted road network)

Both are computed fresh on every call; nothing is cached between queries.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from typing import TYPE_CHECKING, Callable

from route_planner.graph.errors import NodeNotFoundError, NoPathError
from route_planner.graph.models import PathResult

if TYPE_CHECKING:
    from route_planner.graph.graph import Graph

logger = logging.getLogger(__name__)


def _require_nodes(graph: Graph, start: str, end: str) -> None:
    """Raise NodeNotFoundError unless both endpoints are in the graph."""
    for node_id in (start, end):
        if not graph.has_node(node_id):
            logger.warning(f"Node '{node_id}' not in graph")
            raise NodeNotFoundError(node_id)


def _reconstruct(previous: dict[str, str | None], end: str) -> list[str]:
    """Walk the predecessor chain back from end and return it start-first."""
    path = []
    node_id: str | None = end
    while node_id is not None:
        path.append(node_id)
        node_id = previous[node_id]
    return list(reversed(path))


def dijkstra(graph: Graph, start: str, end: str) -> PathResult:
    """
    Find the minimum-weight path using Dijkstra's algorithm.

    The next node is picked by a linear scan of the unvisited nodes in
    insertion order, so among equally distant candidates the earliest
    inserted one wins. Stops as soon as the end node is selected or the
    closest unvisited node is unreachable.

    Args:
        graph: Graph to search
        start: Start node id
        end: End node id

    Returns:
        PathResult with the node ids from start to end and the summed weight

    Raises:
        NodeNotFoundError: If start or end is not in the graph
        NoPathError: If end cannot be reached from start
    """
    _require_nodes(graph, start, end)

    if start == end:
        return PathResult(path=[start], distance=0)

    distances: dict[str, float] = {node_id: math.inf for node_id in graph}
    distances[start] = 0
    previous: dict[str, str | None] = dict.fromkeys(graph)
    unvisited = dict.fromkeys(graph)

    while unvisited:
        current = None
        smallest = math.inf
        for node_id in unvisited:
            if distances[node_id] < smallest:
                smallest = distances[node_id]
                current = node_id

        # Everything left is unreachable, or the target is settled
        if current is None or current == end:
            break

        del unvisited[current]

        for neighbor, weight in graph.get_neighbors(current).items():
            if neighbor not in unvisited:
                continue
            candidate = distances[current] + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                previous[neighbor] = current

    if previous[end] is None:
        logger.warning(f"Dijkstra: no path from '{start}' to '{end}'")
        raise NoPathError(start, end)

    path = _reconstruct(previous, end)
    logger.info(
        f"Dijkstra found path (distance {distances[end]}): {' -> '.join(path)}"
    )
    return PathResult(path=path, distance=distances[end])


def bfs(graph: Graph, start: str, end: str) -> PathResult:
    """
    Find the path with the fewest roads using breadth-first search.

    Each node keeps the first predecessor it is discovered from, which is
    what makes the hop count minimal. Edge weights are ignored.

    Raises:
        NodeNotFoundError: If start or end is not in the graph
        NoPathError: If end cannot be reached from start
    """
    _require_nodes(graph, start, end)

    if start == end:
        return PathResult(path=[start], distance=0)

    queue = deque([start])
    previous: dict[str, str | None] = {start: None}  # Maps node to parent

    while queue:
        current = queue.popleft()
        if current == end:
            break

        for neighbor in graph.get_neighbors(current):
            if neighbor not in previous:
                previous[neighbor] = current
                queue.append(neighbor)

    if end not in previous:
        logger.warning(f"BFS: no path from '{start}' to '{end}'")
        raise NoPathError(start, end)

    path = _reconstruct(previous, end)
    logger.info(f"BFS found path ({len(path) - 1} hops): {' -> '.join(path)}")
    return PathResult(path=path, distance=len(path) - 1)


ALGORITHMS: dict[str, Callable[[Graph, str, str], PathResult]] = {
    "dijkstra": dijkstra,
    "bfs": bfs,
}


def find_path(graph: Graph, start: str, end: str, algorithm: str = "dijkstra") -> PathResult:
    """
    Run a shortest-path algorithm by name.

    Args:
        graph: Graph to search
        start: Start node id
        end: End node id
        algorithm: One of ALGORITHMS ("dijkstra" or "bfs")

    Raises:
        ValueError: If algorithm name is unknown
        NodeNotFoundError: If start or end is not in the graph
        NoPathError: If end cannot be reached from start
    """
    if algorithm not in ALGORITHMS:
        available = ", ".join(ALGORITHMS.keys())
        raise ValueError(f"Unknown algorithm '{algorithm}'. Available: {available}")

    return ALGORITHMS[algorithm](graph, start, end)
