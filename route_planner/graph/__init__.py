"""
Graph engine module.

Provides the road-network graph and its shortest-path queries:
- Graph: Undirected weighted graph with snapshot copies
- Node, Edge, PathResult: Values returned by graph queries
- dijkstra / bfs / find_path: Shortest-path algorithms
- GraphError, NodeNotFoundError, NoPathError: Query failures
"""

from route_planner.graph.errors import GraphError, NodeNotFoundError, NoPathError
from route_planner.graph.graph import Graph
from route_planner.graph.models import Edge, Node, PathResult, canonical_key
from route_planner.graph.paths import ALGORITHMS, bfs, dijkstra, find_path

__all__ = [
    "ALGORITHMS",
    "Edge",
    "Graph",
    "GraphError",
    "Node",
    "NoPathError",
    "NodeNotFoundError",
    "PathResult",
    "bfs",
    "canonical_key",
    "dijkstra",
    "find_path",
]
