"""
Exceptions raised by shortest-path queries.

Graph mutations never raise; only dijkstra/bfs signal failure.
"""


class GraphError(Exception):
    """Base class for graph query failures."""


class NodeNotFoundError(GraphError, LookupError):
    """Start or end node does not exist in the graph."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node '{node_id}' does not exist")
        self.node_id = node_id


class NoPathError(GraphError):
    """Start and end nodes exist but are not connected."""

    def __init__(self, start: str, end: str) -> None:
        super().__init__(f"No path exists from '{start}' to '{end}'")
        self.start = start
        self.end = end
