"""
Persistence and import/export of planner state.

A saved state is a plain dict:

    {
        "nodes": [{"id": "Hyderabad"}, ...],
        "edges": [{"source": "Hyderabad", "target": "Warangal", "weight": 150}, ...],
        "positions": [["Hyderabad", {"x": 400.0, "y": 240.0}], ...],
        "algorithm": "dijkstra",
        "timestamp": 1718000000000,
    }

Loading replays add_node for every node and then add_edge for every edge
in the recorded order, which reproduces the same query results as the
graph that was saved. Files ending in .msgpack are written with msgpack,
everything else as JSON.

Usage:
    from route_planner.data.store import GraphStore

    store = GraphStore()
    store.save(state)
    state = store.load()
"""

from __future__ import annotations

import json
import logging
import math
import time
from dataclasses import dataclass, field
from pathlib import Path

import msgpack

from route_planner.config import ALGORITHMS, DEFAULT_ALGORITHM, GRAPH_STATE_PATH
from route_planner.graph import Graph

logger = logging.getLogger(__name__)


@dataclass
class GraphState:
    """
    Everything needed to restore a planner session.

    Attributes:
        graph: The road network
        positions: City name -> canvas (x, y)
        algorithm: Selected shortest-path algorithm
        timestamp: Save time in epoch milliseconds
    """

    graph: Graph = field(default_factory=Graph)
    positions: dict[str, tuple[float, float]] = field(default_factory=dict)
    algorithm: str = DEFAULT_ALGORITHM
    timestamp: int = field(default_factory=lambda: int(time.time() * 1000))


def state_to_dict(state: GraphState) -> dict:
    """Serialize a GraphState to JSON/msgpack-friendly primitives."""
    return {
        "nodes": [{"id": node.id} for node in state.graph.get_nodes()],
        "edges": [
            {"source": edge.source, "target": edge.target, "weight": edge.weight}
            for edge in state.graph.get_edges()
        ],
        "positions": [
            [name, {"x": x, "y": y}] for name, (x, y) in state.positions.items()
        ],
        "algorithm": state.algorithm,
        "timestamp": state.timestamp,
    }


def state_from_dict(data: dict) -> GraphState:
    """
    Rebuild a GraphState by replaying node and edge insertions.

    Raises:
        KeyError: If a node or edge record is missing a field
        ValueError: If the algorithm is unknown or a weight is not a
            finite, non-negative number
        AttributeError: If data is not a dict
    """
    algorithm = data.get("algorithm", DEFAULT_ALGORITHM)
    if algorithm not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{algorithm}'")

    graph = Graph()
    for node in data.get("nodes", []):
        graph.add_node(node["id"])
    for edge in data.get("edges", []):
        weight = edge["weight"]
        if (
            isinstance(weight, bool)
            or not isinstance(weight, (int, float))
            or not math.isfinite(weight)
            or weight < 0
        ):
            raise ValueError(
                f"Invalid weight {weight!r} for '{edge['source']}' <-> '{edge['target']}'"
            )
        graph.add_edge(edge["source"], edge["target"], weight)

    positions = {
        name: (float(pos["x"]), float(pos["y"]))
        for name, pos in data.get("positions", [])
    }

    return GraphState(
        graph=graph,
        positions=positions,
        algorithm=algorithm,
        timestamp=int(data.get("timestamp", time.time() * 1000)),
    )


class GraphStore:
    """
    File-backed store for a single planner state.

    Attributes:
        path: Location of the state file; the suffix picks the format
    """

    def __init__(self, path: Path | str = GRAPH_STATE_PATH) -> None:
        self.path = Path(path)

    @property
    def is_msgpack(self) -> bool:
        return self.path.suffix == ".msgpack"

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, state: GraphState) -> None:
        """Write the state, creating parent directories as needed."""
        data = state_to_dict(state)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        if self.is_msgpack:
            with open(self.path, "wb") as f:
                msgpack.dump(data, f)
        else:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)

        logger.info(
            f"Saved {len(data['nodes'])} cities and {len(data['edges'])} roads to {self.path}"
        )

    def load(self) -> GraphState | None:
        """
        Read the saved state.

        Returns:
            The restored GraphState, or None if there is no file or it
            cannot be parsed
        """
        if not self.path.exists():
            return None

        try:
            if self.is_msgpack:
                with open(self.path, "rb") as f:
                    data = msgpack.load(f)
            else:
                with open(self.path, encoding="utf-8") as f:
                    data = json.load(f)
            state = state_from_dict(data)
        except (ValueError, KeyError, TypeError, AttributeError, msgpack.UnpackException) as e:
            logger.error(f"Failed to load graph state from {self.path}: {e}")
            return None

        logger.info(f"Loaded {len(state.graph)} cities from {self.path}")
        return state

    def clear(self) -> None:
        """Delete the saved state; no-op if there is none."""
        if self.path.exists():
            self.path.unlink()
            logger.info(f"Cleared graph state at {self.path}")


def export_graph(state: GraphState, path: Path | str) -> Path:
    """Write state to an arbitrary file (format by suffix) and return its path."""
    store = GraphStore(path)
    store.save(state)
    return store.path


def import_graph(path: Path | str) -> GraphState:
    """
    Read a state previously written by export_graph.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be parsed
    """
    store = GraphStore(path)
    if not store.exists():
        raise FileNotFoundError(f"No graph file at {store.path}")

    state = store.load()
    if state is None:
        raise ValueError(f"Could not parse graph file {store.path}")
    return state
