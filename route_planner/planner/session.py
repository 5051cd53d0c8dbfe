"""
Interactive route-planning session.

Wraps a Graph with the checks a user-facing form needs (empty names,
duplicate cities, self-connections, bad distances), keeps city positions
for drawing, and records undo/redo history.

Every change is copy-on-write: the current graph is snapshotted, the
snapshot is mutated, and the old graph goes on the undo stack. A Graph
handed out by RoutePlanner.graph is therefore never mutated afterwards.
"""

from __future__ import annotations

import logging
import math
import random
from collections import deque
from typing import TYPE_CHECKING

from route_planner.config import (
    ALGORITHMS,
    CANVAS_HEIGHT,
    CANVAS_MARGIN,
    CANVAS_WIDTH,
    DEFAULT_ALGORITHM,
    DEFAULT_EDGE_WEIGHT,
    HISTORY_LIMIT,
    PLACEMENT_RADIUS_MAX,
    PLACEMENT_RADIUS_MIN,
)
from route_planner.data.cities import build_default_graph
from route_planner.data.store import GraphState
from route_planner.graph import Graph, NoPathError, find_path
from route_planner.planner.state import PlannerError, RouteResult

if TYPE_CHECKING:
    from route_planner.data.store import GraphStore

logger = logging.getLogger(__name__)

Positions = dict[str, tuple[float, float]]


class RoutePlanner:
    """
    A user's road network plus the current route query settings.

    The planner handles:
    - Validating city and road input before touching the graph
    - Placing new cities on the canvas
    - Choosing Dijkstra (weighted) or BFS (unweighted)
    - Undo/redo of graph changes
    - Converting to and from a persistable GraphState
    """

    def __init__(
        self,
        graph: Graph | None = None,
        positions: Positions | None = None,
        weighted: bool = True,
        history_limit: int = HISTORY_LIMIT,
        seed: int | None = None,
    ) -> None:
        """
        Initialize the planner.

        Args:
            graph: Starting network (copied, never mutated)
            positions: City name -> canvas (x, y)
            weighted: Use road distances (Dijkstra) instead of hop counts (BFS)
            history_limit: Maximum number of undo steps kept
            seed: Random seed for placing new cities
        """
        self._graph = Graph(graph) if graph is not None else Graph()
        self._positions: Positions = dict(positions or {})
        self._weighted = weighted
        self._algorithm = DEFAULT_ALGORITHM if weighted else "bfs"
        self._undo: deque[tuple[Graph, Positions]] = deque(maxlen=history_limit)
        self._redo: list[tuple[Graph, Positions]] = []
        self._rng = random.Random(seed)
        self.last_route: RouteResult | None = None

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def graph(self) -> Graph:
        """Current network. Treat as read-only; use the planner to change it."""
        return self._graph

    @property
    def positions(self) -> Positions:
        return dict(self._positions)

    @property
    def weighted(self) -> bool:
        return self._weighted

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def cities(self) -> list[str]:
        return [node.id for node in self._graph.get_nodes()]

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    # =========================================================================
    # History
    # =========================================================================

    def _commit(self, graph: Graph, positions: Positions) -> None:
        """Replace the current network, keeping the old one for undo."""
        previous = self._graph
        self._undo.append((self._graph, self._positions))
        self._redo.clear()
        self._graph = graph
        self._positions = positions
        self._forget_stale_route(previous)

    def _forget_stale_route(self, previous: Graph) -> None:
        """Drop the last route if it passes through a city that was removed."""
        removed = [city for city in previous if not self._graph.has_node(city)]
        if self.last_route and any(self.last_route.uses_city(city) for city in removed):
            self.last_route = None

    def undo(self) -> bool:
        """Restore the previous network. Returns False if there is none."""
        if not self._undo:
            return False
        previous = self._graph
        self._redo.append((self._graph, self._positions))
        self._graph, self._positions = self._undo.pop()
        self._forget_stale_route(previous)
        logger.debug(f"Undo: {len(self._undo)} step(s) left")
        return True

    def redo(self) -> bool:
        """Re-apply the last undone change. Returns False if there is none."""
        if not self._redo:
            return False
        previous = self._graph
        self._undo.append((self._graph, self._positions))
        self._graph, self._positions = self._redo.pop()
        self._forget_stale_route(previous)
        logger.debug(f"Redo: {len(self._redo)} step(s) left")
        return True

    # =========================================================================
    # Cities and Roads
    # =========================================================================

    def _place(self) -> tuple[float, float]:
        """Pick a spot on a ring around the canvas centre, inside the margins."""
        angle = self._rng.random() * math.pi * 2
        radius = PLACEMENT_RADIUS_MIN + self._rng.random() * (
            PLACEMENT_RADIUS_MAX - PLACEMENT_RADIUS_MIN
        )
        x = CANVAS_WIDTH / 2 + radius * math.cos(angle)
        y = CANVAS_HEIGHT / 2 + radius * math.sin(angle)
        return (
            max(CANVAS_MARGIN, min(CANVAS_WIDTH - CANVAS_MARGIN, x)),
            max(CANVAS_MARGIN, min(CANVAS_HEIGHT - CANVAS_MARGIN, y)),
        )

    def add_city(self, name: str, position: tuple[float, float] | None = None) -> str:
        """
        Add a new city.

        Args:
            name: City name; surrounding whitespace is stripped
            position: Canvas (x, y); placed automatically if omitted

        Returns:
            The stored city name

        Raises:
            PlannerError: If the name is empty or the city already exists
        """
        name = name.strip()
        if not name:
            raise PlannerError("City name cannot be empty")
        if self._graph.has_node(name):
            raise PlannerError(f'City "{name}" already exists')

        graph = self._graph.snapshot()
        graph.add_node(name)
        positions = dict(self._positions)
        positions[name] = position or self._place()

        self._commit(graph, positions)
        logger.info(f"Added city '{name}'")
        return name

    def remove_city(self, name: str) -> None:
        """
        Remove a city and all of its roads.

        Raises:
            PlannerError: If the city does not exist
        """
        if not self._graph.has_node(name):
            raise PlannerError(f'City "{name}" does not exist')

        graph = self._graph.snapshot()
        graph.remove_node(name)
        positions = dict(self._positions)
        positions.pop(name, None)

        self._commit(graph, positions)
        logger.info(f"Removed city '{name}'")

    def connect_cities(
        self,
        source: str,
        target: str,
        distance: float | None = None,
    ) -> float:
        """
        Add a road between two existing cities, or change its distance.

        In unweighted mode the distance is ignored and every road counts 1.

        Returns:
            The weight stored for the road

        Raises:
            PlannerError: If a city is missing or unknown, the cities are the
                same, or the distance is negative or not finite
        """
        if not source or not target:
            raise PlannerError("Please select both cities")
        if source == target:
            raise PlannerError("Cannot connect a city to itself")
        if not self._graph.has_node(source) or not self._graph.has_node(target):
            raise PlannerError("One or both cities do not exist")

        if not self._weighted:
            weight = DEFAULT_EDGE_WEIGHT
        elif distance is None:
            weight = DEFAULT_EDGE_WEIGHT
        else:
            weight = distance
            if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                raise PlannerError("Distance must be a number")
            if not math.isfinite(weight) or weight < 0:
                raise PlannerError("Distance must be a non-negative number")

        graph = self._graph.snapshot()
        graph.add_edge(source, target, weight)

        self._commit(graph, dict(self._positions))
        logger.info(f"Connected '{source}' <-> '{target}' ({weight})")
        return weight

    def disconnect_cities(self, source: str, target: str) -> None:
        """
        Remove the road between two cities.

        Raises:
            PlannerError: If there is no such road
        """
        neighbors = self._graph.get_neighbors(source)
        if neighbors is None or target not in neighbors:
            raise PlannerError(f'No road between "{source}" and "{target}"')

        graph = self._graph.snapshot()
        graph.remove_edge(source, target)

        self._commit(graph, dict(self._positions))
        self.last_route = None
        logger.info(f"Disconnected '{source}' <-> '{target}'")

    def load_default_cities(
        self,
        width: float = CANVAS_WIDTH,
        height: float = CANVAS_HEIGHT,
    ) -> None:
        """Replace the network with the bundled Telangana / Andhra Pradesh map."""
        graph, positions = build_default_graph(width, height)
        self._commit(graph, positions)
        self.last_route = None

    def clear(self) -> None:
        """Empty the network and forget all history."""
        self._graph = Graph()
        self._positions = {}
        self._undo.clear()
        self._redo.clear()
        self.last_route = None
        logger.info("Cleared route planner")

    # =========================================================================
    # Routing
    # =========================================================================

    def set_weighted(self, weighted: bool) -> None:
        """Switch between road distances (Dijkstra) and hop counts (BFS)."""
        self._weighted = weighted
        self._algorithm = "dijkstra" if weighted else "bfs"

    def set_algorithm(self, algorithm: str) -> None:
        """
        Choose the algorithm explicitly, independent of the weighted mode.

        Raises:
            PlannerError: If the algorithm name is unknown
        """
        if algorithm not in ALGORITHMS:
            available = ", ".join(ALGORITHMS)
            raise PlannerError(f"Unknown algorithm '{algorithm}'. Available: {available}")
        self._algorithm = algorithm

    def find_route(
        self,
        source: str,
        target: str,
        algorithm: str | None = None,
    ) -> RouteResult:
        """
        Find the shortest route between two cities.

        Args:
            source: Starting city
            target: Destination city
            algorithm: Override the planner's algorithm for this query

        Returns:
            RouteResult, also stored as last_route

        Raises:
            PlannerError: If a city is missing or unknown, the algorithm is
                unknown, or no route connects the cities
        """
        algorithm = algorithm or self._algorithm
        if algorithm not in ALGORITHMS:
            available = ", ".join(ALGORITHMS)
            raise PlannerError(f"Unknown algorithm '{algorithm}'. Available: {available}")

        if not source or not target:
            raise PlannerError("Please select both source and target cities")
        if not self._graph.has_node(source) or not self._graph.has_node(target):
            raise PlannerError("One or both cities do not exist")

        if source == target:
            result = RouteResult(source, target, [source], 0, algorithm)
            self.last_route = result
            logger.info(f"Route {source} -> {target}: {result.describe()}")
            return result

        try:
            found = find_path(self._graph, source, target, algorithm)
        except NoPathError as e:
            self.last_route = None
            raise PlannerError("No path exists between these cities") from e

        result = RouteResult(source, target, found.path, found.distance, algorithm)
        self.last_route = result
        logger.info(f"Route {source} -> {target}: {result.describe()}")
        return result

    # =========================================================================
    # Persistence
    # =========================================================================

    def to_state(self) -> GraphState:
        """Snapshot the session for saving."""
        return GraphState(
            graph=self._graph.snapshot(),
            positions=dict(self._positions),
            algorithm=self._algorithm,
        )

    @classmethod
    def from_state(cls, state: GraphState, **kwargs) -> RoutePlanner:
        """Restore a session saved with to_state()."""
        weighted = state.algorithm != "bfs"
        planner = cls(graph=state.graph, positions=state.positions, weighted=weighted, **kwargs)
        planner.set_algorithm(state.algorithm)
        return planner

    @classmethod
    def open(
        cls,
        store: GraphStore,
        use_default_cities: bool = True,
        **kwargs,
    ) -> RoutePlanner:
        """
        Load the saved session, falling back to the default network.

        Args:
            store: Where the session is saved
            use_default_cities: Start from the bundled map when nothing is
                saved; otherwise start empty
        """
        state = store.load()
        if state is not None:
            return cls.from_state(state, **kwargs)

        planner = cls(**kwargs)
        if use_default_cities:
            planner.load_default_cities()
        return planner

    def save(self, store: GraphStore) -> None:
        store.save(self.to_state())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(cities={len(self._graph)}, "
            f"algorithm={self._algorithm!r})"
        )
