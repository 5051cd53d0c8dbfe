"""
Bundled road network of Telangana and Andhra Pradesh.

Coordinates are relative (0-1) and scaled to the canvas when loaded.
Distances are road kilometres, listed from both ends of each road.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from route_planner.config import CANVAS_HEIGHT, CANVAS_WIDTH
from route_planner.graph import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class City:
    """
    A predefined city.

    Attributes:
        name: City name (node id)
        state: Two-letter state code (TS or AP)
        x: Relative horizontal position in [0, 1]
        y: Relative vertical position in [0, 1]
        connections: (neighbor name, distance) pairs
    """

    name: str
    state: str
    x: float
    y: float
    connections: tuple[tuple[str, float], ...]


DEFAULT_CITIES: tuple[City, ...] = (
    # Telangana (northern region)
    City("Hyderabad", "TS", 0.5, 0.4, (("Warangal", 150), ("Nizamabad", 175), ("Vijayawada", 275))),
    City("Warangal", "TS", 0.7, 0.3, (("Hyderabad", 150), ("Khammam", 120), ("Karimnagar", 85))),
    City("Nizamabad", "TS", 0.3, 0.2, (("Hyderabad", 175), ("Karimnagar", 100))),
    City("Karimnagar", "TS", 0.4, 0.25, (("Warangal", 85), ("Nizamabad", 100))),
    City("Khammam", "TS", 0.8, 0.4, (("Warangal", 120),)),
    # Andhra Pradesh (southern region)
    City("Vijayawada", "AP", 0.6, 0.6, (("Guntur", 35), ("Visakhapatnam", 350), ("Hyderabad", 275))),
    City("Visakhapatnam", "AP", 0.9, 0.5, (("Vijayawada", 350), ("Kakinada", 65), ("Rajahmundry", 120))),
    City("Guntur", "AP", 0.5, 0.7, (("Vijayawada", 35), ("Ongole", 80), ("Nellore", 180))),
    City("Tirupati", "AP", 0.3, 0.9, (("Chittoor", 70), ("Nellore", 150), ("Kadapa", 120))),
    City("Nellore", "AP", 0.4, 0.8, (("Tirupati", 150), ("Guntur", 180), ("Ongole", 100))),
    City("Kakinada", "AP", 0.85, 0.6, (("Visakhapatnam", 65), ("Rajahmundry", 55))),
    City("Rajahmundry", "AP", 0.75, 0.65, (("Kakinada", 55), ("Visakhapatnam", 120))),
    City("Chittoor", "AP", 0.25, 0.85, (("Tirupati", 70),)),
    City("Kadapa", "AP", 0.35, 0.75, (("Tirupati", 120),)),
    City("Ongole", "AP", 0.45, 0.75, (("Guntur", 80), ("Nellore", 100))),
)


def build_default_graph(
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
) -> tuple[Graph, dict[str, tuple[float, float]]]:
    """
    Build the bundled network.

    All cities are added before any road, so node order follows
    DEFAULT_CITIES. Roads to cities outside the list are skipped.

    Args:
        width: Canvas width used to scale x
        height: Canvas height used to scale y

    Returns:
        (graph, positions) where positions maps city name to canvas (x, y)
    """
    graph = Graph()
    positions: dict[str, tuple[float, float]] = {}

    for city in DEFAULT_CITIES:
        graph.add_node(city.name)
        positions[city.name] = (city.x * width, city.y * height)

    for city in DEFAULT_CITIES:
        for neighbor, distance in city.connections:
            if graph.has_node(neighbor):
                graph.add_edge(city.name, neighbor, distance)

    logger.info(
        f"Loaded default network: {len(graph)} cities, {len(graph.get_edges())} roads"
    )
    return graph, positions
