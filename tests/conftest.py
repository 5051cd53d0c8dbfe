"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from route_planner.graph import Graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def line_graph() -> Graph:
    """A - B - C with weights 10 and 5."""
    graph = Graph()
    for node in ("A", "B", "C"):
        graph.add_node(node)
    graph.add_edge("A", "B", 10)
    graph.add_edge("B", "C", 5)
    return graph


@pytest.fixture
def shortcut_graph() -> Graph:
    """
    Two routes from S to T: one road of weight 10, or three roads of weight 1.

        S --10-- T
        |        |
        1        1
        |        |
        X ---1-- Y
    """
    graph = Graph()
    graph.add_edge("S", "T", 10)
    graph.add_edge("S", "X", 1)
    graph.add_edge("X", "Y", 1)
    graph.add_edge("Y", "T", 1)
    return graph


@pytest.fixture
def disconnected_graph() -> Graph:
    """Two islands: A - B and C - D."""
    graph = Graph()
    graph.add_edge("A", "B", 1)
    graph.add_edge("C", "D", 1)
    return graph


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    """A JSON state file location inside a temporary directory."""
    return tmp_path / "state" / "route_planner_graph.json"
