"""
Unit tests for the Streamlit page's planner actions.
"""

import pytest

from route_planner.data import GraphStore
from route_planner.planner import RoutePlanner
from ui.components.actions import apply_action, set_default_cities, set_weighted, step_history


@pytest.fixture
def store(state_path) -> GraphStore:
    return GraphStore(state_path)


@pytest.fixture
def planner() -> RoutePlanner:
    """Planner with A-B (10) and B-C (5)."""
    planner = RoutePlanner(seed=0)
    for name in ("A", "B", "C"):
        planner.add_city(name)
    planner.connect_cities("A", "B", 10)
    planner.connect_cities("B", "C", 5)
    return planner


class TestApplyAction:
    """Test running actions from the page."""

    def test_success_saves(self, planner, store):
        """A successful action is saved and reports no error."""
        assert apply_action(planner, store, planner.add_city, "D") is None
        assert store.load().graph.has_node("D")

    def test_error_returned_with_route_kept(self, planner, store):
        """A failed action reports its message even when a route is shown."""
        apply_action(planner, store, planner.find_route, "A", "C")
        error = apply_action(planner, store, planner.connect_cities, "", "", 1.0)
        assert error == "Please select both cities"
        assert planner.last_route is not None

    def test_empty_network_not_saved(self, store):
        """Nothing is written for an empty network."""
        planner = RoutePlanner()
        apply_action(planner, store, planner.set_weighted, False)
        assert not store.exists()


class TestHistory:
    """Test undo/redo from the page."""

    def test_undo_is_saved(self, planner, store):
        """An undone removal is what gets reloaded."""
        apply_action(planner, store, planner.remove_city, "B")
        assert step_history(planner, store) is True
        assert store.load().graph.has_node("B")

    def test_redo_is_saved(self, planner, store):
        """A redone removal is what gets reloaded."""
        apply_action(planner, store, planner.remove_city, "B")
        step_history(planner, store)
        assert step_history(planner, store, redo=True) is True
        assert not store.load().graph.has_node("B")

    def test_nothing_to_redo(self, planner, store):
        """No redo leaves the store untouched."""
        assert step_history(planner, store, redo=True) is False
        assert not store.exists()


class TestToggles:
    """Test the weighted and default-cities switches."""

    def test_weighted_change_is_saved(self, planner, store):
        """Switching to unweighted saves the bfs choice."""
        set_weighted(planner, store, False)
        assert planner.algorithm == "bfs"
        assert store.load().algorithm == "bfs"

    def test_weighted_unchanged_not_saved(self, planner, store):
        """Leaving the mode as is writes nothing."""
        set_weighted(planner, store, True)
        assert not store.exists()

    def test_default_cities_on(self, planner, store):
        """Turning defaults on loads and saves the bundled network."""
        set_default_cities(planner, store, True)
        assert len(planner.graph) == 15
        assert len(store.load().graph) == 15

    def test_default_cities_off(self, planner, store):
        """Turning defaults off clears the network and the saved file."""
        set_default_cities(planner, store, True)
        set_default_cities(planner, store, False)
        assert len(planner.graph) == 0
        assert not store.exists()
