"""
Planner actions for the Streamlit page.

Each helper runs one user action, saves the network when it changed, and
returns the error message to show (or None).
"""

from route_planner.data import GraphStore
from route_planner.planner import PlannerError, RoutePlanner


def save_network(planner: RoutePlanner, store: GraphStore) -> None:
    """Persist the network; an empty network is not written."""
    if len(planner.graph):
        planner.save(store)


def apply_action(planner: RoutePlanner, store: GraphStore, action, *args) -> str | None:
    """
    Run a planner action and save the result.

    Args:
        planner: The session's planner
        store: Where the network is saved
        action: Bound planner method, e.g. planner.add_city
        *args: Arguments for the action

    Returns:
        The PlannerError message, or None on success
    """
    try:
        action(*args)
    except PlannerError as e:
        return str(e)
    save_network(planner, store)
    return None


def step_history(planner: RoutePlanner, store: GraphStore, redo: bool = False) -> bool:
    """Undo (or redo) one change and save the restored network."""
    changed = planner.redo() if redo else planner.undo()
    if changed:
        save_network(planner, store)
    return changed


def set_weighted(planner: RoutePlanner, store: GraphStore, weighted: bool) -> None:
    if weighted != planner.weighted:
        planner.set_weighted(weighted)
        save_network(planner, store)


def set_default_cities(planner: RoutePlanner, store: GraphStore, enabled: bool) -> None:
    """Load the default network when switched on; clear everything when off."""
    if enabled:
        planner.load_default_cities()
        save_network(planner, store)
    else:
        planner.clear()
        store.clear()
