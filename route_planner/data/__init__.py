"""
Data module.

Provides the bundled city network and planner-state persistence.

Usage:
    from route_planner.data import GraphStore, build_default_graph

    graph, positions = build_default_graph()
    GraphStore().save(GraphState(graph=graph, positions=positions))
"""

from route_planner.data.cities import DEFAULT_CITIES, City, build_default_graph
from route_planner.data.store import (
    GraphState,
    GraphStore,
    export_graph,
    import_graph,
    state_from_dict,
    state_to_dict,
)

__all__ = [
    "City",
    "DEFAULT_CITIES",
    "GraphState",
    "GraphStore",
    "build_default_graph",
    "export_graph",
    "import_graph",
    "state_from_dict",
    "state_to_dict",
]
