"""
Route planner module.

Provides the interactive session layer over the graph engine:
- RoutePlanner: Validated edits, undo/redo, route queries
- RouteResult: A computed route
- PlannerError: Rejected user action
"""

from route_planner.planner.session import RoutePlanner
from route_planner.planner.state import PlannerError, RouteResult

__all__ = [
    "PlannerError",
    "RoutePlanner",
    "RouteResult",
]
