"""
Route Planner.

An interactive road-network builder that keeps an undirected weighted
graph of cities and answers shortest-route queries with Dijkstra's
algorithm (distance) or breadth-first search (hops).
"""

__version__ = "0.1.0"
