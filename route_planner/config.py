"""
Configuration constants for the Route Planner project.

All paths, defaults, and tunable parameters are defined here.
Values that differ per machine are read from environment variables.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of route_planner/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains the persisted graph state)
DATA_DIR = PROJECT_ROOT / "data"

# Saved planner state (nodes, edges, positions, algorithm)
GRAPH_STATE_PATH = Path(
    os.environ.get("ROUTE_PLANNER_STATE_PATH", DATA_DIR / "route_planner_graph.json")
)

# File suffixes understood by the graph store
STATE_FORMATS = (".json", ".msgpack")

# =============================================================================
# Graph Configuration
# =============================================================================

# Weight used when a road is added without a distance (unweighted mode)
DEFAULT_EDGE_WEIGHT = 1

# Shortest-path algorithms, first is the default for weighted graphs
ALGORITHMS = ("dijkstra", "bfs")
DEFAULT_ALGORITHM = "dijkstra"

# Unit label shown next to a route distance, per algorithm
DISTANCE_UNITS = {
    "dijkstra": "units",
    "bfs": "hops",
}

# =============================================================================
# Planner Configuration
# =============================================================================

# Maximum number of snapshots kept for undo
HISTORY_LIMIT = int(os.environ.get("ROUTE_PLANNER_HISTORY_LIMIT", "50"))

# Start new sessions from the bundled Telangana / Andhra Pradesh network
USE_DEFAULT_CITIES = os.environ.get("ROUTE_PLANNER_DEFAULT_CITIES", "1") != "0"

# =============================================================================
# Layout Configuration
# =============================================================================

# Canvas used to scale the relative coordinates of the default cities
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600

# New cities are placed on a ring around the canvas centre
PLACEMENT_RADIUS_MIN = 80
PLACEMENT_RADIUS_MAX = 160

# Keep nodes this far from the canvas border
CANVAS_MARGIN = 20

# Network chart settings
GRAPH_NODE_SIZE = 18
GRAPH_EDGE_WIDTH = 2
GRAPH_PATH_EDGE_WIDTH = 5

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_state_file(path: Path = GRAPH_STATE_PATH) -> dict[str, bool]:
    """Check whether a saved planner state exists and is in a known format."""
    path = Path(path)
    return {
        "data_dir": path.parent.exists(),
        "state_file": path.exists(),
        "known_format": path.suffix in STATE_FORMATS,
    }
