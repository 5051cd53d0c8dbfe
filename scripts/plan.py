#!/usr/bin/env python3
"""
Route Planner CLI - build a road network and query shortest routes.

The network is kept in the state file (data/route_planner_graph.json, or
ROUTE_PLANNER_STATE_PATH) between invocations.

Usage:
    python scripts/plan.py defaults
    python scripts/plan.py add-city Amaravati
    python scripts/plan.py connect Amaravati Guntur --distance 30
    python scripts/plan.py route Hyderabad Tirupati
    python scripts/plan.py route Hyderabad Tirupati --algorithm bfs
    python scripts/plan.py remove-city Amaravati
    python scripts/plan.py list
    python scripts/plan.py status
    python scripts/plan.py export network.msgpack
    python scripts/plan.py import network.msgpack
    python scripts/plan.py reset

Algorithms:
    dijkstra - Shortest total road distance (default)
    bfs      - Fewest roads, distances ignored
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv  # noqa: E402

load_dotenv(project_root / ".env")

from route_planner.config import (  # noqa: E402
    ALGORITHMS,
    GRAPH_STATE_PATH,
    LOG_LEVEL,
    validate_state_file,
)
from route_planner.data import GraphStore, export_graph, import_graph  # noqa: E402
from route_planner.planner import PlannerError, RoutePlanner  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Plan routes on a road network",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--state",
        type=Path,
        default=GRAPH_STATE_PATH,
        help=f"State file, .json or .msgpack (default: {GRAPH_STATE_PATH})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("defaults", help="Replace the network with the default cities")
    commands.add_parser("list", help="Show cities and roads")
    commands.add_parser("reset", help="Delete the saved network")
    commands.add_parser("status", help="Check the saved state file")

    add_city = commands.add_parser("add-city", help="Add a city")
    add_city.add_argument("name", help="City name")

    remove_city = commands.add_parser("remove-city", help="Remove a city and its roads")
    remove_city.add_argument("name", help="City name")

    connect = commands.add_parser("connect", help="Connect two cities with a road")
    connect.add_argument("source", help="First city")
    connect.add_argument("target", help="Second city")
    connect.add_argument(
        "--distance",
        type=float,
        default=None,
        help="Road length (default: 1)",
    )

    disconnect = commands.add_parser("disconnect", help="Remove the road between two cities")
    disconnect.add_argument("source", help="First city")
    disconnect.add_argument("target", help="Second city")

    route = commands.add_parser("route", help="Find the shortest route")
    route.add_argument("source", help="Starting city")
    route.add_argument("target", help="Destination city")
    route.add_argument(
        "--algorithm",
        type=str,
        default=None,
        choices=list(ALGORITHMS),
        help="Algorithm to use (default: the saved choice)",
    )

    export = commands.add_parser("export", help="Write the network to a file")
    export.add_argument("path", type=Path, help="Output file (.json or .msgpack)")

    import_ = commands.add_parser("import", help="Replace the network from a file")
    import_.add_argument("path", type=Path, help="Input file (.json or .msgpack)")

    return parser.parse_args(argv)


def print_network(planner: RoutePlanner) -> None:
    graph = planner.graph
    print(f"\nCities ({len(graph)}):")
    for name in graph:
        print(f"  {name}")

    edges = graph.get_edges()
    print(f"\nRoads ({len(edges)}):")
    for edge in edges:
        print(f"  {edge.source} <-> {edge.target}: {edge.weight:g}")
    print(f"\nAlgorithm: {planner.algorithm}")


def check_state(store: GraphStore) -> bool:
    """Report on the state file. Returns True if it holds a loadable network."""
    print(f"\n=== Checking {store.path} ===\n")

    checks = validate_state_file(store.path)
    for name, ok in checks.items():
        print(f"{'✓' if ok else '✗'} {name}")

    if not checks["state_file"]:
        print("\nNo saved network")
        return False

    state = store.load()
    if state is None:
        print("\n✗ State file could not be loaded")
        return False

    print(
        f"\n✓ {len(state.graph)} cities, {len(state.graph.get_edges())} roads, "
        f"algorithm {state.algorithm}"
    )
    return checks["known_format"]


def run(args: argparse.Namespace) -> int:
    """Execute one command against the saved network."""
    store = GraphStore(args.state)

    if args.command == "status":
        return 0 if check_state(store) else 1

    if args.command == "reset":
        store.clear()
        print("Network cleared")
        return 0

    if args.command == "import":
        try:
            state = import_graph(args.path)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        store.save(state)
        print(f"Imported {len(state.graph)} cities from {args.path}")
        return 0

    planner = RoutePlanner.open(store, use_default_cities=args.command == "defaults")

    try:
        if args.command == "defaults":
            planner.load_default_cities()
        elif args.command == "add-city":
            planner.add_city(args.name)
        elif args.command == "remove-city":
            planner.remove_city(args.name)
        elif args.command == "connect":
            weight = planner.connect_cities(args.source, args.target, args.distance)
            print(f"Connected {args.source} <-> {args.target} ({weight:g})")
        elif args.command == "disconnect":
            planner.disconnect_cities(args.source, args.target)
        elif args.command == "list":
            print_network(planner)
            return 0
        elif args.command == "export":
            path = export_graph(planner.to_state(), args.path)
            print(f"Exported {len(planner.graph)} cities to {path}")
            return 0
        elif args.command == "route":
            result = planner.find_route(args.source, args.target, args.algorithm)
            print("\nRoute:")
            for i, city in enumerate(result.path):
                marker = " (START)" if i == 0 else " (TARGET)" if i == len(result.path) - 1 else ""
                print(f"  {i}. {city}{marker}")
            print(f"\nTotal distance: {result.distance:g} {result.units}")
            return 0
    except PlannerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    planner.save(store)
    print(f"Saved {len(planner.graph)} cities to {store.path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
