"""Command-line interface for railgraph."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, NoReturn, Optional

import jsonschema

from railgraph.backend import RouteFinder
from railgraph.config import ROUTE_CONFIG, RouteFinderConfig
from railgraph.exceptions import GraphError
from railgraph.logging import cli_log_level, get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_cost(value: Any) -> str:
    """Return cost formatted with up to three decimals.

    Trims trailing zeros and the decimal point when not needed. Falls back to
    ``str(value)`` if the input cannot be parsed as a float.

    Examples:
        62 -> "62"; 10.0 -> "10"; 1234.567 -> "1,234.567".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)

    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _fail(message: str) -> NoReturn:
    logger.error(message)
    print(f"ERROR: {message}")
    sys.exit(1)


def _load_finder(path: Path) -> RouteFinder:
    """Load a route file, exiting with status 1 on any loader or graph error."""
    logger.info(f"Loading routes from: {path}")
    try:
        return RouteFinder.from_file(path)
    except FileNotFoundError:
        _fail(f"Route file not found: {path}")
    except (GraphError, ValueError, jsonschema.ValidationError) as e:
        _fail(f"Failed to load routes: {type(e).__name__}: {e}")


def _print_stations(finder: RouteFinder) -> None:
    stations = finder.stations()
    print(f"Here's a list of all {len(stations)} available stations:\n")
    for name in stations:
        print(f"   {name}")
    print()


def _show_route(
    path: Path, origin: str, destination: str, as_json: bool = False
) -> None:
    finder = _load_finder(path)
    try:
        route = finder.route(origin, destination)
    except GraphError as e:
        _fail(str(e))

    if as_json:
        print(json.dumps({"path": list(route.nodes), "cost": route.cost}, default=str))
        return
    print(f"Route: {' -> '.join(str(n) for n in route.nodes)}")
    print(f"Cost: {_format_cost(route.cost)} {ROUTE_CONFIG.cost_unit}")


def _show_mst(path: Path, seed: str) -> None:
    finder = _load_finder(path)
    try:
        cost = finder.network_cost(seed)
    except GraphError as e:
        _fail(str(e))
    print(f"Minimum spanning tree cost from {seed}: {_format_cost(cost)}")


def _prompt_station(finder: RouteFinder, prompt: str, config: RouteFinderConfig) -> str:
    """Prompt until the user names a known station.

    Raises:
        EOFError: If input ends before a valid station is entered.
    """
    while True:
        print(prompt)
        name = input().strip()
        if finder.is_station(name):
            return name
        print(config.unknown_station_message)
        _print_stations(finder)


def _run_interactive(path: Path, config: RouteFinderConfig = ROUTE_CONFIG) -> None:
    """Ask for origin and destination on stdin and print the shortest route."""
    finder = _load_finder(path)
    print(config.welcome_message)
    _print_stations(finder)

    try:
        origin = _prompt_station(finder, config.origin_prompt, config)
        destination = _prompt_station(finder, config.destination_prompt, config)
    except EOFError:
        print()
        logger.debug("Input closed before a route was requested")
        return

    try:
        route = finder.route(origin, destination)
    except GraphError as e:
        _fail(str(e))

    print()
    print(f"[{', '.join(str(n) for n in route.nodes)}]\n")
    print(config.trip_summary(_format_cost(route.cost)))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``railgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="railgraph",
        description="Find shortest train routes in a weighted rail network.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{stations,route,mst,interactive}",
        help="Available commands",
    )

    def add_command(name: str, help_text: str) -> argparse.ArgumentParser:
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument(
            "routes",
            type=Path,
            help="Route file (edge list, or YAML with .yaml/.yml suffix)",
        )
        return p

    add_command("stations", "List stations")

    route_parser = add_command(
        "route", "Print the shortest route between two stations"
    )
    route_parser.add_argument("origin", help="Origin station")
    route_parser.add_argument("destination", help="Destination station")
    route_parser.add_argument(
        "--json", action="store_true", help="Print the route as JSON"
    )

    mst_parser = add_command(
        "mst", "Print the minimum spanning tree cost of the network"
    )
    mst_parser.add_argument("seed", help="Station the spanning tree grows from")

    add_command("interactive", "Prompt for origin and destination")

    # Determine effective arguments (support both direct calls and module entrypoint)
    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(cli_log_level(verbose=args.verbose, quiet=args.quiet))
    logger.debug("Debug logging enabled")

    if args.command == "stations":
        _print_stations(_load_finder(args.routes))
    elif args.command == "route":
        _show_route(args.routes, args.origin, args.destination, as_json=args.json)
    elif args.command == "mst":
        _show_mst(args.routes, args.seed)
    elif args.command == "interactive":
        _run_interactive(args.routes)


if __name__ == "__main__":
    main()
