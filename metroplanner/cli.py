"""
Command line front end for the Metro Planner application.

This module sets up logging, loads the configuration and the network, plans a
journey between two stations and prints it.

Usage:
    python -m metroplanner HBR STD
    python -m metroplanner HBR AIR --objective transfers --json
    python -m metroplanner --list-stations --network path/to/network.txt
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.exceptions import IllegalRequestError, NetworkFormatError
from .core.models import Network, RouteOutcome, Station
from .core.services import PlannerFactory, PlanningObjective, TextNetworkRepository
from .managers.config_manager import ConfigManager, ConfigurationError
from .version import get_version_string

SAMPLE_NETWORK = Path(__file__).parent / "data" / "sample_network.txt"

EXIT_OK = 0
EXIT_UNREACHABLE = 1
EXIT_ERROR = 2

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None):
    """Setup application logging with console and optional file output."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Plan a journey through a metro network."
    )
    parser.add_argument("from_station", nargs="?", help="Code of the origin station")
    parser.add_argument("to_station", nargs="?", help="Code of the destination station")
    parser.add_argument("--network", help="Path to a network text file")
    parser.add_argument(
        "--objective",
        choices=[objective.value for objective in PlanningObjective],
        help="Optimise for the fewest stops or the fewest transfers",
    )
    parser.add_argument("--config", help="Path to the configuration file")
    parser.add_argument("--json", action="store_true", help="Print the journey as JSON")
    parser.add_argument("--list-stations", action="store_true", help="List the stations and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=get_version_string())
    return parser


def resolve_station(network: Network, code: str) -> Station:
    """Look up a station by code, raising IllegalRequestError if unknown."""
    station = network.get_station(code)
    if station is None:
        raise IllegalRequestError(f"Unknown station code '{code}'")
    return station


def print_stations(network: Network):
    """Print every station with the lines serving it."""
    for station in network.stations:
        lines = ", ".join(line.code for line in network.lines_serving(station))
        print(f"{station.code:<8} {station.name:<30} {lines}")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the console front end and return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ConfigManager(args.config).load_config()
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    setup_logging("DEBUG" if args.verbose else config.logging.level, config.logging.log_file)

    network_path = args.network or config.network_path or SAMPLE_NETWORK
    try:
        network = TextNetworkRepository(network_path).load_network()
    except NetworkFormatError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.list_stations:
        print_stations(network)
        return EXIT_OK

    if not args.from_station or not args.to_station:
        parser.print_usage(sys.stderr)
        print("ERROR: origin and destination station codes are required", file=sys.stderr)
        return EXIT_ERROR

    objective = args.objective or config.planner.objective
    try:
        origin = resolve_station(network, args.from_station)
        destination = resolve_station(network, args.to_station)
        result = PlannerFactory(network).get_planner(objective).plan(origin, destination)
    except IllegalRequestError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger.info(f"Planned {origin.code} -> {destination.code}: {result.outcome.value}")

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif result.outcome is RouteOutcome.TRIVIAL:
        print(f"You are already at {origin}.")
    elif result.outcome is RouteOutcome.UNREACHABLE:
        print(f"No journey from {origin} to {destination}.")
    else:
        print(f"{origin} → {destination}: {result.route.get_route_description()}")
        for step in result.route.get_detailed_description():
            print(f"  {step}")

    return EXIT_UNREACHABLE if result.outcome is RouteOutcome.UNREACHABLE else EXIT_OK
