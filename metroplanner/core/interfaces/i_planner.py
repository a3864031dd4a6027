"""
Planner Interface

Interface for journey planners working on a metro network.
"""

from abc import ABC, abstractmethod

from ..exceptions import IllegalRequestError
from ..models.network import Network
from ..models.plan_result import PlanResult, RouteOutcome
from ..models.route import Route
from ..models.station import Station


class IPlanner(ABC):
    """Interface for journey planners."""

    def __init__(self, network: Network):
        """
        Initialize the planner.

        Args:
            network: Network to plan journeys on; never modified by the planner
        """
        self.network = network

    @abstractmethod
    def find_route(self, from_station: Station, to_station: Station) -> Route:
        """
        Find a route between two stations.

        Args:
            from_station: Station where the journey starts
            to_station: Station where the journey ends

        Returns:
            Route from origin to destination; empty when the stations are the
            same or the destination cannot be reached

        Raises:
            IllegalRequestError: If a station is None or not part of the network
        """
        pass

    def plan(self, from_station: Station, to_station: Station) -> PlanResult:
        """
        Find a route and tell apart the reasons a route can be empty.

        Args:
            from_station: Station where the journey starts
            to_station: Station where the journey ends

        Returns:
            PlanResult with outcome TRIVIAL, FOUND or UNREACHABLE
        """
        route = self.find_route(from_station, to_station)
        if from_station == to_station:
            return PlanResult(RouteOutcome.TRIVIAL, route)
        if route.is_empty:
            return PlanResult(RouteOutcome.UNREACHABLE, route)
        return PlanResult(RouteOutcome.FOUND, route)

    def _check_request(self, from_station: Station, to_station: Station) -> None:
        """Reject stations that are missing or foreign to the network."""
        if from_station is None or to_station is None:
            raise IllegalRequestError("Planner: origin and destination cannot be None")
        for station in (from_station, to_station):
            if not self.network.has_station(station):
                raise IllegalRequestError(f"Planner: station '{station.code}' is not in the network")
