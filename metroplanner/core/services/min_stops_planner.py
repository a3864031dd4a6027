"""
Minimum Stops Planner

Breadth-first search over stations, finding the journey with the fewest stops.
"""

import logging
from collections import deque
from typing import Dict, List, Optional, Tuple

from ..interfaces.i_planner import IPlanner
from ..models.line import Line
from ..models.network import Network
from ..models.route import Route, RouteSegment
from ..models.search_state import StationRecord
from ..models.station import Station


def adjacent_stops(line: Line, index: int) -> Tuple[Optional[Station], Optional[Station]]:
    """
    Get the previous and next stop around an index on a line.

    At the terminals of a circular line the wrap connection supplies the missing
    neighbour; on a linear line it is None.
    """
    last = line.count - 1
    if index > 0:
        previous_stop = line.get_stop(index - 1)
    else:
        previous_stop = line.terminal_b if line.circular else None
    if index < last:
        next_stop = line.get_stop(index + 1)
    else:
        next_stop = line.terminal_a if line.circular else None
    return previous_stop, next_stop


class MinStopsPlanner(IPlanner):
    """Plans journeys with the fewest stops between origin and destination."""

    def __init__(self, network: Network):
        """
        Initialize the planner.

        Args:
            network: Network to plan journeys on
        """
        super().__init__(network)
        self.logger = logging.getLogger(__name__)

    def find_route(self, from_station: Station, to_station: Station) -> Route:
        self._check_request(from_station, to_station)
        if from_station == to_station:
            return Route()

        self.logger.debug(f"Searching fewest stops from '{from_station.code}' to '{to_station.code}'")
        records = self._search(from_station, to_station)

        destination = records[to_station]
        if destination.is_undiscovered:
            self.logger.debug(f"'{to_station.code}' is unreachable from '{from_station.code}'")
            return Route()

        route = self._reconstruct(records, to_station)
        self.logger.debug(f"Found {destination.distance} stop route in {route.count} segment(s)")
        return route

    def _search(self, from_station: Station, to_station: Station) -> Dict[Station, StationRecord]:
        """Run the breadth-first search until the destination is discovered."""
        records = {station: StationRecord() for station in self.network.stations}
        records[from_station].discover(parent=None, distance=0, line=None)
        queue = deque([from_station])

        while queue and records[to_station].is_undiscovered:
            stop = queue.popleft()
            distance = records[stop].distance + 1

            for line in self.network.lines:
                index = line.get_index(stop)
                if index == -1:
                    continue

                previous_stop, next_stop = adjacent_stops(line, index)
                if line.one_way:
                    previous_stop = None

                for neighbour in (previous_stop, next_stop):
                    if neighbour is not None and records[neighbour].is_undiscovered:
                        records[neighbour].discover(parent=stop, distance=distance, line=line)
                        queue.append(neighbour)

            records[stop].settle()

        return records

    def _reconstruct(self, records: Dict[Station, StationRecord], to_station: Station) -> Route:
        """Fold the parent chain of the destination into line segments."""
        path: List[Station] = []
        station = to_station
        while station is not None:
            path.append(station)
            station = records[station].parent
        path.reverse()

        route = Route()
        segment: Optional[RouteSegment] = None
        for previous_stop, stop in zip(path, path[1:]):
            line = records[stop].line
            terminal, wraps = line.get_direction(previous_stop, stop)

            if segment is not None and segment.line == line:
                segment = segment.with_to_station(stop).with_direction(
                    terminal, segment.uses_circular or wraps
                )
            else:
                if segment is not None:
                    route.add(segment)
                segment = RouteSegment(line, previous_stop, stop, terminal, wraps)

        route.add(segment)
        return route
