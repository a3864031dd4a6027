"""
Minimum Transfers Planner

Breadth-first search over lines, finding the journey with the fewest changes.
Each hop of the search is one change of line at a shared station.
"""

import logging
from collections import deque
from typing import Deque, Dict, Iterator, List, Optional

from ..interfaces.i_planner import IPlanner
from ..models.line import Line
from ..models.network import Network
from ..models.route import Route, RouteSegment
from ..models.search_state import LineRecord
from ..models.station import Station


def outward_indices(line: Line, entry_index: int) -> Iterator[int]:
    """
    Yield the stop indices reachable from an entry index, nearest first.

    One-way lines are followed forward, wrapping only when circular.
    Bidirectional lines alternate one ahead, one behind, two ahead, two behind
    and so on; when a linear line runs out on one side only the other side
    continues. The entry index itself is never yielded.
    """
    count = line.count

    if line.one_way:
        for step in range(1, count):
            index = entry_index + step
            if index >= count:
                if not line.circular:
                    return
                index -= count
            yield index
        return

    if line.circular:
        for step in range(1, count // 2 + 1):
            ahead = (entry_index + step) % count
            behind = (entry_index - step) % count
            yield ahead
            if behind != ahead:
                yield behind
        return

    step = 1
    while entry_index + step < count or entry_index - step >= 0:
        if entry_index + step < count:
            yield entry_index + step
        if entry_index - step >= 0:
            yield entry_index - step
        step += 1


def reaches(line: Line, from_index: int, station: Station) -> bool:
    """Check if a station can be reached on a line from the stop at from_index."""
    to_index = line.get_index(station)
    if to_index == -1:
        return False
    return not (line.one_way and not line.circular and to_index < from_index)


class MinTransfersPlanner(IPlanner):
    """Plans journeys with the fewest line changes between origin and destination."""

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

        self.logger.debug(f"Searching fewest transfers from '{from_station.code}' to '{to_station.code}'")
        records: Dict[Line, LineRecord] = {line: LineRecord() for line in self.network.lines}
        target_line = self._search(records, from_station, to_station)

        if target_line is None:
            self.logger.debug(f"'{to_station.code}' is unreachable from '{from_station.code}'")
            return Route()

        route = self._reconstruct(records, target_line, from_station, to_station)
        self.logger.debug(f"Found route with {route.changes_required} change(s)")
        return route

    def _search(self, records: Dict[Line, LineRecord],
                from_station: Station, to_station: Station) -> Optional[Line]:
        """Run the breadth-first search and return the line reaching the destination."""
        queue: Deque[Line] = deque()
        target_line: Optional[Line] = None

        # Every line through the origin is boarded before any target decides the search
        for line in self.network.lines:
            from_index = line.get_index(from_station)
            if from_index == -1:
                continue
            records[line].discover(parent=None, entry=from_station)
            queue.append(line)
            if reaches(line, from_index, to_station):
                target_line = line

        while queue and target_line is None:
            line = queue.popleft()
            entry_index = line.get_index(records[line].entry)

            for index in outward_indices(line, entry_index):
                target_line = self._board_lines_at(
                    records, queue, line, line.get_stop(index), to_station
                )
                if target_line is not None:
                    break

            if target_line is None:
                records[line].settle()

        return target_line

    def _board_lines_at(self, records: Dict[Line, LineRecord], queue: Deque[Line],
                        current: Line, station: Station, to_station: Station) -> Optional[Line]:
        """Discover the lines through a station; return the first one reaching the destination."""
        for line in self.network.lines:
            station_index = line.get_index(station)
            if station_index == -1 or not records[line].is_undiscovered:
                continue
            records[line].discover(parent=current, entry=station)
            queue.append(line)
            if reaches(line, station_index, to_station):
                return line
        return None

    def _reconstruct(self, records: Dict[Line, LineRecord], target_line: Line,
                     from_station: Station, to_station: Station) -> Route:
        """Turn the parent chain of the target line into one segment per line."""
        lines: List[Line] = []
        line = target_line
        while line is not None:
            lines.append(line)
            line = records[line].parent
        lines.reverse()

        route = Route()
        boarding = from_station
        for position, line in enumerate(lines):
            if position + 1 < len(lines):
                alighting = records[lines[position + 1]].entry
            else:
                alighting = to_station
            terminal, wraps = line.get_direction(boarding, alighting)
            route.add(RouteSegment(line, boarding, alighting, terminal, wraps))
            boarding = alighting

        return route
