"""
Route Model

Data model for planned journeys: an ordered sequence of directional line segments.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from ..exceptions import IllegalRequestError
from .line import Line
from .station import Station


@dataclass(frozen=True)
class RouteSegment:
    """
    A ride on a single line from one station to another.

    The direction is given as the terminal the train is heading towards.
    uses_circular is set when the ride crosses the connection between the last
    and the first stop of a circular line.
    """

    line: Line
    from_station: Station
    to_station: Station
    direction: Station
    uses_circular: bool = False

    def __post_init__(self):
        """Validate route segment data."""
        if self.line is None:
            raise IllegalRequestError("RouteSegment: line cannot be None")
        if self.from_station is None or self.to_station is None:
            raise IllegalRequestError("RouteSegment: from and to stations cannot be None")
        if self.direction is None:
            raise IllegalRequestError("RouteSegment: direction cannot be None")

    def with_to_station(self, to_station: Station) -> 'RouteSegment':
        """Copy of this segment ending at another station."""
        return replace(self, to_station=to_station)

    def with_direction(self, direction: Station, uses_circular: bool) -> 'RouteSegment':
        """Copy of this segment heading towards another terminal."""
        return replace(self, direction=direction, uses_circular=uses_circular)

    @property
    def hop_count(self) -> int:
        """Number of stops travelled on this segment."""
        direct = abs(self.line.get_index(self.to_station) - self.line.get_index(self.from_station))
        if self.uses_circular:
            return self.line.count - direct
        return direct

    def to_dict(self) -> Dict[str, Any]:
        """Convert route segment to dictionary representation."""
        return {
            "line": self.line.code,
            "from_station": self.from_station.code,
            "to_station": self.to_station.code,
            "direction": self.direction.code,
            "uses_circular": self.uses_circular,
            "stops": self.hop_count
        }

    def __str__(self) -> str:
        return f"{self.line.code}: {self.from_station} → {self.to_station} (towards {self.direction})"


class Route:
    """
    An ordered journey made of route segments.

    A route never holds the same segment twice. An empty route means that no
    journey is needed or that none could be found.
    """

    def __init__(self, segments: Iterable[RouteSegment] = ()):
        self._segments: List[RouteSegment] = []
        for segment in segments:
            self.add(segment)

    def can_add(self, segment: Optional[RouteSegment]) -> bool:
        """Check if a segment can be appended to this route."""
        return segment is not None and segment not in self._segments

    def add(self, segment: RouteSegment) -> None:
        """
        Append a segment to the end of the route.

        Raises:
            IllegalRequestError: If the segment is None or already on the route
        """
        if not self.can_add(segment):
            raise IllegalRequestError(f"Route: cannot add segment {segment}")
        self._segments.append(segment)

    @property
    def segments(self) -> Tuple[RouteSegment, ...]:
        return tuple(self._segments)

    @property
    def count(self) -> int:
        return len(self._segments)

    @property
    def is_empty(self) -> bool:
        return not self._segments

    @property
    def from_station(self) -> Optional[Station]:
        """Station where the journey starts, None for an empty route."""
        return self._segments[0].from_station if self._segments else None

    @property
    def to_station(self) -> Optional[Station]:
        """Station where the journey ends, None for an empty route."""
        return self._segments[-1].to_station if self._segments else None

    @property
    def changes_required(self) -> int:
        """Number of line changes on this route."""
        return max(len(self._segments) - 1, 0)

    @property
    def stop_count(self) -> int:
        """Total number of stops travelled."""
        return sum(segment.hop_count for segment in self._segments)

    @property
    def lines_used(self) -> List[Line]:
        """Lines used on this route, in travel order."""
        lines: List[Line] = []
        for segment in self._segments:
            if segment.line not in lines:
                lines.append(segment.line)
        return lines

    @property
    def transfer_stations(self) -> List[Station]:
        """Stations where a change of line is required."""
        return [segment.to_station for segment in self._segments[:-1]]

    def get_route_description(self) -> str:
        """Get a human-readable one-line description of the route."""
        if not self._segments:
            return "No journey"
        if len(self._segments) == 1:
            return f"Direct service on {self._segments[0].line.code}"

        codes = [segment.line.code for segment in self._segments]
        changes = self.changes_required
        if changes == 1:
            return f"Change once - via {codes[0]} then {codes[1]}"
        return f"{changes} changes required via {', '.join(codes)}"

    def get_detailed_description(self) -> List[str]:
        """Get detailed step-by-step route description."""
        steps = []

        for i, segment in enumerate(self._segments):
            verb = "Board" if i == 0 else "Change to"
            steps.append(f"{verb} {segment.line.code} at {segment.from_station} "
                         f"towards {segment.direction}")

            stops = segment.hop_count
            suffix = "stop" if stops == 1 else "stops"
            circular = ", via the circular connection" if segment.uses_circular else ""
            steps.append(f"Travel to {segment.to_station} ({stops} {suffix}{circular})")

        return steps

    def to_dict(self) -> Dict[str, Any]:
        """Convert route to dictionary representation."""
        return {
            "from_station": self.from_station.code if self.from_station else None,
            "to_station": self.to_station.code if self.to_station else None,
            "segments": [segment.to_dict() for segment in self._segments],
            "changes_required": self.changes_required,
            "stop_count": self.stop_count,
            "lines_used": [line.code for line in self.lines_used],
            "transfer_stations": [station.code for station in self.transfer_stations],
            "route_description": self.get_route_description(),
            "detailed_description": self.get_detailed_description()
        }

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[RouteSegment]:
        return iter(self._segments)

    def __getitem__(self, index: int) -> RouteSegment:
        return self._segments[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self._segments == other._segments

    def __str__(self) -> str:
        """String representation of the route."""
        if not self._segments:
            return "Route(empty)"
        return f"{self.from_station} → {self.to_station} ({self.get_route_description()})"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return f"Route(segments={len(self._segments)}, changes={self.changes_required})"
