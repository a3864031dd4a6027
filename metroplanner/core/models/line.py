"""
Line Model

Data model for metro lines: an ordered sequence of stops that may be circular,
one-way, or both.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Iterator, Optional, Tuple

from ..exceptions import IllegalRequestError
from .station import Station


@dataclass(frozen=True)
class Line:
    """
    Represents a metro line with its stops and traversal flags.

    A circular line has an implicit connection from its last stop back to its
    first. A one-way line may only be travelled in the direction of increasing
    stop index (plus the circular wrap, if any). Lines compare by code.
    """

    code: str
    stations: Tuple[Station, ...] = field(default=(), compare=False)
    circular: bool = field(default=False, compare=False)
    one_way: bool = field(default=False, compare=False)
    _positions: Dict[Station, int] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        """Validate line data and index the stops."""
        if not self.code or not self.code.strip():
            raise IllegalRequestError("Line code cannot be empty")

        stations = tuple(self.stations)
        positions: Dict[Station, int] = {}
        for index, station in enumerate(stations):
            if station is None:
                raise IllegalRequestError(f"Line {self.code}: stop {index} is None")
            if station in positions:
                raise IllegalRequestError(
                    f"Line {self.code}: station {station.code} appears more than once"
                )
            positions[station] = index

        object.__setattr__(self, 'stations', stations)
        object.__setattr__(self, '_positions', positions)

    @property
    def count(self) -> int:
        """Get the number of stops on this line."""
        return len(self.stations)

    @property
    def is_empty(self) -> bool:
        """Check if this line has no stops."""
        return not self.stations

    @property
    def terminal_a(self) -> Optional[Station]:
        """First stop on the line, or None for an empty line."""
        return self.stations[0] if self.stations else None

    @property
    def terminal_b(self) -> Optional[Station]:
        """Last stop on the line, or None for an empty line."""
        return self.stations[-1] if self.stations else None

    def get_stop(self, index: int) -> Station:
        """Get the stop at the given index."""
        if index < 0 or index >= len(self.stations):
            raise IndexError(f"Line {self.code}: stop index {index} out of bounds")
        return self.stations[index]

    def get_index(self, station: Station) -> int:
        """Get the index of a station on this line, or -1 if it isn't served."""
        if station is None:
            raise IllegalRequestError(f"Line {self.code}: station is None")
        return self._positions.get(station, -1)

    def has_station(self, station: Station) -> bool:
        """Check if this line serves the given station."""
        return station in self._positions

    def get_direction(self, from_station: Station, to_station: Station) -> Tuple[Station, bool]:
        """
        Get the direction of travel between two stops on this line.

        Args:
            from_station: Stop where travel starts
            to_station: Stop where travel ends

        Returns:
            Tuple of the terminal the train is heading towards and whether the
            journey uses the circular connection between the terminals
        """
        from_index = self.get_index(from_station)
        to_index = self.get_index(to_station)
        if from_index == -1 or to_index == -1:
            raise IllegalRequestError(
                f"Line {self.code} does not serve both {from_station} and {to_station}"
            )

        if self.one_way:
            # Travelling to a lower index is only possible over the wrap
            return self.terminal_b, to_index < from_index

        towards_b = self.terminal_b if from_index < to_index else self.terminal_a
        if self.circular:
            direct = abs(to_index - from_index)
            wrap = self.count - direct
            if wrap < direct:
                terminal = self.terminal_b if to_index < from_index else self.terminal_a
                return terminal, True
        return towards_b, False

    def to_dict(self) -> Dict[str, Any]:
        """Convert line to dictionary representation."""
        return {
            "code": self.code,
            "stations": [station.code for station in self.stations],
            "circular": self.circular,
            "one_way": self.one_way,
            "terminal_a": self.terminal_a.code if self.terminal_a else None,
            "terminal_b": self.terminal_b.code if self.terminal_b else None
        }

    def __str__(self) -> str:
        """String representation of the line."""
        return self.code

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (f"Line(code='{self.code}', "
                f"stations={self.count}, "
                f"circular={self.circular}, "
                f"one_way={self.one_way})")

    def __contains__(self, station: Station) -> bool:
        """Support 'in' operator for checking if station is on line."""
        return self.has_station(station)

    def __len__(self) -> int:
        """Support len() function to get stop count."""
        return self.count

    def __iter__(self) -> Iterator[Station]:
        """Support iteration over stops."""
        return iter(self.stations)
