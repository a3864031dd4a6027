"""
Network Model

Read-only collection of the stations and lines that make up a metro network.
"""

from typing import Dict, Iterable, List, Optional, Any

from ..exceptions import IllegalRequestError
from .line import Line
from .station import Station


class Network:
    """
    A metro network: stations and lines, both unique by code.

    Stations and lines keep the order they were given in; the planners rely on
    that order when breaking ties between equally good journeys.
    """

    def __init__(self, stations: Iterable[Station] = (), lines: Iterable[Line] = (),
                 name: str = ""):
        """
        Initialize the network.

        Args:
            stations: Stations in the network
            lines: Lines in the network, each using only stations of the network
            name: Display name of the network

        Raises:
            IllegalRequestError: If codes are duplicated or a line uses an unknown station
        """
        self.name = name
        self._stations: Dict[str, Station] = {}
        self._lines: Dict[str, Line] = {}

        for station in stations:
            if station is None:
                raise IllegalRequestError("Network: station is None")
            if station.code in self._stations:
                raise IllegalRequestError(f"Network: duplicate station code '{station.code}'")
            self._stations[station.code] = station

        for line in lines:
            if line is None:
                raise IllegalRequestError("Network: line is None")
            if line.code in self._lines:
                raise IllegalRequestError(f"Network: duplicate line code '{line.code}'")
            for stop in line:
                if stop.code not in self._stations:
                    raise IllegalRequestError(
                        f"Network: line '{line.code}' uses unknown station '{stop.code}'"
                    )
            self._lines[line.code] = line

    @property
    def stations(self) -> List[Station]:
        """All stations, in insertion order."""
        return list(self._stations.values())

    @property
    def lines(self) -> List[Line]:
        """All lines, in insertion order."""
        return list(self._lines.values())

    def get_station(self, code: str) -> Optional[Station]:
        """Get a station by its code, or None if absent."""
        return self._stations.get(code)

    def get_line(self, code: str) -> Optional[Line]:
        """Get a line by its code, or None if absent."""
        return self._lines.get(code)

    def has_station(self, station: Station) -> bool:
        """Check if the station belongs to this network."""
        return station is not None and station.code in self._stations

    def lines_serving(self, station: Station) -> List[Line]:
        """Get all lines serving a station, in line order."""
        return [line for line in self._lines.values() if line.has_station(station)]

    def to_dict(self) -> Dict[str, Any]:
        """Convert network to dictionary representation."""
        return {
            "name": self.name,
            "stations": [station.to_dict() for station in self._stations.values()],
            "lines": [line.to_dict() for line in self._lines.values()]
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Network):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        """String representation of the network."""
        return f"{self.name or 'Network'} ({len(self._stations)} stations, {len(self._lines)} lines)"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (f"Network(name='{self.name}', "
                f"stations={len(self._stations)}, "
                f"lines={len(self._lines)})")
