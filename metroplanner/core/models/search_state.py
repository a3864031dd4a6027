"""
Search State Records

Per-search bookkeeping for the breadth-first planners. Records live in a dict
created by each planning call, keyed by station or line, and are thrown away
once the route has been reconstructed.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..exceptions import IllegalRequestError
from .line import Line
from .station import Station

INFINITE_DISTANCE = math.inf


class DiscoveryState(Enum):
    """Discovery state of a node in the breadth-first search."""
    UNDISCOVERED = "undiscovered"
    FRONTIER = "frontier"
    SETTLED = "settled"


@dataclass
class StationRecord:
    """Search state of a station while minimizing the number of stops."""

    state: DiscoveryState = DiscoveryState.UNDISCOVERED
    parent: Optional[Station] = None
    distance: Union[int, float] = INFINITE_DISTANCE
    line: Optional[Line] = None

    def __post_init__(self):
        if self.distance < 0:
            raise IllegalRequestError("StationRecord: distance cannot be negative")

    @property
    def is_undiscovered(self) -> bool:
        return self.state is DiscoveryState.UNDISCOVERED

    def discover(self, parent: Optional[Station], distance: int, line: Optional[Line]) -> None:
        """Move the station onto the frontier, reached from parent via line."""
        if not self.is_undiscovered:
            raise IllegalRequestError("StationRecord: station already discovered")
        if distance < 0:
            raise IllegalRequestError("StationRecord: distance cannot be negative")
        self.state = DiscoveryState.FRONTIER
        self.parent = parent
        self.distance = distance
        self.line = line

    def settle(self) -> None:
        self.state = DiscoveryState.SETTLED


@dataclass
class LineRecord:
    """Search state of a line while minimizing the number of transfers."""

    state: DiscoveryState = DiscoveryState.UNDISCOVERED
    parent: Optional[Line] = None
    entry: Optional[Station] = None

    @property
    def is_undiscovered(self) -> bool:
        return self.state is DiscoveryState.UNDISCOVERED

    def discover(self, parent: Optional[Line], entry: Station) -> None:
        """Move the line onto the frontier, boarded at entry after riding parent."""
        if not self.is_undiscovered:
            raise IllegalRequestError("LineRecord: line already discovered")
        if entry is None:
            raise IllegalRequestError("LineRecord: entry station is None")
        self.state = DiscoveryState.FRONTIER
        self.parent = parent
        self.entry = entry

    def settle(self) -> None:
        self.state = DiscoveryState.SETTLED
