"""
Core Package

Core services, interfaces, and models for the metro planner.
"""

# Import exceptions
from .exceptions import IllegalRequestError, NetworkFormatError

# Import interfaces
from .interfaces import IPlanner, INetworkRepository

# Import models
from .models import (
    Station, Line, Network, Route, RouteSegment, PlanResult, RouteOutcome,
    DiscoveryState, StationRecord, LineRecord
)

# Import services
from .services import (
    MinStopsPlanner, MinTransfersPlanner, TextNetworkRepository, PlannerFactory,
    PlanningObjective, create_planner, parse_network, format_network
)

__all__ = [
    # Exceptions
    'IllegalRequestError',
    'NetworkFormatError',

    # Interfaces
    'IPlanner',
    'INetworkRepository',

    # Models
    'Station',
    'Line',
    'Network',
    'Route',
    'RouteSegment',
    'PlanResult',
    'RouteOutcome',
    'DiscoveryState',
    'StationRecord',
    'LineRecord',

    # Services
    'MinStopsPlanner',
    'MinTransfersPlanner',
    'TextNetworkRepository',
    'PlannerFactory',
    'PlanningObjective',
    'create_planner',
    'parse_network',
    'format_network'
]
