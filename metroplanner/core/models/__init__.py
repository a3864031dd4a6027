"""
Core Models Package

Data models for metro networks, planner search state and planned routes.
"""

from .station import Station
from .line import Line
from .network import Network
from .route import Route, RouteSegment
from .plan_result import PlanResult, RouteOutcome
from .search_state import DiscoveryState, StationRecord, LineRecord, INFINITE_DISTANCE

__all__ = [
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
    'INFINITE_DISTANCE'
]
