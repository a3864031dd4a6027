"""
Core Services Package

Planner and repository implementations for the metro planner.
"""

from .min_stops_planner import MinStopsPlanner
from .min_transfers_planner import MinTransfersPlanner
from .text_network_repository import TextNetworkRepository, parse_network, format_network
from .planner_factory import PlannerFactory, PlanningObjective, create_planner

__all__ = [
    'MinStopsPlanner',
    'MinTransfersPlanner',
    'TextNetworkRepository',
    'parse_network',
    'format_network',
    'PlannerFactory',
    'PlanningObjective',
    'create_planner'
]
