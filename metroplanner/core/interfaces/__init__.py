"""
Core Interfaces Package

Interface definitions for the metro planner services.
"""

from .i_planner import IPlanner
from .i_network_repository import INetworkRepository

__all__ = [
    'IPlanner',
    'INetworkRepository'
]
