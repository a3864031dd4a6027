"""
Managers Package

Application-level managers for the metro planner.
"""

from .config_manager import ConfigManager, ConfigData, ConfigurationError

__all__ = [
    'ConfigManager',
    'ConfigData',
    'ConfigurationError'
]
