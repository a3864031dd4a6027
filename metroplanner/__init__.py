"""
Metro Planner

Journey planning on metro networks, optimising either for the fewest stops or
for the fewest changes of line.
"""

from .version import __version__
__author__ = "Metro Planner Development Team"
__description__ = "Metro journey planner"
