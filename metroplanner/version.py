"""
Version information for the Metro Planner application.

Centralized version management for the package and the console front end.
"""

# Core application information
__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
__app_name__ = "MetroPlanner"
__app_display_name__ = "Metro Planner - Fewest Stops & Fewest Transfers Journeys"
__description__ = "Journey planner for metro networks with circular and one-way lines"

# Feature information
__features__ = [
    "Fewest-stops journeys (breadth-first search over stations)",
    "Fewest-transfers journeys (breadth-first search over lines)",
    "Circular and one-way line support",
    "Text network files",
]

__python_version_required__ = "3.9+"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_name__} v{__version__}"


def get_full_version_info() -> str:
    """Get comprehensive version information."""
    features = "\n".join(f"  - {feature}" for feature in __features__)
    return f"""
{__app_display_name__}
Version: {__version__}
Features:
{features}
"""
