"""
Plan Result Model

Tagged outcome of a planning request, separating "already there" from "no way there".
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from .route import Route


class RouteOutcome(Enum):
    """Outcome of a planning request."""
    TRIVIAL = "trivial"
    FOUND = "found"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class PlanResult:
    """A planned route together with the outcome that produced it."""

    outcome: RouteOutcome
    route: Route = field(default_factory=Route)

    @property
    def is_found(self) -> bool:
        return self.outcome is RouteOutcome.FOUND

    def to_dict(self) -> Dict[str, Any]:
        """Convert plan result to dictionary representation."""
        return {
            "outcome": self.outcome.value,
            "route": self.route.to_dict()
        }
