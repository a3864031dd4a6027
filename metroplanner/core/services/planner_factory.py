"""
Planner Factory

Factory for creating journey planners by optimisation objective.
"""

import logging
from enum import Enum
from typing import Dict, Union

from ..exceptions import IllegalRequestError
from ..interfaces.i_planner import IPlanner
from ..models.network import Network
from .min_stops_planner import MinStopsPlanner
from .min_transfers_planner import MinTransfersPlanner


class PlanningObjective(str, Enum):
    """What a journey is optimised for."""
    STOPS = "stops"
    TRANSFERS = "transfers"


_PLANNERS = {
    PlanningObjective.STOPS: MinStopsPlanner,
    PlanningObjective.TRANSFERS: MinTransfersPlanner,
}


def _as_objective(objective: Union[PlanningObjective, str]) -> PlanningObjective:
    try:
        return PlanningObjective(objective)
    except ValueError:
        raise IllegalRequestError(f"Unknown planning objective '{objective}'")


def create_planner(objective: Union[PlanningObjective, str], network: Network) -> IPlanner:
    """Create a planner for the given objective."""
    return _PLANNERS[_as_objective(objective)](network)


class PlannerFactory:
    """Factory handing out one planner per objective for a network."""

    def __init__(self, network: Network):
        """
        Initialize the planner factory.

        Args:
            network: Network all created planners work on
        """
        self.network = network
        self.logger = logging.getLogger(__name__)
        self._planners: Dict[PlanningObjective, IPlanner] = {}

    def get_planner(self, objective: Union[PlanningObjective, str]) -> IPlanner:
        """Get or create the planner for an objective."""
        objective = _as_objective(objective)
        if objective not in self._planners:
            self._planners[objective] = create_planner(objective, self.network)
            self.logger.info(f"Created {type(self._planners[objective]).__name__} instance")
        return self._planners[objective]
