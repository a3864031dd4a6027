"""
Station Model

Pure data model for metro stations, identified by their code.
"""

from dataclasses import dataclass, field
from typing import Dict, Any

from ..exceptions import IllegalRequestError


@dataclass(frozen=True)
class Station:
    """
    Immutable data class representing a metro station.

    Two stations are equal when their codes are equal; the name is for display only.
    """

    code: str
    name: str = field(compare=False)

    def __post_init__(self):
        """Validate station data after initialization."""
        if not self.code or not self.code.strip():
            raise IllegalRequestError("Station code cannot be empty")
        if not self.name or not self.name.strip():
            raise IllegalRequestError("Station name cannot be empty")

    def get_display_name(self) -> str:
        """Get the display name for the station."""
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        """Convert station to dictionary representation."""
        return {
            "code": self.code,
            "name": self.name
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Station':
        """Create Station from dictionary representation."""
        return cls(code=data["code"], name=data["name"])

    def __str__(self) -> str:
        """String representation of the station."""
        return self.name

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return f"Station(code='{self.code}', name='{self.name}')"
