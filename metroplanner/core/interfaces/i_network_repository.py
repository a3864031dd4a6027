"""
Network Repository Interface

Interface for loading and storing metro networks.
"""

from abc import ABC, abstractmethod

from ..models.network import Network


class INetworkRepository(ABC):
    """Interface for network repository operations."""

    @abstractmethod
    def load_network(self) -> Network:
        """
        Load the network from the data source.

        Returns:
            Network object

        Raises:
            NetworkFormatError: If the data source is malformed
        """
        pass

    @abstractmethod
    def save_network(self, network: Network) -> None:
        """
        Store a network in the data source.

        Args:
            network: Network to store
        """
        pass
