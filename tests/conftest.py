"""
Global pytest configuration and fixtures.

Networks are described line by line as (code, "A-B-C", circular, one_way);
stations are created from the codes in order of first appearance.
"""

from pathlib import Path

import pytest

from metroplanner.core.models import Line, Network, Station
from metroplanner.core.services import TextNetworkRepository

SAMPLE_NETWORK_PATH = Path(__file__).parent.parent / "metroplanner" / "data" / "sample_network.txt"


def make_network(*line_specs, name="Test Metro"):
    """Build a network from (code, stops, circular, one_way) tuples."""
    stations = {}
    lines = []
    for code, stops, circular, one_way in line_specs:
        line_stations = []
        for stop_code in filter(None, stops.split("-")):
            if stop_code not in stations:
                stations[stop_code] = Station(stop_code, f"Station {stop_code}")
            line_stations.append(stations[stop_code])
        lines.append(Line(code, tuple(line_stations), circular=circular, one_way=one_way))
    return Network(stations.values(), lines, name=name)


@pytest.fixture
def build_network():
    """Provide the network builder to tests that need custom topologies."""
    return make_network


@pytest.fixture
def linear_network():
    """A single linear bidirectional line L1 = [A, B, C]."""
    return make_network(("L1", "A-B-C", False, False))


@pytest.fixture
def circular_network():
    """A single circular bidirectional line L2 = [A, B, C, D]."""
    return make_network(("L2", "A-B-C-D", True, False))


@pytest.fixture
def one_way_network():
    """A single one-way linear line L3 = [A, B, C]."""
    return make_network(("L3", "A-B-C", False, True))


@pytest.fixture
def one_way_circular_network():
    """A single one-way circular line L5 = [A, B, C, D]."""
    return make_network(("L5", "A-B-C-D", True, True))


@pytest.fixture
def transfer_network():
    """Two lines sharing station B: L1 = [A, B, C] and L4 = [B, D, E]."""
    return make_network(
        ("L1", "A-B-C", False, False),
        ("L4", "B-D-E", False, False),
    )


@pytest.fixture
def sample_network_path():
    """Path to the packaged sample network file."""
    return SAMPLE_NETWORK_PATH


@pytest.fixture
def sample_network():
    """The packaged sample network: RED trunk, LOOP circle and EXP one-way shuttle."""
    return TextNetworkRepository(SAMPLE_NETWORK_PATH).load_network()

