"""
Text Network Repository

Repository implementation for metro networks stored in the line-oriented text
format:

    # comment
    name:<network name>
    station:<code>:<name>
    line:<code>:<circular 0|1>:<oneway 0|1>:<code>-<code>-...

Blank lines and comments are ignored, and records with an unknown identifier
are skipped. Stations have to be declared before the lines that use them.
"""

import logging
from pathlib import Path
from typing import Dict, List, Union

from ..exceptions import IllegalRequestError, NetworkFormatError
from ..interfaces.i_network_repository import INetworkRepository
from ..models.line import Line
from ..models.network import Network
from ..models.station import Station

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ":"
STOP_SEPARATOR = "-"
COMMENT_PREFIX = "#"

_FLAGS = {"0": False, "1": True}


def _parse_flag(value: str, field_name: str, line_number: int) -> bool:
    try:
        return _FLAGS[value.strip()]
    except KeyError:
        raise NetworkFormatError(f"{field_name} flag must be 0 or 1, got '{value}'", line_number)


def parse_network(text: str) -> Network:
    """
    Parse a network from its text representation.

    Args:
        text: Network in the text format

    Returns:
        Parsed Network

    Raises:
        NetworkFormatError: If a record is malformed or refers to an unknown station
    """
    name = ""
    stations: Dict[str, Station] = {}
    lines: Dict[str, Line] = {}

    for line_number, raw in enumerate(text.splitlines(), start=1):
        record = raw.strip()
        if not record or record.startswith(COMMENT_PREFIX):
            continue

        fields = record.split(FIELD_SEPARATOR)
        identifier = fields[0].strip()

        try:
            if identifier == "name":
                if len(fields) < 2:
                    raise NetworkFormatError("name record without a value", line_number)
                name = FIELD_SEPARATOR.join(fields[1:]).strip()

            elif identifier == "station":
                if len(fields) < 3:
                    raise NetworkFormatError("station record needs a code and a name", line_number)
                code = fields[1].strip()
                if code in stations:
                    raise NetworkFormatError(f"duplicate station code '{code}'", line_number)
                stations[code] = Station(code, FIELD_SEPARATOR.join(fields[2:]).strip())

            elif identifier == "line":
                if len(fields) < 4:
                    raise NetworkFormatError(
                        "line record needs a code, circular and one-way flags", line_number
                    )
                code = fields[1].strip()
                if code in lines:
                    raise NetworkFormatError(f"duplicate line code '{code}'", line_number)
                circular = _parse_flag(fields[2], "circular", line_number)
                one_way = _parse_flag(fields[3], "one-way", line_number)

                stops: List[Station] = []
                stop_codes = fields[4].strip() if len(fields) > 4 else ""
                for stop_code in filter(None, (c.strip() for c in stop_codes.split(STOP_SEPARATOR))):
                    if stop_code not in stations:
                        raise NetworkFormatError(
                            f"line '{code}' uses undeclared station '{stop_code}'", line_number
                        )
                    stops.append(stations[stop_code])
                lines[code] = Line(code, tuple(stops), circular=circular, one_way=one_way)

            else:
                logger.debug(f"Skipping record with unknown identifier '{identifier}' on line {line_number}")

        except NetworkFormatError:
            raise
        except IllegalRequestError as e:
            raise NetworkFormatError(str(e), line_number) from e

    return Network(stations.values(), lines.values(), name=name)


def _check_writable(value: str, what: str, forbidden: str = "") -> None:
    """Reject values the parser would not read back unchanged."""
    if value != value.strip() or "\n" in value or "\r" in value:
        raise IllegalRequestError(f"{what} '{value}' has surrounding whitespace or a line break")
    for separator in forbidden:
        if separator in value:
            raise IllegalRequestError(f"{what} '{value}' contains the separator '{separator}'")


def format_network(network: Network) -> str:
    """
    Render a network in the text format.

    Raises:
        IllegalRequestError: If a code or name cannot be written so that it
            parses back to the same value
    """
    _check_writable(network.name, "network name")
    for station in network.stations:
        _check_writable(station.code, "station code", FIELD_SEPARATOR + STOP_SEPARATOR)
        _check_writable(station.name, "station name")
    for line in network.lines:
        _check_writable(line.code, "line code", FIELD_SEPARATOR)

    records = [f"name{FIELD_SEPARATOR}{network.name}"]
    for station in network.stations:
        records.append(FIELD_SEPARATOR.join(["station", station.code, station.name]))
    for line in network.lines:
        records.append(FIELD_SEPARATOR.join([
            "line",
            line.code,
            "1" if line.circular else "0",
            "1" if line.one_way else "0",
            STOP_SEPARATOR.join(station.code for station in line)
        ]))
    return "\n".join(records) + "\n"


class TextNetworkRepository(INetworkRepository):
    """Repository implementation for text-based network files."""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the text network repository.

        Args:
            path: Path to the network file
        """
        self.path = Path(path)
        self.logger = logging.getLogger(__name__)

    def load_network(self) -> Network:
        self.logger.info(f"Loading network from {self.path}")
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise NetworkFormatError(f"cannot read network file {self.path}: {e}") from e

        try:
            network = parse_network(text)
        except NetworkFormatError as e:
            self.logger.error(f"Malformed network file {self.path}: {e}")
            raise

        self.logger.info(f"Loaded {len(network.stations)} stations and {len(network.lines)} lines")
        return network

    def save_network(self, network: Network) -> None:
        text = format_network(network)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")
        self.logger.info(f"Saved network '{network.name}' to {self.path}")
