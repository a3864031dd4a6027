"""
Unit tests for Route, RouteSegment, PlanResult and the search state records.
"""

import math

import pytest

from metroplanner.core.exceptions import IllegalRequestError
from metroplanner.core.models import (
    DiscoveryState,
    Line,
    LineRecord,
    PlanResult,
    Route,
    RouteOutcome,
    RouteSegment,
    Station,
    StationRecord,
)


@pytest.fixture
def stops():
    return [Station(code, f"Station {code}") for code in "ABCDE"]


@pytest.fixture
def trunk(stops):
    return Line("L1", tuple(stops[:3]))


@pytest.fixture
def branch(stops):
    return Line("L4", (stops[1], stops[3], stops[4]))


@pytest.fixture
def two_segment_route(stops, trunk, branch):
    a, b, c, d, e = stops
    return Route([
        RouteSegment(trunk, a, b, c),
        RouteSegment(branch, b, e, e),
    ])


class TestRouteSegment:
    """Test RouteSegment model."""

    def test_segment_creation(self, stops, trunk):
        a, b, c = stops[:3]
        segment = RouteSegment(trunk, a, c, c)

        assert segment.line == trunk
        assert segment.from_station == a
        assert segment.to_station == c
        assert segment.direction == c
        assert segment.uses_circular is False
        assert segment.hop_count == 2

    @pytest.mark.parametrize("field_index", range(4))
    def test_segment_rejects_none(self, stops, trunk, field_index):
        """All four core fields are required."""
        a, b, c = stops[:3]
        values = [trunk, a, b, c]
        values[field_index] = None

        with pytest.raises(IllegalRequestError):
            RouteSegment(*values)

    def test_segment_immutable(self, stops, trunk):
        segment = RouteSegment(trunk, stops[0], stops[1], stops[2])

        with pytest.raises(AttributeError):
            segment.to_station = stops[2]

    def test_segment_copies_reject_none(self, stops, trunk):
        segment = RouteSegment(trunk, stops[0], stops[1], stops[2])

        with pytest.raises(IllegalRequestError):
            segment.with_to_station(None)
        with pytest.raises(IllegalRequestError):
            segment.with_direction(None, False)

    def test_segment_copies(self, stops, trunk):
        a, b, c = stops[:3]
        segment = RouteSegment(trunk, a, b, c)

        extended = segment.with_to_station(c)
        turned = segment.with_direction(a, True)

        assert extended.to_station == c
        assert extended.from_station == a
        assert turned.direction == a
        assert turned.uses_circular is True
        assert segment.to_station == b

    def test_hop_count_over_circular_connection(self, stops):
        a, b, c, d, e = stops
        loop = Line("LOOP", (a, b, c, d, e), circular=True)

        assert RouteSegment(loop, a, e, a, True).hop_count == 1
        assert RouteSegment(loop, d, b, a, True).hop_count == 3
        assert RouteSegment(loop, a, c, e, False).hop_count == 2

    def test_segment_structural_equality(self, stops, trunk):
        a, b, c = stops[:3]

        assert RouteSegment(trunk, a, b, c) == RouteSegment(trunk, a, b, c)
        assert RouteSegment(trunk, a, b, c) != RouteSegment(trunk, a, b, c, True)


class TestRoute:
    """Test Route model."""

    def test_empty_route(self):
        route = Route()

        assert route.is_empty
        assert route.count == 0
        assert len(route) == 0
        assert route.from_station is None
        assert route.to_station is None
        assert route.changes_required == 0
        assert route.stop_count == 0
        assert route.get_route_description() == "No journey"

    def test_route_rejects_none_segment(self):
        with pytest.raises(IllegalRequestError):
            Route().add(None)

    def test_route_rejects_duplicate_segment(self, stops, trunk):
        route = Route()
        route.add(RouteSegment(trunk, stops[0], stops[1], stops[2]))

        assert not route.can_add(RouteSegment(trunk, stops[0], stops[1], stops[2]))
        with pytest.raises(IllegalRequestError):
            route.add(RouteSegment(trunk, stops[0], stops[1], stops[2]))
        assert route.count == 1

    def test_route_summaries(self, stops, trunk, branch, two_segment_route):
        a, b, c, d, e = stops
        route = two_segment_route

        assert route.count == 2
        assert route.from_station == a
        assert route.to_station == e
        assert route.changes_required == 1
        assert route.stop_count == 3
        assert route.lines_used == [trunk, branch]
        assert route.transfer_stations == [b]
        assert route[1].line == branch
        assert [segment.line.code for segment in route] == ["L1", "L4"]

    def test_route_descriptions(self, two_segment_route):
        route = two_segment_route

        assert route.get_route_description() == "Change once - via L1 then L4"
        assert route.get_detailed_description() == [
            "Board L1 at Station A towards Station C",
            "Travel to Station B (1 stop)",
            "Change to L4 at Station B towards Station E",
            "Travel to Station E (2 stops)",
        ]

    def test_direct_route_description(self, stops, trunk):
        route = Route([RouteSegment(trunk, stops[0], stops[2], stops[2])])

        assert route.get_route_description() == "Direct service on L1"

    def test_route_to_dict(self, two_segment_route):
        data = two_segment_route.to_dict()

        assert data["from_station"] == "A"
        assert data["to_station"] == "E"
        assert data["lines_used"] == ["L1", "L4"]
        assert data["transfer_stations"] == ["B"]
        assert data["segments"][0] == {
            "line": "L1",
            "from_station": "A",
            "to_station": "B",
            "direction": "C",
            "uses_circular": False,
            "stops": 1,
        }

    def test_route_equality(self, stops, trunk):
        segment = RouteSegment(trunk, stops[0], stops[1], stops[2])

        assert Route([segment]) == Route([segment])
        assert Route([segment]) != Route()


class TestPlanResult:
    """Test PlanResult model."""

    def test_plan_result_defaults_to_empty_route(self):
        result = PlanResult(RouteOutcome.UNREACHABLE)

        assert result.route.is_empty
        assert not result.is_found
        assert result.to_dict()["outcome"] == "unreachable"


class TestSearchRecords:
    """Test the per-search station and line records."""

    def test_station_record_defaults(self):
        record = StationRecord()

        assert record.state is DiscoveryState.UNDISCOVERED
        assert record.parent is None
        assert record.distance == math.inf
        assert record.line is None
        assert record.is_undiscovered

    def test_station_record_discover_and_settle(self, stops, trunk):
        record = StationRecord()

        record.discover(parent=stops[0], distance=1, line=trunk)
        assert record.state is DiscoveryState.FRONTIER
        assert record.parent == stops[0]
        assert record.distance == 1
        assert record.line == trunk

        record.settle()
        assert record.state is DiscoveryState.SETTLED

    def test_station_record_rejects_negative_distance(self):
        with pytest.raises(IllegalRequestError):
            StationRecord(distance=-1)
        with pytest.raises(IllegalRequestError):
            StationRecord().discover(parent=None, distance=-1, line=None)

    def test_station_record_discovered_once(self):
        record = StationRecord()
        record.discover(parent=None, distance=0, line=None)

        with pytest.raises(IllegalRequestError):
            record.discover(parent=None, distance=0, line=None)

    def test_line_record_discover(self, stops, trunk):
        record = LineRecord()
        assert record.is_undiscovered

        record.discover(parent=trunk, entry=stops[1])
        assert record.state is DiscoveryState.FRONTIER
        assert record.parent == trunk
        assert record.entry == stops[1]

        with pytest.raises(IllegalRequestError):
            record.discover(parent=None, entry=stops[0])

    def test_line_record_requires_entry(self):
        with pytest.raises(IllegalRequestError):
            LineRecord().discover(parent=None, entry=None)
