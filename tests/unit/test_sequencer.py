"""Unit tests for route sequencing."""

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from routekit.core_types import Coordinate, Point, Route
from routekit.geometry import haversine_distance_km
from routekit.sequencing import (
    NearestNeighborSequencer,
    PriorityNearestNeighborSequencer,
    nearest_neighbor_order,
    route_distance,
    sequence_route,
)

ORIGIN = Coordinate(0.0, 0.0)


def test_empty_input_gives_empty_route():
    route = sequence_route([], ORIGIN)
    assert route.ordered_points == ()
    assert route.total_distance_km == 0.0
    assert len(route) == 0


def test_two_pairs_visited_pair_by_pair(two_pairs):
    route = sequence_route(two_pairs, ORIGIN)

    assert route.ids == ["A", "B", "C", "D"]
    expected = (
        haversine_distance_km(0, 0, 0, 1)
        + haversine_distance_km(0, 1, 10, 10)
        + haversine_distance_km(10, 10, 10, 11)
    )
    assert route.total_distance_km == pytest.approx(expected)


def test_start_leg_is_included():
    point = Point("only", 1.0, 0.0)
    route = sequence_route([point], ORIGIN)
    assert route.total_distance_km == pytest.approx(haversine_distance_km(0, 0, 1, 0))


def test_higher_priority_tier_exhausted_first():
    points = [
        Point("near", 0.0, 0.1, priority=0),
        Point("far-urgent", 5.0, 5.0, priority=2),
        Point("mid", 1.0, 1.0, priority=1),
        Point("far-urgent-2", 5.0, 5.5, priority=2),
    ]
    route = sequence_route(points, ORIGIN)
    assert route.ids == ["far-urgent", "far-urgent-2", "mid", "near"]


def test_nearest_neighbor_within_tier_continues_from_previous_tier():
    points = [
        Point("low-west", 0.0, -1.0, priority=0),
        Point("low-east", 0.0, 9.0, priority=0),
        Point("urgent", 0.0, 10.0, priority=1),
    ]
    route = sequence_route(points, ORIGIN)
    # After the urgent stop the walk resumes from (0, 10), so east comes first
    assert route.ids == ["urgent", "low-east", "low-west"]


def test_exact_ties_follow_input_order():
    west = Point("west", 0.0, -1.0)
    east = Point("east", 0.0, 1.0)

    assert sequence_route([west, east], ORIGIN).ids[0] == "west"
    assert sequence_route([east, west], ORIGIN).ids[0] == "east"


def test_zero_coordinate_is_a_real_stop():
    points = [Point("null-island", 0.0, 0.0), Point("other", 0.0, 2.0)]
    route = sequence_route(points, Coordinate(0.0, 3.0))
    assert route.ids == ["other", "null-island"]


def test_input_list_is_not_modified(two_pairs):
    snapshot = list(two_pairs)
    sequence_route(list(reversed(two_pairs)), ORIGIN)
    assert two_pairs == snapshot


def test_nearest_neighbor_order_ignores_priority():
    points = [
        Point("far-urgent", 5.0, 5.0, priority=9),
        Point("near", 0.0, 0.1, priority=0),
    ]
    assert [p.id for p in nearest_neighbor_order(points, ORIGIN)] == ["near", "far-urgent"]


def test_route_distance_of_empty_list_is_zero():
    assert route_distance([], ORIGIN) == 0.0


def test_sequencer_classes_wrap_functions(two_pairs):
    urgent = Point("urgent", 10.0, 11.5, priority=1)
    points = two_pairs + [urgent]

    by_priority = PriorityNearestNeighborSequencer().sequence(points, ORIGIN)
    plain = NearestNeighborSequencer().sequence(points, ORIGIN)

    assert isinstance(by_priority, Route)
    assert by_priority.ids[0] == "urgent"
    assert plain.ids == ["A", "B", "C", "D", "urgent"]
    assert plain.total_distance_km == pytest.approx(route_distance(plain.ordered_points, ORIGIN))


points_strategy = st.lists(
    st.tuples(
        st.floats(min_value=-80, max_value=80, allow_nan=False),
        st.floats(min_value=-170, max_value=170, allow_nan=False),
        st.integers(min_value=0, max_value=3),
    ),
    max_size=25,
).map(lambda rows: [Point(f"p{i}", lat, lon, pri) for i, (lat, lon, pri) in enumerate(rows)])


@settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(points=points_strategy)
def test_route_is_priority_ordered_permutation(points):
    route = sequence_route(points, ORIGIN)

    assert sorted(route.ids) == sorted(p.id for p in points)
    assert len(set(route.ids)) == len(points)

    priorities = [p.priority for p in route]
    assert priorities == sorted(priorities, reverse=True)

    assert route.total_distance_km == pytest.approx(route_distance(route.ordered_points, ORIGIN))
