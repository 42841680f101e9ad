"""Unit tests for the sequencer registry."""

import pytest

from routekit.core_types import Coordinate, Point, Route
from routekit.registry import SEQUENCER_REGISTRY, get_sequencer, register_sequencer
from routekit.sequencing import NearestNeighborSequencer, PriorityNearestNeighborSequencer


def test_builtins_registered():
    assert isinstance(get_sequencer("priority_nearest_neighbor"), PriorityNearestNeighborSequencer)
    assert isinstance(get_sequencer("nearest_neighbor"), NearestNeighborSequencer)


def test_unknown_sequencer():
    with pytest.raises(ValueError, match="Unknown sequencing method: zigzag"):
        get_sequencer("zigzag")


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError, match="already registered"):
        register_sequencer("nearest_neighbor")(NearestNeighborSequencer)


def test_custom_sequencer_round_trip():
    @register_sequencer("input_order")
    class InputOrderSequencer:
        def sequence(self, points, start):
            return Route(ordered_points=points, total_distance_km=0.0)

    try:
        route = get_sequencer("input_order").sequence([Point("b", 1, 1), Point("a", 0, 0)], Coordinate(0, 0))
        assert route.ids == ["b", "a"]
    finally:
        SEQUENCER_REGISTRY.pop("input_order")
