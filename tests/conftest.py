import logging
import os
from unittest.mock import patch

import pytest

from routekit.core_types import Point
from routekit.utils.logging import RoutekitLogger


@pytest.fixture(autouse=True)
def _isolate_logging_state():
    """CLI commands call setup_logging, which touches env vars and root handlers."""
    saved_level = RoutekitLogger.get_level()
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_root_level = root.level
    with patch.dict(os.environ):
        yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_root_level)
    RoutekitLogger.set_level(saved_level)


class FirstIndexRng:
    """Random source stub that always picks index 0 for the first centroid."""

    def randrange(self, n):
        return 0


@pytest.fixture
def first_index_rng():
    return FirstIndexRng()


@pytest.fixture
def two_pairs():
    """Two tight pairs roughly 1500 km apart."""
    return [
        Point("A", 0.0, 0.0),
        Point("B", 0.0, 1.0),
        Point("C", 10.0, 10.0),
        Point("D", 10.0, 11.0),
    ]


@pytest.fixture
def three_groups():
    """Three groups of four points, each group spanning about a kilometre."""
    centers = {"north": (10.0, 0.0), "east": (0.0, 10.0), "origin": (0.0, 0.0)}
    offsets = [(0.0, 0.0), (0.01, 0.0), (0.0, 0.01), (0.01, 0.01)]
    points = []
    for name, (lat, lon) in centers.items():
        for i, (dlat, dlon) in enumerate(offsets):
            points.append(Point(f"{name}-{i}", lat + dlat, lon + dlon))
    return points
