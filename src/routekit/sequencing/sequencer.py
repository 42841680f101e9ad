"""
sequencer.py

Greedy route sequencing for a single driver's run. Two heuristics are provided:

* ``priority_nearest_neighbor``: urgent deliveries first, efficient path second. Points
  are grouped into priority tiers (highest first) and each tier is exhausted with a
  nearest-neighbor walk before any lower-priority point is considered, even if a
  lower-priority stop is geographically closer.
* ``nearest_neighbor``: the same walk ignoring priority; used to order the members of
  a geographic cluster.

Neither gives an optimality guarantee. When two candidates are exactly equidistant the
one appearing first in the input wins, so identical input always yields an identical
route.
"""

import itertools
from typing import List, Sequence

from routekit.core_types import Coordinate, Point, Route
from routekit.geometry import haversine_distance_km
from routekit.registry import register_sequencer
from routekit.utils.logging import RoutekitLogger

logger = RoutekitLogger.get_logger(__name__)


def _greedy_walk(pool: List[Point], current: Coordinate) -> tuple[List[Point], Coordinate]:
    """Visit every point of ``pool`` by repeatedly moving to the nearest one."""
    remaining = list(pool)
    ordered: List[Point] = []
    while remaining:
        # min() keeps the first of equal keys, which gives the input-order tie-break
        nearest_idx = min(
            range(len(remaining)),
            key=lambda i: haversine_distance_km(
                current.latitude, current.longitude,
                remaining[i].latitude, remaining[i].longitude,
            ),
        )
        nearest = remaining.pop(nearest_idx)
        ordered.append(nearest)
        current = nearest.coordinate
    return ordered, current


def route_distance(points: Sequence[Point], start: Coordinate) -> float:
    """Sum of consecutive haversine legs, starting with ``start`` -> first stop."""
    total = 0.0
    current = start
    for point in points:
        total += haversine_distance_km(
            current.latitude, current.longitude, point.latitude, point.longitude
        )
        current = point.coordinate
    return total


def nearest_neighbor_order(points: Sequence[Point], start: Coordinate) -> List[Point]:
    """Order ``points`` by a plain nearest-neighbor walk from ``start``."""
    ordered, _ = _greedy_walk(list(points), start)
    return ordered


def sequence_route(points: Sequence[Point], start: Coordinate) -> Route:
    """Priority-aware nearest-neighbor route from ``start``.

    Args:
        points: Delivery stops. Callers must drop records without a usable location
            beforehand; ``(0, 0)`` is treated as a real coordinate here.
        start: Where the driver currently is.

    Returns:
        Route visiting every point exactly once. Empty input gives an empty route of
        length 0.
    """
    if not points:
        return Route()

    # Stable sort keeps input order inside each tier
    by_priority = sorted(points, key=lambda p: p.priority, reverse=True)

    ordered: List[Point] = []
    current = start
    for priority, tier in itertools.groupby(by_priority, key=lambda p: p.priority):
        tier_points = list(tier)
        walked, current = _greedy_walk(tier_points, current)
        ordered.extend(walked)
        logger.debug(f"Sequenced {len(tier_points)} stops in priority tier {priority}")

    total = route_distance(ordered, start)
    logger.debug(f"Route of {len(ordered)} stops, {total:.3f} km")
    return Route(ordered_points=ordered, total_distance_km=total)


@register_sequencer('priority_nearest_neighbor')
class PriorityNearestNeighborSequencer:
    """Priority tiers first, nearest neighbor within each tier."""

    def sequence(self, points: Sequence[Point], start: Coordinate) -> Route:
        return sequence_route(points, start)


@register_sequencer('nearest_neighbor')
class NearestNeighborSequencer:
    """Nearest neighbor over all points, priority ignored."""

    def sequence(self, points: Sequence[Point], start: Coordinate) -> Route:
        ordered = nearest_neighbor_order(points, start)
        return Route(ordered_points=ordered, total_distance_km=route_distance(ordered, start))
