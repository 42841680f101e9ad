"""Per-cluster route composition: clusters feed back into the route sequencer."""

from typing import List

from routekit.core_types import Cluster, ClusteringResult, Coordinate, Point, Route
from routekit.registry import get_sequencer
from routekit.sequencing import nearest_neighbor_order


def optimize_cluster_route(cluster: Cluster, start_lat: float, start_lon: float) -> List[Point]:
    """Nearest-neighbor visiting order of a cluster's members from the given start."""
    return nearest_neighbor_order(cluster.members, Coordinate(start_lat, start_lon))


def plan_cluster_routes(
    result: ClusteringResult,
    start: Coordinate,
    method: str = 'priority_nearest_neighbor',
) -> List[Route]:
    """One route per cluster, all starting from ``start``; empty clusters give empty routes."""
    sequencer = get_sequencer(method)
    return [sequencer.sequence(c.members, start) for c in result.clusters]
