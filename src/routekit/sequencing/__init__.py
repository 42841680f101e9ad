"""
Route sequencing for a single driver's multi-stop run.
"""

from .sequencer import (
    NearestNeighborSequencer,
    PriorityNearestNeighborSequencer,
    nearest_neighbor_order,
    route_distance,
    sequence_route,
)

__all__ = [
    "NearestNeighborSequencer",
    "PriorityNearestNeighborSequencer",
    "nearest_neighbor_order",
    "route_distance",
    "sequence_route",
]
