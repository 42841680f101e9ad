"""routekit: route sequencing and geographic clustering for delivery runs."""

__version__ = "0.1.0"

# Main API
from .api import plan_clusters, plan_route

# Stage functions
from .clustering import (
    cluster,
    find_optimal_k,
    optimize_cluster_route,
    plan_cluster_routes,
    seed_centroids,
)

# Configuration
from .config import RoutekitParams, load_routekit_params

# Core types
from .core_types import (
    Cluster,
    ClusteringResult,
    Coordinate,
    InvalidArgumentError,
    Point,
    Route,
)
from .geometry import format_distance, haversine_distance_km
from .interfaces import RouteSequencer

# Extension system
from .registry import get_sequencer, register_sequencer
from .sequencing import nearest_neighbor_order, route_distance, sequence_route

__all__ = [
    # Version
    "__version__",
    # Main API
    "plan_route",
    "plan_clusters",
    # Stage functions
    "haversine_distance_km",
    "format_distance",
    "sequence_route",
    "nearest_neighbor_order",
    "route_distance",
    "cluster",
    "seed_centroids",
    "find_optimal_k",
    "optimize_cluster_route",
    "plan_cluster_routes",
    # Types
    "Coordinate",
    "Point",
    "Route",
    "Cluster",
    "ClusteringResult",
    "InvalidArgumentError",
    "RoutekitParams",
    "load_routekit_params",
    # Extensions
    "RouteSequencer",
    "register_sequencer",
    "get_sequencer",
]
