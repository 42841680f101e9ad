"""
Spatial clustering of delivery points (k-means on the sphere) and cluster-count selection.
"""

from routekit.core_types import Cluster, ClusteringResult

from .elbow import distortion_curve, find_optimal_k
from .kmeans import CONVERGENCE_THRESHOLD, MAX_ITERATIONS, cluster
from .routes import optimize_cluster_route, plan_cluster_routes
from .seeding import seed_centroids, validate_k

__all__ = [
    "CONVERGENCE_THRESHOLD",
    "MAX_ITERATIONS",
    "Cluster",
    "ClusteringResult",
    "cluster",
    "distortion_curve",
    "find_optimal_k",
    "optimize_cluster_route",
    "plan_cluster_routes",
    "seed_centroids",
    "validate_k",
]
