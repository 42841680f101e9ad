"""
kmeans.py

Lloyd's algorithm on the sphere: points are assigned to the centroid with the smallest
haversine distance, and centroids move to the arithmetic mean of their members'
latitudes and longitudes.

A cluster that receives no members keeps its previous centre rather than being
reseeded or dropped, so a run always reports exactly ``k`` clusters. In pathological
inputs (e.g. many duplicate coordinates) this can leave a cluster permanently empty.
"""

import random
from typing import Optional, Sequence

import numpy as np

from routekit.core_types import Cluster, ClusteringResult, InvalidArgumentError, Point
from routekit.geometry import haversine_distance_km, haversine_matrix
from routekit.utils.logging import RoutekitLogger

from .seeding import seed_centroids, validate_k

logger = RoutekitLogger.get_logger(__name__)

MAX_ITERATIONS = 100
CONVERGENCE_THRESHOLD = 0.0001  # km, sub-meter


def _assign(lats: np.ndarray, lons: np.ndarray, clusters: list[Cluster]) -> np.ndarray:
    """Index of the nearest centroid for every point; first centroid wins ties."""
    c_lats = np.array([c.center_latitude for c in clusters], dtype=np.float64)
    c_lons = np.array([c.center_longitude for c in clusters], dtype=np.float64)
    return np.argmin(haversine_matrix(lats, lons, c_lats, c_lons), axis=1)


def _update(
    lats: np.ndarray,
    lons: np.ndarray,
    labels: np.ndarray,
    clusters: list[Cluster],
    threshold: float,
) -> bool:
    """Move every non-empty centroid to its members' mean; True when none moved by ``threshold`` or more."""
    converged = True
    for cluster in clusters:
        mask = labels == cluster.index
        if not mask.any():
            continue
        new_lat = float(lats[mask].mean())
        new_lon = float(lons[mask].mean())
        movement = haversine_distance_km(
            cluster.center_latitude, cluster.center_longitude, new_lat, new_lon
        )
        if not movement < threshold:
            converged = False
        cluster.center_latitude = new_lat
        cluster.center_longitude = new_lon
    return converged


def cluster(
    points: Sequence[Point],
    k: int,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    max_iterations: int = MAX_ITERATIONS,
    convergence_threshold: float = CONVERGENCE_THRESHOLD,
) -> ClusteringResult:
    """Partition ``points`` into ``k`` spatial clusters.

    Args:
        points: Points to cluster. They are not modified.
        k: Number of clusters, 1 <= k <= len(points).
        seed: Seed for the first-centroid draw; ignored when ``rng`` is given.
        rng: Explicit random source for seeding.
        max_iterations: Hard cap on assign/update rounds. Hitting it is not an error.
        convergence_threshold: Centroid movement (km) below which a round counts as converged.

    Returns:
        ClusteringResult with ``k`` clusters, the number of rounds run and the total
        distortion (sum of point-to-own-centroid haversine distances).

    Raises:
        InvalidArgumentError: ``k`` outside ``[1, len(points)]`` or ``max_iterations < 1``.
    """
    validate_k(k, len(points))
    if max_iterations < 1:
        raise InvalidArgumentError(f"max_iterations must be at least 1, got {max_iterations}")

    if rng is None and seed is not None:
        rng = random.Random(seed)

    clusters = seed_centroids(points, k, rng)

    lats = np.array([p.latitude for p in points], dtype=np.float64)
    lons = np.array([p.longitude for p in points], dtype=np.float64)

    iterations = 0
    converged = False
    labels = np.zeros(len(points), dtype=int)
    while iterations < max_iterations and not converged:
        labels = _assign(lats, lons, clusters)
        converged = _update(lats, lons, labels, clusters, convergence_threshold)
        iterations += 1

    if converged:
        logger.debug(f"k={k}: converged after {iterations} iterations")
    else:
        logger.debug(f"k={k}: stopped at the {max_iterations}-iteration cap")

    for point, label in zip(points, labels):
        clusters[int(label)].members.append(point)

    empty = [c.index for c in clusters if not c.members]
    if empty:
        logger.debug(f"k={k}: clusters {empty} ended without members")

    total_distortion = sum(
        haversine_distance_km(p.latitude, p.longitude, c.center_latitude, c.center_longitude)
        for c in clusters
        for p in c.members
    )

    return ClusteringResult(
        clusters=clusters,
        iterations=iterations,
        total_distortion_km=total_distortion,
    )
