"""
seeding.py

Initial centroid placement for the k-means loop.

This is the deterministic farthest-point flavour of k-means++: only the first centroid
is drawn at random, every further centroid is the unchosen point farthest from its
nearest already-chosen centroid. Pinning the random source therefore pins the whole
seeding.
"""

import random
from typing import List, Optional, Sequence

import numpy as np

from routekit.core_types import Cluster, InvalidArgumentError, Point
from routekit.geometry import haversine_matrix
from routekit.utils.logging import RoutekitLogger

logger = RoutekitLogger.get_logger(__name__)


def validate_k(k: int, n_points: int) -> None:
    """Raise InvalidArgumentError unless 1 <= k <= n_points."""
    if k < 1 or k > n_points:
        raise InvalidArgumentError(
            f"k must be between 1 and the number of points ({n_points}), got {k}"
        )


def seed_centroids(
    points: Sequence[Point],
    k: int,
    rng: Optional[random.Random] = None,
) -> List[Cluster]:
    """Pick ``k`` distinct input points as initial centroids.

    Args:
        points: Points to cluster.
        k: Number of centroids, 1 <= k <= len(points).
        rng: Source for the first centroid. Defaults to the process-level generator.

    Returns:
        ``k`` empty clusters indexed 0..k-1 in selection order.
    """
    validate_k(k, len(points))

    lats = np.array([p.latitude for p in points], dtype=np.float64)
    lons = np.array([p.longitude for p in points], dtype=np.float64)

    first = rng.randrange(len(points)) if rng is not None else random.randrange(len(points))
    chosen = [first]

    # Distance from every point to its nearest chosen centroid so far
    nearest = haversine_matrix(lats, lons, lats[[first]], lons[[first]])[:, 0]
    for _ in range(1, k):
        candidates = nearest.copy()
        candidates[chosen] = -1.0
        # argmax returns the first maximum, i.e. the lowest input index on ties
        farthest = int(np.argmax(candidates))
        chosen.append(farthest)
        to_new = haversine_matrix(lats, lons, lats[[farthest]], lons[[farthest]])[:, 0]
        nearest = np.minimum(nearest, to_new)

    logger.debug(f"Seeded {k} centroids from point indices {chosen}")
    return [
        Cluster(index=i, center_latitude=points[idx].latitude, center_longitude=points[idx].longitude)
        for i, idx in enumerate(chosen)
    ]
