"""
elbow.py

Elbow-method estimate of a reasonable cluster count. Distortion is computed for
k = 1..min(max_k, N) and the k with the largest discrete second difference

    curvature(k) = distortion(k-1) + distortion(k+1) - 2 * distortion(k)

is suggested. This is a heuristic; it does not find a "true" elbow.
"""

from typing import List, Optional, Sequence

from joblib import Parallel, delayed

from routekit.core_types import InvalidArgumentError, Point
from routekit.utils.logging import RoutekitLogger

from .kmeans import CONVERGENCE_THRESHOLD, MAX_ITERATIONS, cluster

logger = RoutekitLogger.get_logger(__name__)

DEFAULT_MAX_K = 10


def _distortion_for_k(
    points: Sequence[Point],
    k: int,
    seed: Optional[int],
    max_iterations: int,
    convergence_threshold: float,
) -> float:
    # Each k gets its own seed so results do not depend on execution order
    run_seed = None if seed is None else seed + k
    result = cluster(
        points,
        k,
        seed=run_seed,
        max_iterations=max_iterations,
        convergence_threshold=convergence_threshold,
    )
    return result.total_distortion_km


def distortion_curve(
    points: Sequence[Point],
    max_k: int = DEFAULT_MAX_K,
    *,
    seed: Optional[int] = None,
    n_jobs: int = 1,
    max_iterations: int = MAX_ITERATIONS,
    convergence_threshold: float = CONVERGENCE_THRESHOLD,
) -> List[float]:
    """Total distortion for k = 1..min(max_k, len(points)); element i is k = i + 1."""
    upper = min(max_k, len(points))
    if upper < 1:
        return []
    return Parallel(n_jobs=n_jobs)(
        delayed(_distortion_for_k)(points, k, seed, max_iterations, convergence_threshold)
        for k in range(1, upper + 1)
    )


def find_optimal_k(
    points: Sequence[Point],
    max_k: int = DEFAULT_MAX_K,
    *,
    seed: Optional[int] = None,
    n_jobs: int = 1,
    max_iterations: int = MAX_ITERATIONS,
    convergence_threshold: float = CONVERGENCE_THRESHOLD,
) -> int:
    """Suggest a cluster count with the elbow method.

    Returns 1 for two points or fewer without clustering anything, and 1 when no
    interior k shows positive curvature. Ties go to the smallest k.

    ``n_jobs`` fans the per-k runs out with joblib; results are the same for any value.
    """
    if len(points) <= 2:
        return 1
    if max_k < 1:
        raise InvalidArgumentError(f"max_k must be at least 1, got {max_k}")

    distortions = distortion_curve(
        points,
        max_k,
        seed=seed,
        n_jobs=n_jobs,
        max_iterations=max_iterations,
        convergence_threshold=convergence_threshold,
    )
    logger.debug(f"Distortion curve: {[round(d, 4) for d in distortions]}")

    optimal_k = 1
    max_curvature = 0.0
    for i in range(1, len(distortions) - 1):
        curvature = distortions[i - 1] + distortions[i + 1] - 2 * distortions[i]
        if curvature > max_curvature:
            max_curvature = curvature
            optimal_k = i + 1

    logger.debug(f"Elbow at k={optimal_k} (curvature {max_curvature:.4f})")
    return optimal_k
