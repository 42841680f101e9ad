"""
API facade for routekit - one entry point per planning task for programmatic usage.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from routekit.clustering import cluster, find_optimal_k, plan_cluster_routes
from routekit.config import RoutekitParams, default_params, load_routekit_params
from routekit.core_types import ClusteringResult, Coordinate, Point, Route
from routekit.registry import get_sequencer
from routekit.utils.data_processing import filter_routable, load_deliveries
from routekit.utils.logging import RoutekitLogger, log_warning

logger = RoutekitLogger.get_logger("routekit.api")

Deliveries = str | Path | pd.DataFrame | Sequence[Point]


def _resolve_params(config: str | Path | RoutekitParams | None) -> RoutekitParams:
    if config is None:
        return default_params()
    if isinstance(config, RoutekitParams):
        return config
    return load_routekit_params(config)


def _to_points(deliveries: Deliveries) -> List[Point]:
    """Accept Points as-is; tables go through loading and routable filtering."""
    if isinstance(deliveries, (str, Path, pd.DataFrame)):
        df = filter_routable(load_deliveries(deliveries))
        return Point.from_dataframe(df)
    return list(deliveries)


def plan_route(
    deliveries: Deliveries,
    start: Coordinate,
    config: str | Path | RoutekitParams | None = None,
) -> Route:
    """
    Order a driver's deliveries into a single route.

    Args:
        deliveries: CSV path or DataFrame of deliveries (closed and location-less rows
            are skipped), or a list of Points used unfiltered.
        start: The driver's current position.
        config: YAML path or RoutekitParams; defaults to the packaged configuration.

    Returns:
        Route with every routable delivery exactly once.

    Example:
        >>> from routekit import Coordinate, plan_route
        >>> route = plan_route("deliveries.csv", Coordinate(40.75, -73.98))
        >>> route.total_distance_km
    """
    params = _resolve_params(config)
    points = _to_points(deliveries)
    if not points:
        log_warning("No pending deliveries to route")

    sequencer = get_sequencer(params.sequencing.method)
    route = sequencer.sequence(points, start)
    logger.info(
        f"Planned route with {len(route)} stops ({route.total_distance_km:.2f} km) "
        f"using {params.sequencing.method}"
    )
    return route


def plan_clusters(
    deliveries: Deliveries,
    start: Coordinate,
    k: Optional[int] = None,
    config: str | Path | RoutekitParams | None = None,
) -> Tuple[ClusteringResult, List[Route]]:
    """
    Split deliveries into ``k`` geographic clusters and route each one from ``start``.

    When ``k`` is None it is chosen with the elbow method, bounded by
    ``clustering.max_k`` from the configuration.

    Raises:
        InvalidArgumentError: ``k`` is outside ``[1, number of routable deliveries]``.
    """
    params = _resolve_params(config)
    settings = params.clustering
    points = _to_points(deliveries)

    if k is None:
        k = find_optimal_k(
            points,
            settings.max_k,
            seed=settings.seed,
            n_jobs=settings.n_jobs,
            max_iterations=settings.max_iterations,
            convergence_threshold=settings.convergence_threshold,
        )
        logger.info(f"Elbow method suggests k={k}")

    result = cluster(
        points,
        k,
        seed=settings.seed,
        max_iterations=settings.max_iterations,
        convergence_threshold=settings.convergence_threshold,
    )
    logger.info(
        f"Clustered {len(points)} deliveries into {result.k} clusters "
        f"in {result.iterations} iterations (distortion {result.total_distortion_km:.2f} km)"
    )

    routes = plan_cluster_routes(result, start, params.sequencing.method)
    return result, routes
