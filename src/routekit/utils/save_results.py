"""
save_results.py – the single place where planning results hit disk.

Routes and clustering results are exported as JSON (one document) or CSV (one row per
stop). Parent directories are created and a timestamped file name is generated when
none is given.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pandas as pd

from routekit.core_types import ClusteringResult, Coordinate, Route
from routekit.geometry import format_distance
from routekit.utils.logging import RoutekitLogger

logger = RoutekitLogger.get_logger(__name__)

SUPPORTED_FORMATS = ("json", "csv")


def _output_path(
    filename: Optional[str | Path], results_dir: Path, prefix: str, format: str
) -> Path:
    if format not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported output format: {format} (expected one of {SUPPORTED_FORMATS})")
    if filename is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output = results_dir / f"{prefix}_{timestamp}.{format}"
    else:
        output = Path(filename)
    output.parent.mkdir(parents=True, exist_ok=True)
    return output


def save_route(
    route: Route,
    start: Coordinate,
    filename: Optional[str | Path] = None,
    results_dir: Path = Path("results"),
    format: str = "json",
) -> Path:
    """Write a single route and return the file path."""
    output = _output_path(filename, results_dir, "route", format)

    if format == "json":
        document = {
            "Start": {"Latitude": start.latitude, "Longitude": start.longitude},
            "Num_Stops": len(route),
            "Total_Distance": format_distance(route.total_distance_km),
            **route.to_dict(),
        }
        with output.open("w") as f:
            json.dump(document, f, indent=2)
    else:
        route.to_dataframe().to_csv(output, index=False)

    logger.info(f"Route saved to {output}")
    return output


def save_clustering(
    result: ClusteringResult,
    routes: List[Route],
    filename: Optional[str | Path] = None,
    results_dir: Path = Path("results"),
    format: str = "json",
) -> Path:
    """Write clusters with their per-cluster routes and return the file path."""
    if len(routes) != len(result.clusters):
        raise ValueError(
            f"Expected one route per cluster ({len(result.clusters)}), got {len(routes)}"
        )
    output = _output_path(filename, results_dir, "clusters", format)

    if format == "json":
        clusters = []
        for cluster, route in zip(result.clusters, routes):
            entry = cluster.to_dict()
            entry["Route"] = route.to_dict()
            clusters.append(entry)
        document = {
            "Num_Clusters": result.k,
            "Iterations": result.iterations,
            "Total_Distortion_Km": result.total_distortion_km,
            "Clusters": clusters,
        }
        with output.open("w") as f:
            json.dump(document, f, indent=2)
    else:
        frames = []
        for cluster, route in zip(result.clusters, routes):
            frame = route.to_dataframe()
            frame.insert(0, "Cluster_ID", cluster.index)
            frames.append(frame)
        pd.concat(frames, ignore_index=True).to_csv(output, index=False)

    logger.info(f"Clustering saved to {output}")
    return output
