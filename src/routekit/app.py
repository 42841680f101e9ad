"""
Command-line interface for routekit using Typer.
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from routekit import __version__
from routekit.api import plan_route
from routekit.clustering import cluster, find_optimal_k, plan_cluster_routes
from routekit.config import RoutekitParams, default_params, load_routekit_params
from routekit.core_types import Coordinate, Point, Route
from routekit.geometry import format_distance
from routekit.utils.data_processing import filter_routable, load_deliveries
from routekit.utils.logging import (
    LogLevel,
    ProgressTracker,
    log_error,
    log_progress,
    log_success,
    setup_logging,
)
from routekit.utils.save_results import save_clustering, save_route

app = typer.Typer(
    help="routekit: route sequencing and clustering for multi-stop delivery runs",
    add_completion=False,
)
console = Console()


def _setup_logging_from_flags(verbose: bool, quiet: bool, debug: bool) -> None:
    """Map CLI verbosity flags to a LogLevel."""
    if debug:
        setup_logging(LogLevel.DEBUG)
    elif verbose:
        setup_logging(LogLevel.VERBOSE)
    elif quiet:
        setup_logging(LogLevel.QUIET)
    else:
        setup_logging()


def _load_params(config: Optional[Path]) -> RoutekitParams:
    if config is None:
        return default_params()
    return load_routekit_params(config)


def _load_points(deliveries: Path) -> List[Point]:
    return Point.from_dataframe(filter_routable(load_deliveries(deliveries)))


def _route_table(route: Route, title: str) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column("Stop", justify="right", style="cyan")
    table.add_column("Delivery")
    table.add_column("Label")
    table.add_column("Priority", justify="right")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")
    for i, point in enumerate(route, start=1):
        table.add_row(
            str(i),
            point.id,
            point.label,
            str(point.priority),
            f"{point.latitude:.5f}",
            f"{point.longitude:.5f}",
        )
    return table


@app.command()
def route(
    deliveries: Path = typer.Argument(..., help="CSV file with Delivery_ID, Latitude, Longitude"),
    start_lat: float = typer.Option(..., "--start-lat", help="Driver latitude"),
    start_lon: float = typer.Option(..., "--start-lon", help="Driver longitude"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML configuration file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the route to this directory"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: json or csv"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug output"),
) -> None:
    """Order pending deliveries into a single route from the driver's position."""
    _setup_logging_from_flags(verbose, quiet, debug)
    start = Coordinate(start_lat, start_lon)

    try:
        params = _load_params(config)
        result = plan_route(deliveries, start, params)
        if output is not None:
            save_route(
                result,
                start,
                results_dir=output,
                format=format or params.io.format,
            )
    except (ValueError, FileNotFoundError) as e:
        log_error(str(e))
        raise typer.Exit(1)

    if not quiet:
        console.print(_route_table(result, f"Route ({len(result)} stops)"))
        console.print(f"Total distance: [bold]{format_distance(result.total_distance_km)}[/bold]")


@app.command("cluster")
def cluster_command(
    deliveries: Path = typer.Argument(..., help="CSV file with Delivery_ID, Latitude, Longitude"),
    start_lat: float = typer.Option(..., "--start-lat", help="Shared start latitude"),
    start_lon: float = typer.Option(..., "--start-lon", help="Shared start longitude"),
    k: Optional[int] = typer.Option(None, "--k", "-k", help="Number of clusters (elbow method if omitted)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for centroid initialisation"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML configuration file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write results to this directory"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: json or csv"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug output"),
) -> None:
    """Split deliveries into geographic clusters and route each cluster."""
    _setup_logging_from_flags(verbose, quiet, debug)
    start = Coordinate(start_lat, start_lon)

    steps = ["Load Deliveries", "Choose k", "Cluster", "Sequence Routes", "Save Results"]
    progress = ProgressTracker(steps)

    try:
        params = _load_params(config)
        settings = params.clustering
        run_seed = seed if seed is not None else settings.seed

        points = _load_points(deliveries)
        progress.advance(f"Loaded {len(points)} routable deliveries")

        if k is None:
            k = find_optimal_k(
                points,
                settings.max_k,
                seed=run_seed,
                n_jobs=settings.n_jobs,
                max_iterations=settings.max_iterations,
                convergence_threshold=settings.convergence_threshold,
            )
            progress.advance(f"Elbow method suggests k={k}")
        else:
            progress.advance(f"Using k={k}")

        result = cluster(
            points,
            k,
            seed=run_seed,
            max_iterations=settings.max_iterations,
            convergence_threshold=settings.convergence_threshold,
        )
        progress.advance(f"Converged in {result.iterations} iterations")

        routes = plan_cluster_routes(result, start, params.sequencing.method)
        progress.advance(f"Sequenced {len(routes)} routes")

        if output is not None:
            save_clustering(result, routes, results_dir=output, format=format or params.io.format)
            progress.advance("Results saved")
        else:
            progress.advance("Nothing to save")
    except (ValueError, FileNotFoundError) as e:
        progress.close()
        log_error(str(e))
        raise typer.Exit(1)

    progress.close()

    if not quiet:
        summary = Table(title=f"{result.k} clusters", show_header=True)
        summary.add_column("Cluster", justify="right", style="cyan")
        summary.add_column("Stops", justify="right")
        summary.add_column("Centroid")
        summary.add_column("Route length", justify="right")
        summary.add_column("Order")
        for c, r in zip(result.clusters, routes):
            summary.add_row(
                str(c.index),
                str(len(c.members)),
                f"{c.center_latitude:.5f}, {c.center_longitude:.5f}",
                format_distance(r.total_distance_km),
                " → ".join(r.ids),
            )
        console.print(summary)
        console.print(f"Total distortion: [bold]{result.total_distortion_km:.3f} km[/bold]")


@app.command("suggest-k")
def suggest_k(
    deliveries: Path = typer.Argument(..., help="CSV file with Delivery_ID, Latitude, Longitude"),
    max_k: Optional[int] = typer.Option(None, "--max-k", help="Largest k to try"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for centroid initialisation"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug output"),
) -> None:
    """Suggest a cluster count with the elbow method."""
    _setup_logging_from_flags(verbose, quiet, debug)

    try:
        params = _load_params(config)
        settings = params.clustering
        points = _load_points(deliveries)
        log_progress(f"Evaluating cluster counts for {len(points)} deliveries...")
        suggested = find_optimal_k(
            points,
            max_k if max_k is not None else settings.max_k,
            seed=seed if seed is not None else settings.seed,
            n_jobs=settings.n_jobs,
            max_iterations=settings.max_iterations,
            convergence_threshold=settings.convergence_threshold,
        )
    except (ValueError, FileNotFoundError) as e:
        log_error(str(e))
        raise typer.Exit(1)

    log_success(f"Suggested k={suggested}")
    console.print(str(suggested))


@app.command()
def version() -> None:
    """Show the routekit version."""
    console.print(f"routekit version {__version__}")


if __name__ == "__main__":
    app()
