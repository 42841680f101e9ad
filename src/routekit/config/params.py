"""Parameter container dataclasses for routekit.

Settings are grouped by concern into immutable dataclasses. A small mutable
`RuntimeParams` bucket captures flags that are never serialised to YAML but can be
toggled programmatically (e.g. from CLI flags).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

__all__ = [
    "SequencingParams",
    "ClusteringParams",
    "IOParams",
    "RuntimeParams",
    "RoutekitParams",
]


# ---------------------------------------------------------------------------
# Route sequencing
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SequencingParams:
    """Which registered sequencer orders a driver's stops."""

    method: str = "priority_nearest_neighbor"

    def __post_init__(self):  # type: ignore[override]
        from routekit.registry import get_sequencer

        # Fails early with the list of available methods
        get_sequencer(self.method)


# ---------------------------------------------------------------------------
# Clustering
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ClusteringParams:
    """k-means loop and elbow search settings."""

    max_iterations: int = 100
    convergence_threshold: float = 0.0001
    max_k: int = 10
    seed: Optional[int] = None
    n_jobs: int = 1

    def __post_init__(self):  # type: ignore[override]
        if self.max_iterations < 1:
            raise ValueError("ClusteringParams.max_iterations must be at least 1.")
        if self.convergence_threshold <= 0:
            raise ValueError("ClusteringParams.convergence_threshold must be positive.")
        if self.max_k < 1:
            raise ValueError("ClusteringParams.max_k must be at least 1.")
        if self.n_jobs == 0:
            raise ValueError("ClusteringParams.n_jobs cannot be 0.")


# ---------------------------------------------------------------------------
# IO parameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class IOParams:
    """Where and how exported results are written."""

    results_dir: Path = Path("results")
    format: str = "json"  # One of: json, csv

    def __post_init__(self):  # type: ignore[override]
        if self.format not in {"json", "csv"}:
            raise ValueError("IOParams.format must be 'json' or 'csv'.")

        if not isinstance(self.results_dir, Path):
            object.__setattr__(self, "results_dir", Path(self.results_dir))


# ---------------------------------------------------------------------------
# Runtime parameters – toggles that are never serialized to yaml
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class RuntimeParams:
    verbose: bool = False
    debug: bool = False


# ---------------------------------------------------------------------------
# Aggregate container
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class RoutekitParams:
    """Aggregate parameter object passed to the API facade and the CLI."""

    sequencing: SequencingParams = field(default_factory=SequencingParams)
    clustering: ClusteringParams = field(default_factory=ClusteringParams)
    io: IOParams = field(default_factory=IOParams)
    runtime: RuntimeParams = field(default_factory=RuntimeParams)
