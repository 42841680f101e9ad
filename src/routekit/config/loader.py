"""Utilities for loading routekit configuration YAML files into the parameter
dataclass hierarchy.

Expected layout (every section and key optional)::

    sequencing:
      method: priority_nearest_neighbor
    clustering:
      max_iterations: 100
      convergence_threshold: 0.0001
      max_k: 10
      seed: null
      n_jobs: 1
    results_dir: results
    format: json
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

from routekit.utils.logging import RoutekitLogger

from .params import ClusteringParams, IOParams, RoutekitParams, SequencingParams

logger = RoutekitLogger.get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"

_SEQUENCING_KEYS = {"method"}
_CLUSTERING_KEYS = {"max_iterations", "convergence_threshold", "max_k", "seed", "n_jobs"}


def _section(data: Dict[str, Any], name: str, allowed: set[str]) -> Dict[str, Any]:
    """Pop a mapping section from ``data`` and reject unknown keys in it."""
    raw = data.pop(name, {}) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Configuration section '{name}' must be a mapping.")
    unknown = set(raw) - allowed
    if unknown:
        raise ValueError(
            f"Unknown keys in '{name}' section: {', '.join(sorted(unknown))}"
        )
    return raw


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_yaml(path: str | Path) -> RoutekitParams:
    """Load a YAML configuration file into `RoutekitParams`."""

    cfg_path = Path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(cfg_path)

    try:
        with cfg_path.open() as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ValueError(
            f"Error parsing YAML configuration {cfg_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Configuration {cfg_path} must be a mapping at the top level.")

    sequencing = SequencingParams(**_section(data, "sequencing", _SEQUENCING_KEYS))
    clustering = ClusteringParams(**_section(data, "clustering", _CLUSTERING_KEYS))

    io_params = IOParams(
        results_dir=Path(data.pop("results_dir", "results")),
        format=data.pop("format", "json"),
    )

    # Any remaining unknown keys will raise an error to avoid silent mistakes.
    if data:
        unknown_keys = ", ".join(sorted(data.keys()))
        raise ValueError(
            f"Unknown top-level configuration keys in YAML: {unknown_keys}"
        )

    logger.debug(
        "Loaded configuration – sequencing: %s clustering: %s io: %s",
        sequencing,
        clustering,
        io_params,
    )

    return RoutekitParams(sequencing=sequencing, clustering=clustering, io=io_params)


def default_params() -> RoutekitParams:
    """Parameters from the packaged default configuration."""
    return load_yaml(DEFAULT_CONFIG_PATH)
