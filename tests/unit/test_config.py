"""Unit tests for configuration loading and validation."""

from pathlib import Path

import pytest
import yaml

from routekit.config import (
    ClusteringParams,
    IOParams,
    RoutekitParams,
    SequencingParams,
    default_params,
    load_routekit_params,
)


def _write(tmp_path: Path, data) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(data))
    return path


def test_default_params_match_packaged_defaults():
    params = default_params()

    assert params.sequencing.method == "priority_nearest_neighbor"
    assert params.clustering == ClusteringParams()
    assert params.clustering.max_iterations == 100
    assert params.clustering.convergence_threshold == pytest.approx(0.0001)
    assert params.clustering.max_k == 10
    assert params.clustering.seed is None
    assert params.io.format == "json"


def test_load_custom_config(tmp_path):
    path = _write(
        tmp_path,
        {
            "sequencing": {"method": "nearest_neighbor"},
            "clustering": {"max_k": 4, "seed": 12, "n_jobs": 2},
            "results_dir": str(tmp_path / "out"),
            "format": "csv",
        },
    )

    params = load_routekit_params(path)

    assert isinstance(params, RoutekitParams)
    assert params.sequencing.method == "nearest_neighbor"
    assert params.clustering.max_k == 4
    assert params.clustering.seed == 12
    assert params.clustering.n_jobs == 2
    assert params.clustering.max_iterations == 100
    assert params.io.results_dir == tmp_path / "out"
    assert params.io.format == "csv"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    params = load_routekit_params(path)
    assert params.clustering == ClusteringParams()
    assert params.sequencing == SequencingParams()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_routekit_params(tmp_path / "nope.yaml")


def test_malformed_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("clustering: [unclosed\n")
    with pytest.raises(ValueError, match="Error parsing YAML"):
        load_routekit_params(path)


def test_unknown_top_level_key(tmp_path):
    path = _write(tmp_path, {"depot": {"latitude": 0}})
    with pytest.raises(ValueError, match="Unknown top-level configuration keys in YAML: depot"):
        load_routekit_params(path)


def test_unknown_section_key(tmp_path):
    path = _write(tmp_path, {"clustering": {"method": "kmedoids"}})
    with pytest.raises(ValueError, match="Unknown keys in 'clustering' section: method"):
        load_routekit_params(path)


def test_unknown_sequencing_method(tmp_path):
    path = _write(tmp_path, {"sequencing": {"method": "zigzag"}})
    with pytest.raises(ValueError, match="Unknown sequencing method"):
        load_routekit_params(path)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_iterations": 0},
        {"convergence_threshold": 0.0},
        {"max_k": 0},
        {"n_jobs": 0},
    ],
)
def test_clustering_params_validation(kwargs):
    with pytest.raises(ValueError):
        ClusteringParams(**kwargs)


def test_io_params_validation():
    with pytest.raises(ValueError, match="IOParams.format"):
        IOParams(format="xlsx")


def test_io_params_coerces_results_dir():
    assert IOParams(results_dir="out").results_dir == Path("out")
