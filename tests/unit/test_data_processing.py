"""Unit tests for delivery loading and routable filtering."""

import math

import pandas as pd
import pytest

from routekit.utils.data_processing import filter_routable, load_deliveries


@pytest.fixture
def deliveries_csv(tmp_path):
    path = tmp_path / "deliveries.csv"
    pd.DataFrame(
        {
            "Delivery_ID": ["007", "008", "009"],
            "Latitude": [40.75, 40.76, 0.0],
            "Longitude": [-73.98, -73.97, 0.0],
        }
    ).to_csv(path, index=False)
    return path


def test_load_fills_optional_columns(deliveries_csv):
    df = load_deliveries(deliveries_csv)

    # Leading zeros survive because ids are read as strings
    assert df["Delivery_ID"].tolist() == ["007", "008", "009"]
    assert df["Priority"].tolist() == [0, 0, 0]
    assert df["Label"].tolist() == ["", "", ""]
    assert df["Status"].tolist() == ["PENDING", "PENDING", "PENDING"]


def test_load_from_dataframe_does_not_modify_input():
    source = pd.DataFrame({"Delivery_ID": [1], "Latitude": [1.0], "Longitude": [2.0], "Status": ["pending"]})
    df = load_deliveries(source)
    assert df["Status"].tolist() == ["PENDING"]
    assert "Priority" not in source.columns


def test_load_missing_columns():
    with pytest.raises(ValueError, match="missing required columns"):
        load_deliveries(pd.DataFrame({"Delivery_ID": ["a"], "Latitude": [1.0]}))


def test_load_duplicate_ids():
    df = pd.DataFrame({"Delivery_ID": ["a", "a"], "Latitude": [1.0, 2.0], "Longitude": [1.0, 2.0]})
    with pytest.raises(ValueError, match="Duplicate Delivery_ID"):
        load_deliveries(df)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_deliveries(tmp_path / "missing.csv")


def test_non_numeric_coordinates_become_nan():
    df = load_deliveries(pd.DataFrame({"Delivery_ID": ["a"], "Latitude": ["n/a"], "Longitude": [3.0]}))
    assert math.isnan(df.loc[0, "Latitude"])


def test_filter_routable():
    df = load_deliveries(
        pd.DataFrame(
            {
                "Delivery_ID": ["ok", "done", "nowhere", "nan", "equator", "transit"],
                "Latitude": [40.0, 41.0, 0.0, float("nan"), 0.0, 42.0],
                "Longitude": [-73.0, -74.0, 0.0, -75.0, 5.0, -76.0],
                "Status": ["PENDING", "DELIVERED", "PENDING", "ASSIGNED", "ASSIGNED", "IN_TRANSIT"],
            }
        )
    )

    routable = filter_routable(df)

    assert routable["Delivery_ID"].tolist() == ["ok", "equator", "transit"]
    assert routable.index.tolist() == [0, 1, 2]
