"""
geometry.py

Great-circle distance on a spherical Earth. Every distance in routekit goes through
the haversine formula below; coordinates are never treated as planar.
"""

import math

import numpy as np

EARTH_RADIUS_KM = 6371.0


def haversine_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometers between two lat/lon points given in degrees.

    Non-finite coordinates are not rejected; NaN simply propagates to the result.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push a a hair above 1 for antipodal points
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(a, 1.0)))


def haversine_matrix(
    lats_a: np.ndarray,
    lons_a: np.ndarray,
    lats_b: np.ndarray,
    lons_b: np.ndarray,
) -> np.ndarray:
    """Pairwise haversine distances (km); rows follow ``a``, columns follow ``b``."""
    lat1 = np.radians(np.asarray(lats_a, dtype=np.float64))[:, None]
    lon1 = np.radians(np.asarray(lons_a, dtype=np.float64))[:, None]
    lat2 = np.radians(np.asarray(lats_b, dtype=np.float64))[None, :]
    lon2 = np.radians(np.asarray(lons_b, dtype=np.float64))[None, :]

    a = np.sin((lat2 - lat1) / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2
    return 2 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(np.minimum(a, 1.0)))


def format_distance(distance_km: float) -> str:
    """Human-readable distance: whole meters below 1 km, one decimal km above."""
    meters = distance_km * 1000.0
    if meters < 1000:
        return f"{int(meters)}m"
    return f"{distance_km:.1f} km"
