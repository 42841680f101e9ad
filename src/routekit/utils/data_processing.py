"""Loading delivery tables and filtering them down to routable stops."""

from pathlib import Path

import numpy as np
import pandas as pd

from routekit.utils.logging import RoutekitLogger

logger = RoutekitLogger.get_logger(__name__)

REQUIRED_COLUMNS = ['Delivery_ID', 'Latitude', 'Longitude']
ROUTABLE_STATUSES = {'PENDING', 'ASSIGNED', 'IN_TRANSIT'}


def load_deliveries(source: str | Path | pd.DataFrame) -> pd.DataFrame:
    """Read a delivery table from CSV (or take a DataFrame) and normalise its columns.

    Missing optional columns are filled: ``Priority`` with 0, ``Label`` with an empty
    string and ``Status`` with ``PENDING``.
    """
    if isinstance(source, pd.DataFrame):
        df = source.copy()
    else:
        csv_path = Path(source)
        if not csv_path.exists():
            raise FileNotFoundError(csv_path)
        df = pd.read_csv(csv_path, dtype={'Delivery_ID': str})

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Delivery data is missing required columns: {missing}")

    df['Delivery_ID'] = df['Delivery_ID'].astype(str)
    if df['Delivery_ID'].duplicated().any():
        dupes = sorted(df.loc[df['Delivery_ID'].duplicated(), 'Delivery_ID'].unique())
        raise ValueError(f"Duplicate Delivery_ID values: {dupes}")

    df['Latitude'] = pd.to_numeric(df['Latitude'], errors='coerce')
    df['Longitude'] = pd.to_numeric(df['Longitude'], errors='coerce')

    if 'Priority' not in df.columns:
        df['Priority'] = 0
    df['Priority'] = pd.to_numeric(df['Priority'], errors='coerce').fillna(0).astype(int)

    if 'Label' not in df.columns:
        df['Label'] = ''
    df['Label'] = df['Label'].fillna('').astype(str)

    if 'Status' not in df.columns:
        df['Status'] = 'PENDING'
    df['Status'] = df['Status'].fillna('PENDING').astype(str).str.upper()

    logger.debug(f"Loaded {len(df)} deliveries")
    return df


def filter_routable(df: pd.DataFrame) -> pd.DataFrame:
    """Keep open deliveries that have a usable location.

    Rows whose status is not open, whose coordinates are not finite, or that sit at the
    ``(0, 0)`` placeholder used for "no location" are dropped.
    """
    lat = df['Latitude'].to_numpy(dtype=np.float64)
    lon = df['Longitude'].to_numpy(dtype=np.float64)

    open_mask = df['Status'].isin(ROUTABLE_STATUSES).to_numpy()
    finite_mask = np.isfinite(lat) & np.isfinite(lon)
    placeholder_mask = (lat == 0.0) & (lon == 0.0)

    keep = open_mask & finite_mask & ~placeholder_mask
    dropped = int((~keep).sum())
    if dropped:
        logger.info(
            f"Skipping {dropped} deliveries "
            f"({int((~open_mask).sum())} closed, "
            f"{int((open_mask & ~(finite_mask & ~placeholder_mask)).sum())} without location)"
        )
    return df.loc[keep].reset_index(drop=True)
