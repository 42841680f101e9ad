from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

import pandas as pd


class InvalidArgumentError(ValueError):
    """Raised before any computation when an argument is outside its valid range."""


@dataclass(frozen=True)
class Coordinate:
    """A bare latitude/longitude position, e.g. the driver's live location."""
    latitude: float
    longitude: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class Point:
    """A delivery stop. Immutable; the engines never write onto it."""
    id: str
    latitude: float
    longitude: float
    priority: int = 0  # higher = more urgent
    label: str = ''

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)

    @staticmethod
    def from_dataframe(df: pd.DataFrame) -> List['Point']:
        """Convert a delivery table to a list of Point objects."""
        points = []
        for _, row in df.iterrows():
            priority = row.get('Priority', 0)
            label = row.get('Label', '')
            points.append(Point(
                id=str(row['Delivery_ID']),
                latitude=float(row['Latitude']),
                longitude=float(row['Longitude']),
                priority=0 if pd.isna(priority) else int(priority),
                label='' if pd.isna(label) else str(label),
            ))
        return points

    @staticmethod
    def to_dataframe(points: List['Point']) -> pd.DataFrame:
        """Convert a list of Point objects to a delivery table."""
        columns = ['Delivery_ID', 'Latitude', 'Longitude', 'Priority', 'Label']
        if len(points) == 0:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame(
            [[p.id, p.latitude, p.longitude, p.priority, p.label] for p in points],
            columns=columns,
        )


@dataclass(frozen=True)
class Route:
    """An ordered visiting sequence and its length, start leg included."""
    ordered_points: Tuple[Point, ...] = ()
    total_distance_km: float = 0.0

    def __post_init__(self):
        # Accept any sequence but store a tuple so the route stays immutable
        object.__setattr__(self, 'ordered_points', tuple(self.ordered_points))

    def __len__(self) -> int:
        return len(self.ordered_points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.ordered_points)

    @property
    def ids(self) -> List[str]:
        return [p.id for p in self.ordered_points]

    def to_dataframe(self) -> pd.DataFrame:
        df = Point.to_dataframe(list(self.ordered_points))
        df.insert(0, 'Stop', range(1, len(df) + 1))
        return df

    def to_dict(self) -> Dict:
        return {
            'Stops': [
                {'Stop': i, 'Delivery_ID': p.id, 'Latitude': p.latitude,
                 'Longitude': p.longitude, 'Priority': p.priority, 'Label': p.label}
                for i, p in enumerate(self.ordered_points, start=1)
            ],
            'Total_Distance_Km': self.total_distance_km,
        }


@dataclass
class Cluster:
    """A group of points around a centroid.

    Mutated only by the clustering loop that created it; once a
    ClusteringResult is returned the caller owns it.
    """
    index: int
    center_latitude: float
    center_longitude: float
    members: List[Point] = field(default_factory=list)

    @property
    def center(self) -> Coordinate:
        return Coordinate(self.center_latitude, self.center_longitude)

    @property
    def member_ids(self) -> List[str]:
        return [p.id for p in self.members]

    def to_dict(self) -> Dict:
        return {
            'Cluster_ID': self.index,
            'Centroid_Latitude': self.center_latitude,
            'Centroid_Longitude': self.center_longitude,
            'Deliveries': self.member_ids,
        }


@dataclass
class ClusteringResult:
    """Outcome of one clustering run."""
    clusters: List[Cluster] = field(default_factory=list)
    iterations: int = 0
    total_distortion_km: float = 0.0

    @property
    def assignments(self) -> Dict[str, int]:
        """Map of point id to cluster index, derived from cluster membership."""
        return {p.id: c.index for c in self.clusters for p in c.members}

    @property
    def k(self) -> int:
        return len(self.clusters)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per cluster."""
        if len(self.clusters) == 0:
            return pd.DataFrame()
        rows = []
        for cluster in self.clusters:
            row = cluster.to_dict()
            row['Num_Deliveries'] = len(cluster.members)
            rows.append(row)
        return pd.DataFrame(rows)
