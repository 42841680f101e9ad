"""Configuration module for routekit parameters."""

from .loader import default_params
from .loader import load_yaml as load_routekit_params
from .params import (
    ClusteringParams,
    IOParams,
    RoutekitParams,
    RuntimeParams,
    SequencingParams,
)

__all__ = [
    "SequencingParams",
    "ClusteringParams",
    "IOParams",
    "RuntimeParams",
    "RoutekitParams",
    "default_params",
    "load_routekit_params",
]
