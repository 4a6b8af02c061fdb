"""Domain-level models for railway infrastructure graphs."""

from .builder import build_station_graph
from .extent import Coordinate, Extent, compute_extent
from .graph import (
    GraphBuildError,
    Segment,
    Station,
    StationGraph,
    StationReferenceError,
    segment_label,
)
from .selection import SelectionList

__all__ = [
    "Coordinate",
    "Extent",
    "compute_extent",
    "SelectionList",
    "Station",
    "Segment",
    "StationGraph",
    "GraphBuildError",
    "StationReferenceError",
    "segment_label",
    "build_station_graph",
]
