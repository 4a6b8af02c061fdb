"""View state variants driven by the navigator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from ..domain import (
    Coordinate,
    Extent,
    Segment,
    SelectionList,
    Station,
    StationGraph,
    compute_extent,
)
from ..services.schemas import InfrastructureSummary


class ActiveList(str, Enum):
    """Which map list receives Up/Down."""

    STATIONS = "stations"
    SEGMENTS = "segments"


@dataclass
class PickerState:
    """Infrastructure picker: one list of available infrastructures."""

    summaries: SelectionList[InfrastructureSummary]

    @classmethod
    def from_summaries(cls, summaries) -> "PickerState":
        return cls(summaries=SelectionList(summaries))

    def labels(self) -> List[str]:
        return [summary.label for summary in self.summaries]


@dataclass
class MapState:
    """
    Map of one loaded infrastructure with its station and segment lists.

    ``coordinates`` and ``extent`` are computed once from the graph;
    ``extent`` is ``None`` when the graph has no stations.
    """

    graph: StationGraph
    coordinates: Tuple[Coordinate, ...]
    extent: Optional[Extent]
    stations: SelectionList[Station]
    segments: SelectionList[Segment]
    active: ActiveList = field(default=ActiveList.STATIONS)

    @classmethod
    def from_graph(cls, graph: StationGraph) -> "MapState":
        coordinates = tuple(graph.coordinates())
        return cls(
            graph=graph,
            coordinates=coordinates,
            extent=compute_extent(coordinates) if coordinates else None,
            stations=SelectionList(graph.stations),
            segments=SelectionList(graph.segments),
        )

    def active_list(self) -> SelectionList:
        if self.active is ActiveList.SEGMENTS:
            return self.segments
        return self.stations

    def station_labels(self) -> List[str]:
        return [station.label for station in self.stations]

    def segment_labels(self) -> List[str]:
        return [segment.label for segment in self.segments]

    def highlighted_station_coord(self) -> Optional[Coordinate]:
        station = self.stations.selected_item()
        return station.coord if station else None

    def highlighted_segment_endpoints(self) -> Optional[Tuple[Coordinate, Coordinate]]:
        segment = self.segments.selected_item()
        if segment is None:
            return None
        return (segment.from_station.coord, segment.to_station.coord)


ViewState = Union[PickerState, MapState]
