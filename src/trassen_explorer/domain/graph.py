"""Validated station/segment graph of one railway infrastructure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .extent import Coordinate


class GraphBuildError(Exception):
    """Base error for failures while assembling a station graph."""


class StationReferenceError(GraphBuildError):
    """A segment names a station code that does not exist in the document."""

    def __init__(self, code: str, segment_label: str) -> None:
        self.code = code
        self.segment_label = segment_label
        super().__init__(f"Station '{code}' for Segment '{segment_label}' not found")


@dataclass(frozen=True)
class Station:
    """Operating point ("Betriebsstelle") identified by its DS100 code."""

    code: str
    name: str
    x: float
    y: float

    @property
    def coord(self) -> Coordinate:
        return (self.x, self.y)

    @property
    def label(self) -> str:
        return f"{self.code} ({self.name})"


def segment_label(from_code: str, route_number: int, to_code: str) -> str:
    """Diagnostic ``from-route-to`` label of a track segment."""
    return f"{from_code}-{route_number}-{to_code}"


@dataclass(frozen=True)
class Segment:
    """Track segment ("Streckensegment") between two resolved stations."""

    from_station: Station
    to_station: Station
    route_number: int

    @property
    def diagnostic_label(self) -> str:
        return segment_label(self.from_station.code, self.route_number, self.to_station.code)

    @property
    def label(self) -> str:
        return f"{self.route_number} ({self.from_station.code} -> {self.to_station.code})"


@dataclass(frozen=True)
class StationGraph:
    """
    Stations and segments of one infrastructure in document order.

    Every segment endpoint is one of ``stations``; construction raises
    ``StationReferenceError`` otherwise.
    """

    id: int
    name: str
    stations: Tuple[Station, ...]
    segments: Tuple[Segment, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "stations", tuple(self.stations))
        object.__setattr__(self, "segments", tuple(self.segments))

        known = set(self.stations)
        for segment in self.segments:
            for endpoint in (segment.from_station, segment.to_station):
                if endpoint not in known:
                    raise StationReferenceError(endpoint.code, segment.diagnostic_label)

    def coordinates(self) -> List[Coordinate]:
        return [station.coord for station in self.stations]
