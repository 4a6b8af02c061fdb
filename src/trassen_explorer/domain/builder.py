"""Turn a parsed infrastructure document into a validated station graph."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List

import structlog

from .graph import Segment, Station, StationGraph, StationReferenceError, segment_label

if TYPE_CHECKING:
    from ..services.schemas import InfrastructureDocument, SegmentRecord

logger = structlog.get_logger(__name__)


def _resolve(lookup: Dict[str, Station], code: str, record: "SegmentRecord") -> Station:
    station = lookup.get(code)
    if station is None:
        raise StationReferenceError(
            code, segment_label(record.from_code, record.route_number, record.to_code)
        )
    return station


def build_station_graph(document: "InfrastructureDocument") -> StationGraph:
    """
    Build the station graph of an infrastructure document.

    Station codes are matched exactly (case-sensitive). When a code appears
    more than once the last record wins the lookup; every record still shows
    up in the station list.

    Args:
        document: Validated infrastructure document

    Returns:
        StationGraph whose segments all reference stations of the graph

    Raises:
        StationReferenceError: If a segment names an unknown station code
    """
    stations: List[Station] = []
    lookup: Dict[str, Station] = {}

    for record in document.framework.stations:
        station = Station(code=record.code, name=record.name, x=record.x, y=record.y)
        if station.code in lookup:
            logger.warning(
                "Duplicate station code, last record wins",
                code=station.code,
                infrastructure_id=document.id,
            )
        lookup[station.code] = station
        stations.append(station)

    segments: List[Segment] = []
    for record in document.framework.segments:
        from_station = _resolve(lookup, record.from_code, record)
        to_station = _resolve(lookup, record.to_code, record)
        segments.append(
            Segment(
                from_station=from_station,
                to_station=to_station,
                route_number=record.route_number,
            )
        )

    graph = StationGraph(
        id=document.id,
        name=document.display_name,
        stations=tuple(stations),
        segments=tuple(segments),
    )
    logger.info(
        "Built station graph",
        infrastructure_id=graph.id,
        stations=len(graph.stations),
        segments=len(graph.segments),
    )
    return graph
