"""Map screen with station and segment lists beside the map canvas."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer

from ..state import ActiveList, MapState
from ..widgets import Breadcrumb, LoadingSpinner, MapCanvas, SelectionPanel, StatusBar
from .base import ViewScreen

ACTIVE_LIST_LABELS = {
    ActiveList.STATIONS: "Stations",
    ActiveList.SEGMENTS: "Segments",
}


class MapScreen(ViewScreen):
    """Stations (top left), segments (bottom left) and the map (right)."""

    DEFAULT_CSS = """
    #map-lists {
        width: 30%;
    }

    #map-canvas {
        width: 70%;
    }
    """

    def compose(self) -> ComposeResult:
        yield Breadcrumb(id="breadcrumb")
        with Horizontal(id="map-body"):
            with Vertical(id="map-lists"):
                yield SelectionPanel("Stations", id="stations")
                yield SelectionPanel("Segments", id="segments")
            yield MapCanvas("Map", id="map-canvas")
        yield LoadingSpinner(id="loading")
        yield StatusBar(id="status-bar")
        yield Footer()

    def refresh_view(self) -> None:
        state = self.app.navigator.state
        if not isinstance(state, MapState):
            return

        self.query_one("#stations", SelectionPanel).show(
            state.station_labels(),
            state.stations.selected,
            active=state.active is ActiveList.STATIONS,
        )
        self.query_one("#segments", SelectionPanel).show(
            state.segment_labels(),
            state.segments.selected,
            active=state.active is ActiveList.SEGMENTS,
        )
        self.query_one("#map-canvas", MapCanvas).show(
            state.coordinates,
            state.extent,
            station=state.highlighted_station_coord(),
            segment=state.highlighted_segment_endpoints(),
        )
        self.breadcrumb().show_infrastructure(state.graph.id, state.graph.name)
        self.query_one("#status-bar", StatusBar).active_list = ACTIVE_LIST_LABELS[state.active]
