"""Map widget drawing stations and the highlighted station/segment."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from rich.text import Text
from textual.widget import Widget

from ...domain import Coordinate, Extent
from ..canvas import render_map


class MapCanvas(Widget):
    """Draws a projection of the station coordinates at the widget's size."""

    DEFAULT_CSS = """
    MapCanvas {
        border: round $panel-lighten-2;
        height: 1fr;
    }
    """

    def __init__(self, title: str = "Map", **kwargs) -> None:
        super().__init__(**kwargs)
        self.border_title = title
        self._coords: Sequence[Coordinate] = ()
        self._extent: Optional[Extent] = None
        self._station: Optional[Coordinate] = None
        self._segment: Optional[Tuple[Coordinate, Coordinate]] = None

    def show(
        self,
        coords: Sequence[Coordinate],
        extent: Optional[Extent],
        station: Optional[Coordinate] = None,
        segment: Optional[Tuple[Coordinate, Coordinate]] = None,
    ) -> None:
        self._coords = coords
        self._extent = extent
        self._station = station
        self._segment = segment
        self.refresh()

    def render(self) -> Text:
        size = self.content_size
        return render_map(
            self._coords,
            self._extent,
            size.width,
            size.height,
            station=self._station,
            segment=self._segment,
        )
