"""Project station coordinates onto a character grid."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from rich.text import Text

from ..domain import Coordinate, Extent

Cell = Tuple[int, int]  # (col, row)

POINT_GLYPH = "•"
STATION_GLYPH = "●"
SEGMENT_GLYPH = "·"

POINT_STYLE = "blue"
STATION_STYLE = "bold red"
SEGMENT_STYLE = "bold yellow"


def _scale(value: float, low: float, high: float, cells: int) -> int:
    if cells <= 1:
        return 0
    span = high - low
    if span == 0:
        return (cells - 1) // 2
    index = round((value - low) / span * (cells - 1))
    return max(0, min(cells - 1, index))


def project(x: float, y: float, extent: Extent, width: int, height: int) -> Cell:
    """Map a world coordinate to a grid cell; row 0 is the northern edge."""
    col = _scale(x, extent.min_x, extent.max_x, width)
    row = (height - 1) - _scale(y, extent.min_y, extent.max_y, height) if height > 1 else 0
    return (col, row)


def line_cells(start: Cell, end: Cell) -> List[Cell]:
    """Cells of the straight line between two cells (Bresenham)."""
    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    cells: List[Cell] = []
    while True:
        cells.append((x0, y0))
        if x0 == x1 and y0 == y1:
            return cells
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def render_map(
    coords: Iterable[Coordinate],
    extent: Optional[Extent],
    width: int,
    height: int,
    station: Optional[Coordinate] = None,
    segment: Optional[Tuple[Coordinate, Coordinate]] = None,
) -> Text:
    """
    Render stations, the highlighted station and the highlighted segment.

    Layers are painted in that order, so the segment line is drawn on top.
    """
    if width <= 0 or height <= 0:
        return Text()
    if extent is None:
        return Text("No stations", style="dim")

    cells: Dict[Cell, Tuple[str, str]] = {}
    for x, y in coords:
        cells[project(x, y, extent, width, height)] = (POINT_GLYPH, POINT_STYLE)

    if station is not None:
        cells[project(station[0], station[1], extent, width, height)] = (
            STATION_GLYPH,
            STATION_STYLE,
        )

    if segment is not None:
        start = project(segment[0][0], segment[0][1], extent, width, height)
        end = project(segment[1][0], segment[1][1], extent, width, height)
        for cell in line_cells(start, end):
            cells[cell] = (SEGMENT_GLYPH, SEGMENT_STYLE)

    text = Text(no_wrap=True, overflow="crop")
    for row in range(height):
        for col in range(width):
            glyph, style = cells.get((col, row), (" ", ""))
            text.append(glyph, style=style or None)
        if row < height - 1:
            text.append("\n")
    return text


def visible_window(count: int, selected: Optional[int], height: int) -> Tuple[int, int]:
    """Return ``(start, end)`` of a list slice of ``height`` rows showing ``selected``."""
    if height <= 0 or count <= 0:
        return (0, 0)
    if count <= height:
        return (0, count)
    focus = selected or 0
    start = max(0, min(focus - height // 2, count - height))
    return (start, start + height)


def window_lines(labels: Sequence[str], selected: Optional[int], height: int) -> List[Tuple[int, str]]:
    """Visible ``(index, label)`` pairs for a list panel."""
    start, end = visible_window(len(labels), selected, height)
    return [(index, labels[index]) for index in range(start, end)]
