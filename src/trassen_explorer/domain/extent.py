"""Bounding box of a station coordinate set."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple

Coordinate = Tuple[float, float]


@dataclass(frozen=True)
class Extent:
    """Axis-aligned bounds with ``min <= max`` on both axes."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


def compute_extent(coords: Iterable[Coordinate]) -> Extent:
    """
    Compute the bounding box of a non-empty coordinate sequence.

    Args:
        coords: (x, y) pairs

    Returns:
        Extent spanning every coordinate

    Raises:
        ValueError: If the sequence is empty or contains NaN or infinity
    """
    points = list(coords)
    if not points:
        raise ValueError("Cannot compute the extent of an empty coordinate set")

    for x, y in points:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Non-finite coordinate in extent input: ({x}, {y})")

    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    return Extent(min_x=min(xs), max_x=max(xs), min_y=min(ys), max_y=max(ys))
