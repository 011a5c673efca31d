"""Mapping between screen (y down) and model (y up) coordinates.

The solvers never see screen coordinates; pointer positions go through
ViewTransform.to_model before becoming targets, and drawn positions go
through to_screen.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from armsim.config import CANVAS_HEIGHT, CANVAS_WIDTH
from armsim.geometry import Point


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +inf."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class ViewTransform:
    """Canvas of width x height model units drawn at scale screen px per unit."""

    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT
    scale: float = 1.0

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")
        if self.scale <= 0:
            raise ValueError(f"Scale must be positive, got {self.scale}")

    def to_model(self, screen_x: float, screen_y: float) -> Point:
        """
        Convert a pointer position to a model-space target.

        Args:
            screen_x: Pixels from the left edge of the canvas
            screen_y: Pixels from the top edge of the canvas

        Returns:
            Point on the integer model grid, y measured up from the bottom
        """
        x = screen_x / self.scale
        y = self.height - screen_y / self.scale
        return Point(float(round_half_up(x)), float(round_half_up(y)))

    def to_screen(self, p: Point) -> Tuple[int, int]:
        """Pixel position at which a model point is drawn."""
        return (round_half_up(p.x * self.scale),
                round_half_up((self.height - p.y) * self.scale))

    def contains(self, p: Point) -> bool:
        """Whether a model point lies on the canvas."""
        return 0 <= p.x <= self.width and 0 <= p.y <= self.height


def default_view() -> ViewTransform:
    """Transform for the configured canvas at 1:1 scale."""
    return ViewTransform()
