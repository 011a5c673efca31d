"""Planar geometry shared by the forward and inverse solvers."""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from armsim.config import REACH_TOLERANCE
from armsim.errors import DegenerateTriangle

_SQUARE_LIMIT = 1e150


@dataclass(frozen=True)
class Point:
    """Position in the simulation plane (y axis pointing up)."""

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def distance(p: Point) -> float:
    """Euclidean distance of a point from (0, 0)."""
    return float(np.hypot(p.x, p.y))


def law_of_cosines(a: float, b: float, c: float) -> float:
    """
    Angle between sides a and b of a triangle whose third side is c.

    Args:
        a: First adjacent side
        b: Second adjacent side
        c: Side opposite the returned angle

    Returns:
        Angle in radians, in [0, π]

    Raises:
        DegenerateTriangle: If a or b is zero, a side is not finite, or
            the sides cannot close
    """
    if a == 0 or b == 0:
        raise DegenerateTriangle(f"Side of zero length (a={a}, b={b})")
    if not np.all(np.isfinite([a, b, c])):
        raise DegenerateTriangle(f"Sides ({a}, {b}, {c}) are not finite")

    # Squares overflow past ~1e154 and underflow below ~1e-162; normalize those
    longest = max(abs(a), abs(b), abs(c))
    if longest > _SQUARE_LIMIT or longest < 1 / _SQUARE_LIMIT:
        a, b, c = a / longest, b / longest, c / longest

    cos_angle = (a*a + b*b - c*c) / (2 * a * b)

    # Sides on the boundary of the triangle inequality round to just past ±1
    if abs(cos_angle) > 1.0 + REACH_TOLERANCE:
        raise DegenerateTriangle(f"Sides ({a}, {b}, {c}) do not form a triangle")
    cos_angle = np.clip(cos_angle, -1.0, 1.0)

    return float(np.arccos(cos_angle))


@dataclass(frozen=True)
class ReachRange:
    """Annulus of points reachable by a two-link arm, centred on its origin.

    Attributes:
        inner: Inner radius |L1 - L2|
        outer: Outer radius L1 + L2
    """

    inner: float
    outer: float

    @property
    def tolerance(self) -> float:
        """Absolute slack applied to both radii."""
        return REACH_TOLERANCE * max(self.outer, 1.0)

    def contains(self, p: Point) -> bool:
        """Whether an origin-relative point lies inside the annulus (inclusive)."""
        d = distance(p)
        return self.inner - self.tolerance <= d <= self.outer + self.tolerance

    def clamp(self, p: Point) -> Point:
        """
        Nearest point of the annulus to an origin-relative point.

        A point at the centre of a ring is pushed out along +x.
        """
        d = distance(p)
        if d == 0:
            return Point(self.inner, 0.0)
        radius = float(np.clip(d, self.inner, self.outer))
        if radius == d:
            return p
        scale = radius / d
        return Point(p.x * scale, p.y * scale)


def reach_range(arm1_length: float, arm2_length: float) -> ReachRange:
    """Reachable annulus for the given link lengths."""
    return ReachRange(inner=abs(arm1_length - arm2_length),
                      outer=arm1_length + arm2_length)
