"""Failure conditions raised by the kinematics solvers."""


class KinematicsError(ValueError):
    """Base class for inputs the inverse solver cannot turn into angles."""


class UnreachableTarget(KinematicsError):
    """Target lies outside the reachable annulus of the arm.

    Attributes:
        distance: Distance from origin to target
        inner: Inner radius of the annulus |L1 - L2|
        outer: Outer radius of the annulus L1 + L2
    """

    def __init__(self, distance: float, inner: float, outer: float):
        self.distance = distance
        self.inner = inner
        self.outer = outer
        super().__init__(f"Target unreachable (distance {distance:.3f}, "
                         f"reach [{inner:.3f}, {outer:.3f}])")


class DegenerateTriangle(KinematicsError):
    """Law of cosines is undefined for the given side lengths."""
