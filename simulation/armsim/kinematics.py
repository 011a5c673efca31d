"""Forward and inverse kinematics for a 2-link planar arm."""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from armsim.config import DEFAULT_ARM1, DEFAULT_ARM2
from armsim.errors import DegenerateTriangle, UnreachableTarget
from armsim.geometry import Point, ReachRange, distance, law_of_cosines, reach_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Arm:
    """One link of the arm.

    Attributes:
        length: Link length (non-negative)
        angle: Joint angle in radians. Arm 1 is measured in the world
            frame, arm 2 relative to arm 1's direction.
    """

    length: float
    angle: float


@dataclass(frozen=True)
class Pose:
    """Joint positions produced by forward kinematics."""

    arm1_end: Point
    arm2_end: Point


@dataclass(frozen=True)
class Solution:
    """Joint angles produced by inverse kinematics."""

    arm1_angle: float
    arm2_angle: float


def solve_forward(origin: Point, arm1: Arm, arm2: Arm) -> Pose:
    """
    Compute the elbow and end-effector positions.

    Defined for every angle and non-negative length; a zero-length link
    puts its end on top of its start.

    Args:
        origin: Base of arm 1
        arm1: Base link (absolute angle)
        arm2: Outer link (angle relative to arm 1)

    Returns:
        Pose with arm1_end (elbow) and arm2_end (end-effector)
    """
    arm1_end = origin + Point(float(np.cos(arm1.angle) * arm1.length),
                              float(np.sin(arm1.angle) * arm1.length))

    world_angle = arm1.angle + arm2.angle
    arm2_end = arm1_end + Point(float(np.cos(world_angle) * arm2.length),
                                float(np.sin(world_angle) * arm2.length))

    return Pose(arm1_end=arm1_end, arm2_end=arm2_end)


def solve_inverse(target: Point, arm1_length: float, arm2_length: float) -> Solution:
    """
    Compute joint angles placing the end-effector on target.

    Uses the law of cosines on the triangle (origin, elbow, target). The
    elbow is always placed counter-clockwise of the origin-target line;
    the mirrored configuration is never returned.

    Args:
        target: Target position relative to the arm origin
        arm1_length: Base link length (> 0)
        arm2_length: Outer link length (> 0)

    Returns:
        Solution with arm1_angle (absolute) and arm2_angle (relative)

    Raises:
        DegenerateTriangle: If a link length is zero or not finite, or
            target sits on the origin while the links differ in length
        UnreachableTarget: If target lies outside the reachable annulus
        ValueError: If target has non-finite coordinates
    """
    if not (np.isfinite(arm1_length) and np.isfinite(arm2_length)):
        raise DegenerateTriangle(f"Arm lengths must be finite "
                                 f"(arm1={arm1_length}, arm2={arm2_length})")
    if arm1_length <= 0 or arm2_length <= 0:
        raise DegenerateTriangle(f"Arm lengths must be positive "
                                 f"(arm1={arm1_length}, arm2={arm2_length})")
    if not (np.isfinite(target.x) and np.isfinite(target.y)):
        raise ValueError(f"Target ({target.x}, {target.y}) is not finite")

    reach = reach_range(arm1_length, arm2_length)
    dist = distance(target)

    if dist == 0:
        return _solve_at_origin(reach)

    if not reach.contains(target):
        raise UnreachableTarget(dist, reach.inner, reach.outer)

    # Pull boundary targets inside so both arccos arguments stay in [-1, 1]
    dist = float(np.clip(dist, reach.inner, reach.outer))

    # Arm 1
    inside_arm1_angle = law_of_cosines(dist, arm1_length, arm2_length)
    outside_arm1_angle = float(np.arctan2(target.y, target.x))
    arm1_angle = outside_arm1_angle + inside_arm1_angle

    # Arm 2
    inside_arm2_angle = law_of_cosines(arm1_length, arm2_length, dist)
    arm2_angle = np.pi + inside_arm2_angle

    logger.debug(f"IK ({target.x:.3f}, {target.y:.3f}) -> "
                 f"({arm1_angle:.5f}, {arm2_angle:.5f})")
    return Solution(arm1_angle=arm1_angle, arm2_angle=float(arm2_angle))


def _solve_at_origin(reach: ReachRange) -> Solution:
    """Folded-back solution for a target on the origin (equal links only)."""
    if reach.inner > reach.tolerance:
        raise DegenerateTriangle(f"Target on origin needs equal arm lengths "
                                 f"(difference {reach.inner:.3f})")
    # atan2(0, 0) is taken as 0; arm 1 uses the limit of its inside angle
    # as the target approaches the origin.
    return Solution(arm1_angle=float(np.pi / 2), arm2_angle=float(np.pi))


class ArmKinematics:
    """2-DOF planar arm kinematics bound to fixed link lengths.

    Link 1 (L1): Origin to elbow
    Link 2 (L2): Elbow to end-effector
    """

    def __init__(self, L1: float = DEFAULT_ARM1[0], L2: float = DEFAULT_ARM2[0]):
        """
        Initialize with link lengths.

        Args:
            L1: Origin to elbow length
            L2: Elbow to end-effector length
        """
        self.L1 = L1
        self.L2 = L2

    @property
    def reach(self) -> ReachRange:
        """Reachable annulus around the origin."""
        return reach_range(self.L1, self.L2)

    def forward(self, theta1: float, theta2: float) -> Tuple[float, float]:
        """
        Compute forward kinematics with the base at (0, 0).

        Args:
            theta1: Arm 1 angle (radians)
            theta2: Arm 2 angle relative to arm 1 (radians)

        Returns:
            (x, y) end-effector position
        """
        pose = solve_forward(Point(0.0, 0.0), Arm(self.L1, theta1), Arm(self.L2, theta2))
        return pose.arm2_end.as_tuple()

    def inverse(self, x: float, y: float) -> Tuple[float, float]:
        """
        Compute inverse kinematics for a target relative to the base.

        Args:
            x: Target X position
            y: Target Y position

        Returns:
            (theta1, theta2) joint angles in radians

        Raises:
            UnreachableTarget: If target unreachable
            DegenerateTriangle: If the links cannot form a triangle
        """
        solution = solve_inverse(Point(x, y), self.L1, self.L2)
        return (solution.arm1_angle, solution.arm2_angle)
