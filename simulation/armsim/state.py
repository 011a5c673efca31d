"""
Immutable host state driving the kinematics solvers.

The host owns one ArmState value and replaces it wholesale on every input
change. Retargeting solves inverse kinematics and installs both joint
angles in a single replacement, so a pose is never computed from one new
angle and one stale angle.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional

import numpy as np

from armsim.config import (
    DEFAULT_ARM1,
    DEFAULT_ARM2,
    DEFAULT_ORIGIN,
    DEFAULT_TARGET,
    DISPLAY_PRECISION,
)
from armsim.errors import KinematicsError
from armsim.geometry import Point, ReachRange, reach_range
from armsim.kinematics import Arm, Pose, Solution, solve_forward, solve_inverse

logger = logging.getLogger(__name__)


class UnreachablePolicy(Enum):
    """What retarget does when the target cannot be solved."""

    FREEZE = "freeze"  # keep the last valid angles
    CLAMP = "clamp"    # solve for the nearest reachable point
    REJECT = "reject"  # raise the kinematics error


@dataclass(frozen=True)
class ArmState:
    """Current inputs of the simulation.

    Attributes:
        origin: Base of arm 1
        arm1: Base link
        arm2: Outer link (angle relative to arm 1)
        target: Requested end-effector position (same frame as origin)
        reachable: False when the angles were not solved for target
    """

    origin: Point
    arm1: Arm
    arm2: Arm
    target: Point
    reachable: bool = True

    @property
    def pose(self) -> Pose:
        """Joint positions for the current angles, recomputed on each access."""
        return solve_forward(self.origin, self.arm1, self.arm2)

    @property
    def relative_target(self) -> Point:
        """Target translated so the origin is at (0, 0)."""
        return self.target - self.origin

    @property
    def reach(self) -> ReachRange:
        """Reachable annulus around the origin."""
        return reach_range(self.arm1.length, self.arm2.length)

    def retarget(self, target: Point,
                 policy: UnreachablePolicy = UnreachablePolicy.FREEZE) -> "ArmState":
        """
        Move the target and solve for the joint angles that reach it.

        Args:
            target: New target (same frame as origin)
            policy: Handling of targets that cannot be solved

        Returns:
            New state with target and both joint angles replaced

        Raises:
            KinematicsError: Only with UnreachablePolicy.REJECT
            ValueError: Under every policy, if target has non-finite
                coordinates
        """
        relative = target - self.origin
        try:
            solution = solve_inverse(relative, self.arm1.length, self.arm2.length)
        except KinematicsError as e:
            if policy is UnreachablePolicy.REJECT:
                raise
            if policy is UnreachablePolicy.CLAMP:
                clamped = self.reach.clamp(relative)
                solution = self._solve_clamped(clamped)
                if solution is not None:
                    logger.warning(f"Target ({target.x:.3f}, {target.y:.3f}) clamped to "
                                   f"({self.origin.x + clamped.x:.3f}, "
                                   f"{self.origin.y + clamped.y:.3f}): {e}")
                    return self._with_solution(target, solution.arm1_angle,
                                               solution.arm2_angle, reachable=False)
            logger.warning(f"Keeping last pose for target "
                           f"({target.x:.3f}, {target.y:.3f}): {e}")
            return replace(self, target=target, reachable=False)

        return self._with_solution(target, solution.arm1_angle, solution.arm2_angle)

    def _solve_clamped(self, clamped: Point) -> Optional[Solution]:
        """Solve for a point already on the annulus; None for degenerate links."""
        try:
            return solve_inverse(clamped, self.arm1.length, self.arm2.length)
        except KinematicsError:
            return None

    def _with_solution(self, target: Point, arm1_angle: float, arm2_angle: float,
                       reachable: bool = True) -> "ArmState":
        return replace(
            self,
            target=target,
            arm1=replace(self.arm1, angle=arm1_angle),
            arm2=replace(self.arm2, angle=arm2_angle),
            reachable=reachable,
        )

    # Form-control edits. These do not re-solve; the pose follows the new
    # values until the next retarget.

    def with_origin(self, x: Optional[float] = None, y: Optional[float] = None) -> "ArmState":
        origin = Point(self.origin.x if x is None else x,
                       self.origin.y if y is None else y)
        return replace(self, origin=origin)

    def with_arm1(self, length: Optional[float] = None,
                  angle: Optional[float] = None) -> "ArmState":
        return replace(self, arm1=_edit_arm(self.arm1, length, angle))

    def with_arm2(self, length: Optional[float] = None,
                  angle: Optional[float] = None) -> "ArmState":
        return replace(self, arm2=_edit_arm(self.arm2, length, angle))

    def snapshot(self, precision: int = DISPLAY_PRECISION) -> Dict[str, Any]:
        """
        Plain-dict view of the state and its pose for display.

        Args:
            precision: Decimal places kept on every float

        Returns:
            Dict with origin, arm1, arm2, arm1_end, arm2_end, target, reachable
        """
        pose = self.pose

        def point(p: Point) -> Dict[str, float]:
            return {'x': round(p.x, precision), 'y': round(p.y, precision)}

        def arm(a: Arm) -> Dict[str, float]:
            return {'length': round(a.length, precision), 'angle': round(a.angle, precision)}

        return {
            'origin': point(self.origin),
            'arm1': arm(self.arm1),
            'arm2': arm(self.arm2),
            'arm1_end': point(pose.arm1_end),
            'arm2_end': point(pose.arm2_end),
            'target': point(self.target),
            'reachable': self.reachable,
        }


def _edit_arm(arm: Arm, length: Optional[float], angle: Optional[float]) -> Arm:
    if length is not None and not (np.isfinite(length) and length >= 0):
        raise ValueError(f"Arm length must be finite and non-negative, got {length}")
    return Arm(arm.length if length is None else length,
               arm.angle if angle is None else angle)


def default_state() -> ArmState:
    """State the simulation starts in, before any target is solved."""
    return ArmState(
        origin=Point(*DEFAULT_ORIGIN),
        arm1=Arm(*DEFAULT_ARM1),
        arm2=Arm(*DEFAULT_ARM2),
        target=Point(*DEFAULT_TARGET),
    )
