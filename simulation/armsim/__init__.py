"""
Two-link planar arm simulation.

Closed-form forward and inverse kinematics (law of cosines) for a 2-DOF
planar arm, plus the immutable host state and the screen/model transform
used to drive it.
"""

from armsim.errors import DegenerateTriangle, KinematicsError, UnreachableTarget
from armsim.geometry import Point, ReachRange, distance, law_of_cosines, reach_range
from armsim.kinematics import Arm, ArmKinematics, Pose, Solution, solve_forward, solve_inverse
from armsim.state import ArmState, UnreachablePolicy, default_state
from armsim.transform import ViewTransform

__version__ = "0.1.0"
