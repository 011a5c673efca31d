"""Solve the arm for a target and print the resulting state.

Usage examples::

    # Default arm and target
    python run_demo.py

    # Longer base link, clamp targets that are out of reach
    python run_demo.py --arm1-length 300 --target 500 80 --policy clamp
"""

import argparse
import json
import logging
import sys

from armsim.config import DISPLAY_PRECISION
from armsim.errors import KinematicsError
from armsim.geometry import Point
from armsim.state import UnreachablePolicy, default_state

logger = logging.getLogger("run_demo")


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-link planar arm kinematics demo")
    parser.add_argument("--arm1-length", type=float, help="Base link length")
    parser.add_argument("--arm2-length", type=float, help="Outer link length")
    parser.add_argument("--target", type=float, nargs=2, metavar=("X", "Y"),
                        help="Target position (canvas units, y up)")
    parser.add_argument("--policy", choices=[p.value for p in UnreachablePolicy],
                        default=UnreachablePolicy.FREEZE.value,
                        help="Handling of unreachable targets")
    parser.add_argument("--precision", type=int, default=DISPLAY_PRECISION,
                        help="Decimal places in the output")
    parser.add_argument("--verbose", action="store_true", help="Log every solve")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    state = default_state().with_arm1(length=args.arm1_length).with_arm2(length=args.arm2_length)
    target = Point(*args.target) if args.target else state.target

    try:
        state = state.retarget(target, policy=UnreachablePolicy(args.policy))
    except KinematicsError as e:
        logger.error(f"Cannot solve for target ({target.x}, {target.y}): {e}")
        return 1

    print(json.dumps(state.snapshot(args.precision), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
