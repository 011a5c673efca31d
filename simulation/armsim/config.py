"""Simulation configuration.

Edit this file to change the canvas and the arm the simulation starts with.
Lengths and coordinates are in canvas units, angles in radians.
"""

# Canvas (viewBox) size. The origin sits at 10% / 35% of it.
CANVAS_WIDTH = 600
CANVAS_HEIGHT = 300

DEFAULT_ORIGIN = (CANVAS_WIDTH * 0.1, CANVAS_HEIGHT * 0.35)

# (length, angle) per link. Arm 2's angle is relative to arm 1.
DEFAULT_ARM1 = (225.0, 0.5)
DEFAULT_ARM2 = (200.0, 5.0)

DEFAULT_TARGET = (450.0, 50.0)

# Relative slack on reach checks so boundary targets computed by
# forward kinematics still solve
REACH_TOLERANCE = 1e-9

# Decimal places in the data snapshot
DISPLAY_PRECISION = 5
