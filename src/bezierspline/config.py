"""
Configuration & Global Constants
================================
This module serves as the central registry for the editor's tunable constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (radii, capacities, colors) from being
   scattered throughout the model, controller and view layers.
2. Consistency: The hit-test radius used by the controller and the circle radius
   drawn by the renderer must stay in sync; both read them from here.

Exports:
    MAX_KNOTS (int): Fixed capacity of the curve's knot buffer.
    KNOT_RADIUS (float): Radius of a knot circle, also the selection hit radius.
    CONTROL_POINT_RADIUS (float): Radius of a handle circle.
    SAMPLE_STEP (float): Parameter step used when flattening a segment.
"""

APP_NAME: str = "Bézier spline"

# Window / frame loop
WINDOW_WIDTH: int = 1600
WINDOW_HEIGHT: int = 900
TARGET_FPS: int = 60

# Curve model
MAX_KNOTS: int = 256
CONTROL_POINTS_PER_KNOT: int = 2

# Interaction & drawing sizes (pixels)
KNOT_RADIUS: float = 15.0
CONTROL_POINT_RADIUS: float = 10.0
HANDLE_LINE_WIDTH: float = 2.0

# Curve flattening
SAMPLE_STEP: float = 0.01

# Playback cursor advance, in segments per second
PLAYBACK_SPEED: float = 0.5

# Colors (0xRRGGBB)
BACKGROUND_COLOR: int = 0x181818
CURVE_COLOR: int = 0xE62937
KNOT_COLOR: int = 0xE62937
HANDLE_COLOR: int = 0x0079F1

# Key bindings
KEY_RESET: str = "C"
KEY_PEN: str = "P"
KEY_SELECT: str = "S"
