"""
Geometry Canvas Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Default screen calibration (pixels per physical unit)
- Default shape styling
- Interaction thresholds and snapping increments
- Keyboard nudge/scale steps
- Numerical tolerances used by the geometry services
"""

import os

# ======================================================================
# CALIBRATION DEFAULTS
# ======================================================================
# Used until the user calibrates their screen. Small units are one tenth
# of the main unit (mm for cm, tenth-inch for in).

DEFAULT_PIXELS_PER_CM = 60.0
DEFAULT_PIXELS_PER_INCH = 152.4
SMALL_UNITS_PER_UNIT = 10

DEFAULT_MEASUREMENT_UNIT = 'cm'

# ======================================================================
# DEFAULT SHAPE STYLE
# ======================================================================

DEFAULT_FILL_COLOR = 'rgba(190, 227, 219, 0.5)'
DEFAULT_STROKE_COLOR = '#555B6E'
DEFAULT_STROKE_WIDTH = 2.0
DEFAULT_LINE_STROKE_WIDTH = 3.0
DEFAULT_OPACITY = 1.0

# Shape color cycle (HSL, golden-ratio hue stepping)
SHAPE_COLOR_SATURATION = 0.45
SHAPE_COLOR_LIGHTNESS = 0.80
SHAPE_COLOR_ALPHA = 0.5

# ======================================================================
# DEFAULT SHAPE GEOMETRY
# ======================================================================

DEFAULT_CIRCLE_RADIUS = 50.0
DEFAULT_RECTANGLE_WIDTH = 100.0
DEFAULT_RECTANGLE_HEIGHT = 80.0
DEFAULT_TRIANGLE_SIZE = 100.0   # Bounding width/height of the default triangle
DEFAULT_LINE_LENGTH = 100.0

# Triangle drawn from a drag gesture is widened so short drags are usable
TRIANGLE_DRAG_WIDTH_FACTOR = 1.2

# Smallest dimension any shape may be reduced to (pixels)
MIN_SHAPE_DIMENSION = 1.0

# ======================================================================
# INTERACTION THRESHOLDS
# ======================================================================

DRAG_THRESHOLD = 3.0             # Pixels before a press becomes a move drag
MIN_CREATE_DISTANCE = 5.0        # Pixels a draw gesture must span to commit
LINE_HIT_MIN_RADIUS = 10.0       # Usability floor for thin lines
LINE_HIT_STROKE_FACTOR = 2.0     # Hit radius = stroke width * factor

# ======================================================================
# SNAPPING
# ======================================================================

ROTATION_SNAP_DEGREES = 15.0
ROTATION_DEGREES_PER_PIXEL = 0.5  # Horizontal pointer travel -> rotation

# ======================================================================
# KEYBOARD CONSTANTS
# ======================================================================
# Arrow keys move by one small grid unit, or one full unit with Shift.
# +/- scale by KEY_SCALE_STEP; minus divides so the two keys cancel.

KEY_SCALE_STEP = 0.05

# ======================================================================
# NUMERICAL TOLERANCES
# ======================================================================

GEOMETRY_EPSILON = 1e-9
BARYCENTRIC_EPSILON = 1e-4
TRIANGLE_CLASSIFY_TOLERANCE = 1e-4
RIGHT_ANGLE_TOLERANCE = 0.5       # Degrees
ANGLE_VERIFY_TOLERANCE = 5.0      # Degrees before falling back to Law of Sines

MIN_TRIANGLE_ANGLE = 1
MAX_TRIANGLE_ANGLE = 179

# Angle slot (angle1..angle3) -> vertex index. angle1 is opposite side1
# (p0-p1) and therefore sits at vertex 2.
ANGLE_SLOT_VERTEX_MAP = (2, 0, 1)

# ======================================================================
# CONFIGURATION
# ======================================================================

CONFIG_DIR = os.path.join(os.path.expanduser('~'), '.geometry_canvas')
CONFIG_FILE_NAME = 'config.json'
