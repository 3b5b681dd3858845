"""Default settings for the Argand plane view."""

# =============================================================================
# Canvas / View
# =============================================================================

CANVAS_WIDTH = 760
CANVAS_HEIGHT = 560
DEFAULT_ZOOM = 100.0  # pixels per unit

# Zoom slider and typed-entry limits
ZOOM_SLIDER_MIN = 5
ZOOM_SLIDER_MAX = 300
ZOOM_INPUT_MIN = 1
ZOOM_INPUT_MAX = 600
ZOOM_FACTOR = 1.1

# =============================================================================
# Magnitude
# =============================================================================

EXPONENT_MIN = -300
EXPONENT_MAX = 300
DEFAULT_MANTISSA = 1.0
DEFAULT_EXPONENT = 0

# =============================================================================
# Grid
# =============================================================================

TARGET_LINES = 10
LOG_FLOOR = 1e-30
TICK_DECIMALS = 12
TICK_EPSILON = 1e-12

# =============================================================================
# Geometry
# =============================================================================

ARC_MAX_RADIUS = 1.0
CIRCLE_GATE_FACTOR = 3
UNIT_TOLERANCE = 1e-12

# =============================================================================
# Rotation
# =============================================================================

ROTATION_RATE = 0.8  # radians per second

# =============================================================================
# Formatting
# =============================================================================

INFINITY_SYMBOL = "∞"
SCI_UPPER = 1e6
SCI_LOWER = 1e-3

# =============================================================================
# Display
# =============================================================================

FONT_SIZE = 12
LABEL_FONT_SIZE = 11
PADDING = 10
POINT_RADIUS = 5
HELP_OVERLAY_ALPHA = 200
DASH = (6, 6)

COLORS = {
    "background": (255, 255, 255),
    "grid": (241, 245, 249),
    "axis": (51, 65, 85),
    "axis_caption": (75, 85, 99),
    "tick_label": (55, 65, 81),
    "unit_circle": (56, 189, 248),
    "unit_label": (2, 132, 199),
    "magnitude_circle": (192, 132, 252),
    "magnitude_label": (126, 34, 206),
    "arc": (245, 158, 11),
    "projection": (148, 163, 184),
    "projection_box": (203, 213, 225),
    "vector": (15, 118, 110),
    "point": (5, 150, 105),
    "point_label": (4, 120, 87),
}
