"""Global parameters for floor plan modelling.

Dimensions are in meters. Plan coordinates are (x, z); y is the vertical
render axis.
"""

# ------------------ Walls ------------------
HEIGHT = 1.3  # Wall height
DEPTH = 0.05  # Wall thickness
SKIRTING_HEIGHT = HEIGHT / 20
SKIRTING_DEPTH = 1.2 * DEPTH

# ------------------ Floors ------------------
FLOOR_DEPTH = 0.03  # Extrusion depth of a room floor slab

# ------------------ Appearance ------------------
DEFAULT_FLOOR_TEXTURE = "wood2"
DEFAULT_WALL_TEXTURE = "plaster"
SKIRTING_TEXTURE = "skirting"

TEXTURE_COLORS = {
    "wood": "#a0714f",
    "wood2": "#b5835a",
    "parquet": "#c89b6d",
    "tiles": "#d9dde0",
    "marble": "#ece9e4",
    "concrete": "#9a9a96",
    "plaster": "#f2efe9",
    "brick": "#a4553f",
    "skirting": "#6b5a4a",
}
FALLBACK_COLOR = "#cccccc"

# ------------------ Markers and labels ------------------
MARKER_RADIUS = 0.06
MARKER_COLOR = "#ffffff"
SELECTED_MARKER_COLOR = "#e2a149"
LINE_WIDTH = 0.0075
LABEL_OFFSET = 0.2  # Distance between a wall and its length label

# ------------------ Persistence ------------------
PLAN_KEY = "floorPlan"
