"""Constants and defaults for ShapePaint drawings."""

from typing import Tuple

from .types import BLACK, RED, WHITE, RgbColor, ShapeKind


DEFAULT_CANVAS_WIDTH = 800
DEFAULT_CANVAS_HEIGHT = 600
# Largest accepted side; the export image is allocated at canvas size
MAX_CANVAS_SIZE = 8192

DEFAULT_DRAW_COLOR: RgbColor = BLACK
DEFAULT_FILL_COLOR: RgbColor = WHITE
DEFAULT_BACKGROUND_COLOR: RgbColor = WHITE
SURROUND_COLOR = "#404040"

MIN_STROKE_WIDTH = 1
MAX_STROKE_WIDTH = 10

MIN_SCALE = 0.5
MAX_SCALE = 5.0
ZOOM_FACTOR = 1.1
# Wheel angle delta of one notch (eighths of a degree)
WHEEL_STEP_DELTA = 120

# Pending polygon vertex markers
MARKER_RADIUS = 4
MARKER_COLOR: RgbColor = RED
MARKER_FONT_FAMILY = "Arial"
MARKER_FONT_SIZE = 12
MARKER_LABEL_OFFSET: Tuple[int, int] = (5, -5)

TOOL_NAMES = [kind.value for kind in ShapeKind]
DEFAULT_TOOL = ShapeKind.LINE

DEFAULT_CODE_TARGET = "java"

SMOKE_ENV_VAR = "SHAPEPAINT_SMOKE"
LOG_LEVEL_ENV_VAR = "SHAPEPAINT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
