# constants.py
"""
Application-wide constants for MapMeasure.
Centralizes configuration values, draw styles, and default settings.
"""

# Application Information
APP_NAME = "MapMeasure"
APP_VERSION = "1.0.0"
ORGANIZATION = "MapMeasure"
ORGANIZATION_DOMAIN = "mapmeasure.local"

# Geodesy
# Mean earth radius (IUGG), used as a sphere for lengths and areas
EARTH_RADIUS = 6371008.8
WEB_MERCATOR_EPSG = 3857
WGS84_EPSG = 4326
# Half the width of the Web Mercator square, in metres
WEB_MERCATOR_EXTENT = 20037508.342789244
MAX_LATITUDE = 85.0511287798066

# Default Values
DEFAULT_DRAW_TYPE = "Point"
DEFAULT_PRECISION = 2
DEFAULT_VIEW_CENTER = (0.0, 0.0)
DEFAULT_VIEW_ZOOM = 2
TILE_SIZE = 256
GRATICULE_STEP = 30  # degrees

# Canvas Configuration
CANVAS_ZOOM_FACTOR = 1.15
CANVAS_MIN_ZOOM = 0
CANVAS_MAX_ZOOM = 20
SNAP_TOLERANCE_PX = 8

# Minimum committed vertices before a geometry may be finalized
MIN_VERTICES = {
    "Point": 1,
    "Line": 2,
    "Polygon": 3,
}


class DrawStyle:
    """Stroke/fill definitions for drawn geometries (RGBA tuples)."""

    POINT_RADIUS = 5
    POINT_FILL = (255, 0, 0, 128)
    POINT_STROKE = (255, 0, 0, 255)
    POINT_STROKE_WIDTH = 1

    LINE_STROKE = (0, 0, 255, 255)
    LINE_STROKE_WIDTH = 2

    POLYGON_STROKE = (0, 0, 255, 255)
    POLYGON_STROKE_WIDTH = 2
    POLYGON_FILL = (0, 0, 255, 26)

    PREVIEW_STROKE = (0, 0, 255, 160)
    PREVIEW_STROKE_WIDTH = 2

    GRATICULE = (200, 200, 200, 255)
    BACKGROUND = "#F2EFE9"


# UI Messages
INSTRUCTIONS = (
    "Select draw type and start drawing by first click on the map, when you "
    "finish drawing click once again where you left to get dimension."
)
LENGTH_TEMPLATE = "Line length: {value} meters"
AREA_TEMPLATE = "Polygon area: {value} square meters"
UNAVAILABLE_LENGTH = "Line length: unavailable"
UNAVAILABLE_AREA = "Polygon area: unavailable"
DIMENSION_LABEL = "Dimension:"

# Logging Configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_DIR_NAME = ".mapmeasure"
LOG_FILE_NAME = "mapmeasure.log"
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 3

# Keyboard Shortcuts
SHORTCUT_RELOAD = "Ctrl+R"
SHORTCUT_QUIT = "Ctrl+Q"
SHORTCUT_ZOOM_IN = "Ctrl++"
SHORTCUT_ZOOM_OUT = "Ctrl+-"
