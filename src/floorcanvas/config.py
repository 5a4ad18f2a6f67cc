"""
Configuration for Floor Canvas
"""

# Canvas defaults (pixels)
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
BACKGROUND_COLOR = "#ffffff"

# Grid
GRID_PITCH_PX = 20  # Background grid spacing, independent of zoom
GRID_UNIT_PX = 20  # Pixels per document grid unit, before zoom

# Zoom (percent)
ZOOM_DEFAULT = 100
ZOOM_MIN = 25
ZOOM_MAX = 400

# Summary badges
DESCRIPTION_BADGE_LIMIT = 50
DESCRIPTION_ELLIPSIS = "..."
