"""Geometry utilities for floor plan rendering.

This module provides the grid-to-pixel mapping and the text rules used to
lay out room labels.
"""

from .labels import format_square_footage, split_room_label
from .transform import GRID_UNIT_PX, bounds_to_pixels, clamp_zoom, point_to_pixels

__all__ = [
    "GRID_UNIT_PX",
    "bounds_to_pixels",
    "clamp_zoom",
    "format_square_footage",
    "point_to_pixels",
    "split_room_label",
]
