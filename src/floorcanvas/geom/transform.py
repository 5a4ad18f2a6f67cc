"""Mapping from document grid units to canvas pixels.

The document is drawn at a fixed scale of GRID_UNIT_PX pixels per grid
unit. Zoom is not part of this mapping: it is applied afterwards to the
finished surface.
"""

from __future__ import annotations

import math

from .. import config
from ..core.model import Bounds, Point

GRID_UNIT_PX = config.GRID_UNIT_PX

# Pixel coordinates beyond this magnitude are treated as degenerate
PIXEL_LIMIT = 1_000_000


def is_finite(*values: float) -> bool:
    """Return True if every value is a finite number."""
    return all(math.isfinite(value) for value in values)


def to_pixels(value: float) -> float:
    """Scale a grid-unit length or coordinate to pixels."""
    return value * GRID_UNIT_PX


def _in_range(*pixels: float) -> bool:
    return all(math.isfinite(p) and abs(p) <= PIXEL_LIMIT for p in pixels)


def point_to_pixels(point: Point) -> tuple[float, float] | None:
    """Scale a point to pixels, or return None if it cannot be drawn."""
    px, py = to_pixels(point.x), to_pixels(point.y)
    if not _in_range(px, py):
        return None
    return (px, py)


def length_to_pixels(length: float) -> float:
    """Scale a length to pixels, treating unusable lengths as zero.

    Non-finite, negative and out-of-range lengths all map to zero.
    """
    pixels = to_pixels(length)
    if not _in_range(pixels) or pixels < 0:
        return 0.0
    return pixels


def bounds_to_pixels(bounds: Bounds) -> tuple[int, int, int, int] | None:
    """Scale a rectangle to an inclusive pixel box ``(x0, y0, x1, y1)``.

    A rectangle of pixel size ``w x h`` at ``(x, y)`` covers pixels
    ``x .. x + w - 1`` and ``y .. y + h - 1``.

    Returns:
        The pixel box, or None when the rectangle has zero extent: an
        unusable origin, or a width or height that is non-finite, not
        positive, or rounds to less than one pixel.
    """
    origin = point_to_pixels(Point(bounds.x, bounds.y))
    if origin is None:
        return None
    width = length_to_pixels(bounds.width)
    height = length_to_pixels(bounds.height)
    x, y = origin
    x0, y0 = round(x), round(y)
    x1, y1 = round(x + width) - 1, round(y + height) - 1
    if x1 < x0 or y1 < y0:
        return None
    return (x0, y0, x1, y1)


def clamp_zoom(zoom_percent: float) -> int:
    """Clamp a zoom percentage to the supported range."""
    if not is_finite(zoom_percent):
        return config.ZOOM_DEFAULT
    return int(min(max(round(zoom_percent), config.ZOOM_MIN), config.ZOOM_MAX))
