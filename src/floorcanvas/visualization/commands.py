"""Drawing commands emitted by the renderer.

A render pass is described as an ordered list of commands in pixel space.
The list is independent of any drawing backend, so it can be inspected in
tests or replayed on a caller-supplied surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class Layer(IntEnum):
    """Paint layers in the order they are drawn."""

    BACKGROUND = 0
    GRID = 1
    HALLWAYS = 2
    ROOMS = 3
    WALLS = 4
    DOORS = 5
    WINDOWS = 6
    PLACEHOLDER = 7


@dataclass(frozen=True)
class Clear:
    """Fill the whole surface with ``color``."""

    color: str
    layer: Layer = Layer.BACKGROUND


@dataclass(frozen=True)
class Line:
    """Straight stroke from ``start`` to ``end``."""

    start: tuple[float, float]
    end: tuple[float, float]
    color: str
    width: int
    layer: Layer


@dataclass(frozen=True)
class Rect:
    """Rectangle over the inclusive pixel box ``(x0, y0, x1, y1)``.

    Attributes:
        box: Inclusive pixel box.
        fill: Fill colour, or None for no fill.
        outline: Border colour, or None for no border.
        width: Border width, drawn inside the box.
        dash: ``(on, off)`` lengths for a dashed border, or None for solid.
        entity_id: Id of the entity the rectangle belongs to.
    """

    box: tuple[int, int, int, int]
    fill: str | None
    outline: str | None
    width: int
    layer: Layer
    dash: tuple[int, int] | None = None
    entity_id: str | None = None


@dataclass(frozen=True)
class Arc:
    """Circular arc around ``center``, angles in degrees clockwise from +x."""

    center: tuple[float, float]
    radius: float
    start_angle: float
    end_angle: float
    color: str
    width: int
    layer: Layer


@dataclass(frozen=True)
class Text:
    """Single line of text centred on ``center``."""

    center: tuple[float, float]
    text: str
    size: int
    color: str
    layer: Layer


DrawCommand = Union[Clear, Line, Rect, Arc, Text]
