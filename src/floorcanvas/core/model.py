"""Core data models for floor plan documents.

This module defines the immutable structures a normalized floor plan is
made of. Coordinates and sizes are expressed in grid units; the renderer
owns the mapping to pixels.
"""

from __future__ import annotations

from dataclasses import dataclass

from .kinds import DoorSwing, DoorType, RoomType


@dataclass(frozen=True)
class Point:
    """Represents a 2D point in grid units.

    Attributes:
        x: The x-coordinate, growing to the right.
        y: The y-coordinate, growing downwards.
    """

    x: float
    y: float


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Dimensions:
    """Nominal extent of the plan. Not a clipping bound."""

    width: float
    height: float


@dataclass(frozen=True)
class Room:
    """Represents a room or a hallway.

    Attributes:
        id: Identifier, unique within its own list.
        name: Display name, possibly ending in a dimension token such as
            ``"(12' x 10')"``.
        bounds: Rectangle occupied by the room.
        type: Raw type string as produced by the generator.
        square_footage: Optional display-only area.
    """

    id: str
    name: str
    bounds: Bounds
    type: str
    square_footage: float | None = None

    @property
    def kind(self) -> RoomType:
        return RoomType.resolve(self.type)


@dataclass(frozen=True)
class Wall:
    """Represents a wall segment.

    Attributes:
        id: Identifier of the wall.
        start: First endpoint.
        end: Second endpoint. May equal ``start``.
        thickness: Informational only; walls are stroked at a fixed width.
    """

    id: str
    start: Point
    end: Point
    thickness: float


@dataclass(frozen=True)
class Door:
    """Represents a door opening.

    Attributes:
        id: Identifier of the door.
        position: Hinge position of the door.
        wall_id: Back-reference to a wall. Never resolved.
        width: Door leaf width, also the radius of the swing arc.
        swing: Raw swing string.
        type: Optional raw door type (``"entry"`` or ``"interior"``).
    """

    id: str
    position: Point
    wall_id: str | None
    width: float
    swing: str
    type: str | None = None

    @property
    def swing_kind(self) -> DoorSwing:
        return DoorSwing.resolve(self.swing)

    @property
    def door_kind(self) -> DoorType | None:
        return None if self.type is None else DoorType.resolve(self.type)


@dataclass(frozen=True)
class Window:
    """Represents a window opening.

    Attributes:
        id: Identifier of the window.
        position: Start of the window along its wall.
        wall_id: Back-reference to a wall. Never resolved.
        width: Length of the window.
        dimensions: Optional display string such as ``"4' x 3'"``.
    """

    id: str
    position: Point
    wall_id: str | None
    width: float
    dimensions: str | None = None


@dataclass(frozen=True)
class FloorPlanDocument:
    """Represents a complete, normalized floor plan.

    Every collection is a tuple in paint order. Hallways are painted first,
    then rooms, walls, doors and windows, whatever the order in the source.

    Attributes:
        dimensions: Nominal plan extent in grid units.
        rooms: Rooms in paint order.
        walls: Walls in paint order.
        doors: Doors in paint order.
        windows: Windows in paint order.
        hallways: Circulation spaces in paint order.
        total_square_footage: Aggregate area as reported by the generator.
        description: Free-text annotation.
    """

    dimensions: Dimensions
    rooms: tuple[Room, ...] = ()
    walls: tuple[Wall, ...] = ()
    doors: tuple[Door, ...] = ()
    windows: tuple[Window, ...] = ()
    hallways: tuple[Room, ...] = ()
    total_square_footage: float | None = None
    description: str = ""
