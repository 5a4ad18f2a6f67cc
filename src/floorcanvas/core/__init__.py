"""Core data models for floor plan documents."""

from .kinds import DoorSwing, DoorType, RoomType
from .model import Bounds, Dimensions, Door, FloorPlanDocument, Point, Room, Wall, Window

__all__ = [
    "Bounds",
    "Dimensions",
    "Door",
    "DoorSwing",
    "DoorType",
    "FloorPlanDocument",
    "Point",
    "Room",
    "RoomType",
    "Wall",
    "Window",
]
