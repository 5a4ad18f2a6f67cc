"""Open enumerations used by floor plan entities.

Generators are free to invent new room types or door swings. Each
enumeration lists the values the renderer knows how to treat specially
and resolves anything else to ``OTHER``; the raw string is kept on the
entity so unknown values survive a normalize/serialise cycle.
"""

from __future__ import annotations

from enum import Enum


class _OpenEnum(str, Enum):
    """String enum whose ``resolve`` never fails."""

    @classmethod
    def resolve(cls, value: object) -> "_OpenEnum":
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.OTHER  # type: ignore[attr-defined]


class RoomType(_OpenEnum):
    LIVING = "living"
    BEDROOM = "bedroom"
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    OFFICE = "office"
    DINING = "dining"
    ENTRY = "entry"
    CIRCULATION = "circulation"
    OTHER = "other"


class DoorSwing(_OpenEnum):
    INWARD = "inward"
    OUTWARD = "outward"
    OTHER = "other"


class DoorType(_OpenEnum):
    ENTRY = "entry"
    INTERIOR = "interior"
    OTHER = "other"
