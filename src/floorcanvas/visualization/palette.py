"""Colours and stroke styles for floor plan rendering."""

from __future__ import annotations

from ..core.kinds import RoomType

# ------------------ Room fills ------------------
ROOM_COLORS = {
    RoomType.LIVING: "#fef3c7",
    RoomType.BEDROOM: "#dbeafe",
    RoomType.KITCHEN: "#fed7d7",
    RoomType.BATHROOM: "#e0f2fe",
    RoomType.OFFICE: "#f3e8ff",
    RoomType.DINING: "#fde68a",
    RoomType.ENTRY: "#fce7f3",
    RoomType.CIRCULATION: "#f1f5f9",
}
DEFAULT_ROOM_COLOR = "#f8fafc"

ROOM_BORDER_COLOR = "#64748b"
ROOM_BORDER_WIDTH = 2
ENTRY_BORDER_COLOR = "#d97706"
ENTRY_BORDER_WIDTH = 4

# ------------------ Hallways ------------------
HALLWAY_FILL_COLOR = "#f1f5f9"
HALLWAY_BORDER_COLOR = "#94a3b8"
HALLWAY_BORDER_WIDTH = 2
HALLWAY_DASH = (5, 5)  # on, off
HALLWAY_LABEL_COLOR = "#64748b"

# ------------------ Labels ------------------
LABEL_COLOR = "#1e293b"
LABEL_SECONDARY_COLOR = "#475569"

# ------------------ Structure and openings ------------------
GRID_COLOR = "#e5e7eb"
GRID_WIDTH = 1
WALL_COLOR = "#374151"
WALL_WIDTH = 8
DOOR_COLOR = "#059669"
DOOR_WIDTH = 4
WINDOW_COLOR = "#0ea5e9"
WINDOW_WIDTH = 6

# ------------------ Placeholder ------------------
PLACEHOLDER_BORDER_COLOR = "#cbd5e1"
PLACEHOLDER_TEXT_COLOR = "#64748b"


def room_fill_color(room_type: str) -> str:
    """Return the fill colour for a raw room type string.

    Unknown types map to DEFAULT_ROOM_COLOR.
    """
    return ROOM_COLORS.get(RoomType.resolve(room_type), DEFAULT_ROOM_COLOR)
