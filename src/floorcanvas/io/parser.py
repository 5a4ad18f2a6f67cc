"""Parser for floor plan documents produced by a generator.

This module validates the loosely-typed JSON a generator returns and
converts it into an immutable FloorPlanDocument. Validation is permissive:
only an unusable top-level structure is an error. Individual entities that
are not objects are dropped and reported, and missing fields are filled
with defaults.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.errors import MalformedDocumentError
from ..core.model import (
    Bounds,
    Dimensions,
    Door,
    FloorPlanDocument,
    Point,
    Room,
    Wall,
    Window,
)

LOGGER = logging.getLogger(__name__)

MIN_PLAN_EXTENT = 1.0

# Prefixes used to synthesize ids for entities that have none
ID_PREFIXES = {
    "rooms": "room",
    "hallways": "hallway",
    "walls": "wall",
    "doors": "door",
    "windows": "window",
}


@dataclass(frozen=True)
class DroppedEntity:
    """An entry that was excluded from the normalized document.

    Attributes:
        collection: Name of the source list (``"rooms"``, ``"walls"``, ...).
        index: Position of the entry in the source list.
        reason: Human-readable explanation.
    """

    collection: str
    index: int
    reason: str


@dataclass(frozen=True)
class NormalizationReport:
    """Result of normalizing a raw document."""

    document: FloorPlanDocument
    dropped: tuple[DroppedEntity, ...] = ()


def _to_float(value: Any, default: float | None = 0.0) -> float | None:
    """Coerce a JSON value to float.

    Numbers and numeric strings are accepted. Booleans, containers and
    anything unparseable yield ``default``. Non-finite values are kept.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            # JSON integers are unbounded
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return default
    return default


def _to_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _to_str(value: Any, default: str = "") -> str:
    text = _to_optional_str(value)
    return default if text is None else text


def _entity_id(data: Mapping, collection: str, index: int) -> str:
    """Return the entity id, synthesizing one from its index when absent."""
    entity_id = _to_optional_str(data.get("id"))
    if entity_id is None or not entity_id.strip():
        return f"{ID_PREFIXES[collection]}-{index + 1}"
    return entity_id


def _parse_point(value: Any) -> Point:
    if not isinstance(value, Mapping):
        return Point(0.0, 0.0)
    return Point(_to_float(value.get("x")), _to_float(value.get("y")))


def _parse_bounds(value: Any) -> Bounds:
    if not isinstance(value, Mapping):
        return Bounds(0.0, 0.0, 0.0, 0.0)
    return Bounds(
        x=_to_float(value.get("x")),
        y=_to_float(value.get("y")),
        width=_to_float(value.get("width")),
        height=_to_float(value.get("height")),
    )


def _parse_dimensions(value: Any) -> Dimensions:
    """Parse the plan extent, clamping invalid sides to the minimum."""
    if not isinstance(value, Mapping):
        value = {}

    def side(raw: Any) -> float:
        number = _to_float(raw, default=None)
        if number is None or not math.isfinite(number) or number < MIN_PLAN_EXTENT:
            return MIN_PLAN_EXTENT
        return number

    return Dimensions(width=side(value.get("width")), height=side(value.get("height")))


def _parse_room(data: Mapping, collection: str, index: int) -> Room:
    return Room(
        id=_entity_id(data, collection, index),
        name=_to_str(data.get("name")),
        bounds=_parse_bounds(data.get("bounds")),
        type=_to_str(data.get("type")),
        square_footage=_to_float(data.get("squareFootage"), default=None),
    )


def _parse_wall(data: Mapping, collection: str, index: int) -> Wall:
    return Wall(
        id=_entity_id(data, collection, index),
        start=_parse_point(data.get("start")),
        end=_parse_point(data.get("end")),
        thickness=_to_float(data.get("thickness")),
    )


def _parse_door(data: Mapping, collection: str, index: int) -> Door:
    return Door(
        id=_entity_id(data, collection, index),
        position=_parse_point(data.get("position")),
        wall_id=_to_optional_str(data.get("wallId")),
        width=_to_float(data.get("width")),
        swing=_to_str(data.get("swing")),
        type=_to_optional_str(data.get("type")),
    )


def _parse_window(data: Mapping, collection: str, index: int) -> Window:
    return Window(
        id=_entity_id(data, collection, index),
        position=_parse_point(data.get("position")),
        wall_id=_to_optional_str(data.get("wallId")),
        width=_to_float(data.get("width")),
        dimensions=_to_optional_str(data.get("dimensions")),
    )


def _parse_collection(
    plan: Mapping,
    collection: str,
    parse_entity: Callable[[Mapping, str, int], Any],
    dropped: list[DroppedEntity],
) -> tuple:
    """Parse one entity list, recording entries that are not objects."""
    raw_items = plan.get(collection)
    if raw_items is None:
        return ()
    if not isinstance(raw_items, list):
        LOGGER.warning(
            "Ignoring '%s': expected a list, got %s", collection, type(raw_items).__name__
        )
        return ()

    entities = []
    for index, item in enumerate(raw_items):
        if not isinstance(item, Mapping):
            reason = f"expected an object, got {type(item).__name__}"
            LOGGER.warning("Dropping %s[%d]: %s", collection, index, reason)
            dropped.append(DroppedEntity(collection, index, reason))
            continue
        entities.append(parse_entity(item, collection, index))
    return tuple(entities)


def normalize_with_report(raw: Any) -> NormalizationReport:
    """Normalize a raw document and report the entries that were dropped.

    Args:
        raw: Decoded JSON, typically the body returned by a generator.

    Returns:
        NormalizationReport with the render-ready document and the dropped
        entries.

    Raises:
        MalformedDocumentError: If ``raw`` is not an object or has no
            ``floorPlan`` object.
    """
    if not isinstance(raw, Mapping):
        raise MalformedDocumentError(
            f"Floor plan document must be an object, got {type(raw).__name__}"
        )

    plan = raw.get("floorPlan")
    if not isinstance(plan, Mapping):
        raise MalformedDocumentError("Floor plan document has no 'floorPlan' object")

    dropped: list[DroppedEntity] = []
    document = FloorPlanDocument(
        dimensions=_parse_dimensions(plan.get("dimensions")),
        rooms=_parse_collection(plan, "rooms", _parse_room, dropped),
        walls=_parse_collection(plan, "walls", _parse_wall, dropped),
        doors=_parse_collection(plan, "doors", _parse_door, dropped),
        windows=_parse_collection(plan, "windows", _parse_window, dropped),
        hallways=_parse_collection(plan, "hallways", _parse_room, dropped),
        total_square_footage=_to_float(plan.get("totalSquareFootage"), default=None),
        description=_to_str(raw.get("description")),
    )

    LOGGER.debug(
        "Normalized floor plan: %d rooms, %d hallways, %d walls, %d doors, %d windows",
        len(document.rooms),
        len(document.hallways),
        len(document.walls),
        len(document.doors),
        len(document.windows),
    )
    return NormalizationReport(document=document, dropped=tuple(dropped))


def normalize(raw: Any) -> FloorPlanDocument:
    """Normalize a raw document into a render-ready FloorPlanDocument.

    Raises:
        MalformedDocumentError: If the top-level structure is unusable.
    """
    return normalize_with_report(raw).document


def load_document(path: str | Path) -> NormalizationReport:
    """Load and normalize a floor plan from a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        NormalizationReport for the file contents.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the file is not valid JSON.
        MalformedDocumentError: If the JSON has no usable floor plan.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    return normalize_with_report(data)


def _point_to_dict(point: Point) -> dict:
    return {"x": point.x, "y": point.y}


def _room_to_dict(room: Room) -> dict:
    data = {
        "id": room.id,
        "name": room.name,
        "bounds": {
            "x": room.bounds.x,
            "y": room.bounds.y,
            "width": room.bounds.width,
            "height": room.bounds.height,
        },
        "type": room.type,
    }
    if room.square_footage is not None:
        data["squareFootage"] = room.square_footage
    return data


def document_to_dict(document: FloorPlanDocument) -> dict:
    """Convert a normalized document back to its JSON wire shape.

    Optional fields that are unset are omitted, so a document that was
    already complete round-trips to an equal dictionary.
    """
    plan: dict[str, Any] = {
        "dimensions": {
            "width": document.dimensions.width,
            "height": document.dimensions.height,
        },
    }
    if document.total_square_footage is not None:
        plan["totalSquareFootage"] = document.total_square_footage
    plan["rooms"] = [_room_to_dict(room) for room in document.rooms]
    plan["walls"] = [
        {
            "id": wall.id,
            "start": _point_to_dict(wall.start),
            "end": _point_to_dict(wall.end),
            "thickness": wall.thickness,
        }
        for wall in document.walls
    ]

    doors = []
    for door in document.doors:
        door_dict = {
            "id": door.id,
            "position": _point_to_dict(door.position),
            "wallId": door.wall_id,
            "width": door.width,
            "swing": door.swing,
        }
        if door.type is not None:
            door_dict["type"] = door.type
        doors.append(door_dict)
    plan["doors"] = doors

    windows = []
    for window in document.windows:
        window_dict = {
            "id": window.id,
            "position": _point_to_dict(window.position),
            "wallId": window.wall_id,
            "width": window.width,
        }
        if window.dimensions is not None:
            window_dict["dimensions"] = window.dimensions
        windows.append(window_dict)
    plan["windows"] = windows

    if document.hallways:
        plan["hallways"] = [_room_to_dict(hallway) for hallway in document.hallways]

    return {"floorPlan": plan, "description": document.description}
