"""Image generation for floor plan documents.

This module turns a normalized FloorPlanDocument into a raster image. A
render pass first builds an ordered list of drawing commands, then paints
them with Pillow on a freshly cleared surface. The paint order is fixed:
grid, hallways, rooms, walls, doors, windows. Within a layer the document
order is kept.

Entities with unusable geometry (non-finite coordinates, zero or negative
sizes) produce no commands; the rest of the plan is still drawn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from .. import config
from ..core.kinds import RoomType
from ..core.model import Door, FloorPlanDocument, Room, Wall, Window
from ..geom.labels import format_square_footage, split_room_label
from ..geom.transform import (
    bounds_to_pixels,
    clamp_zoom,
    length_to_pixels,
    point_to_pixels,
)
from . import palette
from .commands import Arc, Clear, DrawCommand, Layer, Line, Rect, Text

LOGGER = logging.getLogger(__name__)

# Font sizes (pixels)
NAME_FONT_SIZE = 14
DIMENSION_FONT_SIZE = 11
AREA_FONT_SIZE = 10
HALLWAY_FONT_SIZE = 12
LABEL_LINE_GAP = 4

# Placeholder card shown when there is no document
PLACEHOLDER_CARD_SIZE = (384, 256)
PLACEHOLDER_ICON_SIZE = 48
PLACEHOLDER_ICON_COLOR = "#e0e7ff"
PLACEHOLDER_TITLE = "AI Floor Plan Canvas"
PLACEHOLDER_HINT = (
    "Use the AI generator to create your floor plan",
    "or start drawing manually with the tools",
)


@dataclass(frozen=True)
class ViewParams:
    """View settings for one render pass.

    Attributes:
        grid_visible: Whether to paint the background grid.
        zoom_percent: Zoom applied to the finished surface, clamped to
            ``[ZOOM_MIN, ZOOM_MAX]``. It does not change the pixel
            geometry of the drawing itself.
        canvas_width_px: Surface width in pixels.
        canvas_height_px: Surface height in pixels.
    """

    grid_visible: bool = True
    zoom_percent: int = config.ZOOM_DEFAULT
    canvas_width_px: int = config.CANVAS_WIDTH
    canvas_height_px: int = config.CANVAS_HEIGHT

    def __post_init__(self):
        if self.canvas_width_px <= 0 or self.canvas_height_px <= 0:
            raise ValueError(
                f"Canvas size must be positive, got "
                f"{self.canvas_width_px}x{self.canvas_height_px}"
            )
        object.__setattr__(self, "zoom_percent", clamp_zoom(self.zoom_percent))

    @property
    def size(self) -> Tuple[int, int]:
        return (self.canvas_width_px, self.canvas_height_px)


# ------------------ Command builders ------------------

def _grid_commands(width: int, height: int) -> List[DrawCommand]:
    pitch = config.GRID_PITCH_PX
    commands: List[DrawCommand] = []
    for x in range(0, width + 1, pitch):
        commands.append(
            Line((x, 0), (x, height), palette.GRID_COLOR, palette.GRID_WIDTH, Layer.GRID)
        )
    for y in range(0, height + 1, pitch):
        commands.append(
            Line((0, y), (width, y), palette.GRID_COLOR, palette.GRID_WIDTH, Layer.GRID)
        )
    return commands


def _label_commands(
    lines: Sequence[Tuple[str, int, str]],
    center: Tuple[float, float],
    layer: Layer,
) -> List[DrawCommand]:
    """Stack text lines vertically, centred as a block on ``center``."""
    if not lines:
        return []
    cx, cy = center
    block_height = sum(size for _, size, _ in lines) + LABEL_LINE_GAP * (len(lines) - 1)
    top = cy - block_height / 2
    commands: List[DrawCommand] = []
    for text, size, color in lines:
        commands.append(Text((cx, top + size / 2), text, size, color, layer))
        top += size + LABEL_LINE_GAP
    return commands


def _box_center(box: Tuple[int, int, int, int]) -> Tuple[float, float]:
    x0, y0, x1, y1 = box
    return ((x0 + x1 + 1) / 2, (y0 + y1 + 1) / 2)


def _hallway_commands(hallway: Room) -> List[DrawCommand]:
    box = bounds_to_pixels(hallway.bounds)
    if box is None:
        LOGGER.debug("Skipping hallway %s: zero extent", hallway.id)
        return []
    commands: List[DrawCommand] = [
        Rect(
            box,
            fill=palette.HALLWAY_FILL_COLOR,
            outline=palette.HALLWAY_BORDER_COLOR,
            width=palette.HALLWAY_BORDER_WIDTH,
            layer=Layer.HALLWAYS,
            dash=palette.HALLWAY_DASH,
            entity_id=hallway.id,
        )
    ]
    name = hallway.name.strip()
    if name:
        commands.extend(
            _label_commands(
                [(name, HALLWAY_FONT_SIZE, palette.HALLWAY_LABEL_COLOR)],
                _box_center(box),
                Layer.HALLWAYS,
            )
        )
    return commands


def room_label_lines(room: Room) -> List[Tuple[str, int, str]]:
    """Return ``(text, font size, colour)`` for each label line of a room.

    The name comes first, then its dimension token if it has one, then the
    square footage if known.
    """
    lines = []
    name_lines = split_room_label(room.name)
    if name_lines:
        lines.append((name_lines[0], NAME_FONT_SIZE, palette.LABEL_COLOR))
    if len(name_lines) > 1:
        lines.append((name_lines[1], DIMENSION_FONT_SIZE, palette.LABEL_SECONDARY_COLOR))
    if room.square_footage is not None:
        area = format_square_footage(room.square_footage)
        if area is not None:
            lines.append((area, AREA_FONT_SIZE, palette.LABEL_SECONDARY_COLOR))
    return lines


def _room_commands(room: Room) -> List[DrawCommand]:
    box = bounds_to_pixels(room.bounds)
    if box is None:
        LOGGER.debug("Skipping room %s: zero extent", room.id)
        return []

    if room.kind is RoomType.ENTRY:
        outline, width = palette.ENTRY_BORDER_COLOR, palette.ENTRY_BORDER_WIDTH
    else:
        outline, width = palette.ROOM_BORDER_COLOR, palette.ROOM_BORDER_WIDTH

    commands: List[DrawCommand] = [
        Rect(
            box,
            fill=palette.room_fill_color(room.type),
            outline=outline,
            width=width,
            layer=Layer.ROOMS,
            entity_id=room.id,
        )
    ]
    commands.extend(_label_commands(room_label_lines(room), _box_center(box), Layer.ROOMS))
    return commands


def _wall_commands(wall: Wall) -> List[DrawCommand]:
    start = point_to_pixels(wall.start)
    end = point_to_pixels(wall.end)
    if start is None or end is None or start == end:
        LOGGER.debug("Skipping wall %s: degenerate segment", wall.id)
        return []
    return [Line(start, end, palette.WALL_COLOR, palette.WALL_WIDTH, Layer.WALLS)]


def _opening(position, width: float) -> Optional[Tuple[float, float, float]]:
    """Return ``(x, y, length)`` in pixels for a door or window."""
    origin = point_to_pixels(position)
    length = length_to_pixels(width)
    if origin is None or length <= 0:
        return None
    return (origin[0], origin[1], length)


def _door_commands(door: Door) -> List[DrawCommand]:
    opening = _opening(door.position, door.width)
    if opening is None:
        LOGGER.debug("Skipping door %s: zero extent", door.id)
        return []
    x, y, length = opening
    return [
        Line((x, y), (x + length, y), palette.DOOR_COLOR, palette.DOOR_WIDTH, Layer.DOORS),
        Arc((x, y), length, 0, 90, palette.DOOR_COLOR, palette.DOOR_WIDTH, Layer.DOORS),
    ]


def _window_commands(window: Window) -> List[DrawCommand]:
    opening = _opening(window.position, window.width)
    if opening is None:
        LOGGER.debug("Skipping window %s: zero extent", window.id)
        return []
    x, y, length = opening
    return [
        Line((x, y), (x + length, y), palette.WINDOW_COLOR, palette.WINDOW_WIDTH, Layer.WINDOWS)
    ]


def _placeholder_commands(width: int, height: int) -> List[DrawCommand]:
    card_w, card_h = PLACEHOLDER_CARD_SIZE
    x0 = (width - card_w) // 2
    y0 = (height - card_h) // 2
    card = (x0, y0, x0 + card_w - 1, y0 + card_h - 1)
    cx, cy = _box_center(card)

    icon = PLACEHOLDER_ICON_SIZE
    icon_x0 = round(cx - icon / 2)
    icon_y0 = round(cy - 60 - icon / 2)

    commands: List[DrawCommand] = [
        Rect(
            card,
            fill=config.BACKGROUND_COLOR,
            outline=palette.PLACEHOLDER_BORDER_COLOR,
            width=2,
            layer=Layer.PLACEHOLDER,
            dash=palette.HALLWAY_DASH,
        ),
        Rect(
            (icon_x0, icon_y0, icon_x0 + icon - 1, icon_y0 + icon - 1),
            fill=PLACEHOLDER_ICON_COLOR,
            outline=None,
            width=0,
            layer=Layer.PLACEHOLDER,
        ),
    ]
    lines = [(PLACEHOLDER_TITLE, 18, palette.PLACEHOLDER_TEXT_COLOR)]
    lines.extend((hint, 14, palette.PLACEHOLDER_TEXT_COLOR) for hint in PLACEHOLDER_HINT)
    commands.extend(_label_commands(lines, (cx, cy + 24), Layer.PLACEHOLDER))
    return commands


def build_draw_commands(
    document: Optional[FloorPlanDocument], view: ViewParams
) -> List[DrawCommand]:
    """Build the ordered drawing commands for one render pass.

    Args:
        document: A normalized document, or None for the empty canvas state.
        view: View settings.

    Returns:
        Commands in paint order. The first command always clears the
        surface.

    Raises:
        TypeError: If ``document`` is neither a FloorPlanDocument nor None.
    """
    if document is not None and not isinstance(document, FloorPlanDocument):
        raise TypeError(
            f"Expected a normalized FloorPlanDocument, got {type(document).__name__}"
        )

    width, height = view.size
    commands: List[DrawCommand] = [Clear(config.BACKGROUND_COLOR)]

    if view.grid_visible:
        commands.extend(_grid_commands(width, height))

    if document is None:
        commands.extend(_placeholder_commands(width, height))
        return commands

    for hallway in document.hallways:
        commands.extend(_hallway_commands(hallway))
    for room in document.rooms:
        commands.extend(_room_commands(room))
    for wall in document.walls:
        commands.extend(_wall_commands(wall))
    for door in document.doors:
        commands.extend(_door_commands(door))
    for window in document.windows:
        commands.extend(_window_commands(window))

    return commands


# ------------------ Painting ------------------

@lru_cache(maxsize=None)
def _font(size: int) -> ImageFont.ImageFont:
    return ImageFont.load_default(size=size)


def _dash_starts(lo: int, hi: int, step: int, limit: int) -> range:
    """Dash start offsets along ``lo..hi`` that can touch ``0..limit``."""
    first = lo if lo >= -step else lo + ((-lo) // step) * step
    return range(first, min(hi, limit) + 1, step)


def _paint_dashed_border(
    draw: ImageDraw.ImageDraw,
    box: Tuple[int, int, int, int],
    color: str,
    width: int,
    dash: Tuple[int, int],
    surface_size: Tuple[int, int],
) -> None:
    """Draw a dashed border of ``width`` pixels inside ``box``.

    Dashes are phased from the top-left corner and only those that can
    land on the surface are drawn.
    """
    x0, y0, x1, y1 = box
    on, off = dash
    step = on + off
    surface_w, surface_h = surface_size
    for start in _dash_starts(x0, x1, step, surface_w):
        end = min(start + on - 1, x1)
        draw.rectangle([start, y0, end, min(y0 + width - 1, y1)], fill=color)
        draw.rectangle([start, max(y1 - width + 1, y0), end, y1], fill=color)
    for start in _dash_starts(y0, y1, step, surface_h):
        end = min(start + on - 1, y1)
        draw.rectangle([x0, start, min(x0 + width - 1, x1), end], fill=color)
        draw.rectangle([max(x1 - width + 1, x0), start, x1, end], fill=color)


def _paint_rect(
    draw: ImageDraw.ImageDraw, command: Rect, surface_size: Tuple[int, int]
) -> None:
    if command.dash is None:
        draw.rectangle(
            list(command.box),
            fill=command.fill,
            outline=command.outline,
            width=command.width if command.outline else 0,
        )
        return
    if command.fill is not None:
        draw.rectangle(list(command.box), fill=command.fill)
    if command.outline is not None and command.width > 0:
        _paint_dashed_border(
            draw, command.box, command.outline, command.width, command.dash, surface_size
        )


def _paint_text(draw: ImageDraw.ImageDraw, command: Text) -> None:
    font = _font(command.size)
    bbox = draw.textbbox((0, 0), command.text, font=font)
    text_width = bbox[2] - bbox[0]
    text_height = bbox[3] - bbox[1]
    cx, cy = command.center
    draw.text(
        (cx - text_width / 2 - bbox[0], cy - text_height / 2 - bbox[1]),
        command.text,
        fill=command.color,
        font=font,
    )


def paint(commands: Iterable[DrawCommand], size: Tuple[int, int]) -> Image.Image:
    """Execute drawing commands on a new RGB surface of ``size`` pixels."""
    image = Image.new("RGB", size, config.BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)
    width, height = size

    for command in commands:
        if isinstance(command, Clear):
            draw.rectangle([0, 0, width - 1, height - 1], fill=command.color)
        elif isinstance(command, Line):
            draw.line([command.start, command.end], fill=command.color, width=command.width)
        elif isinstance(command, Rect):
            _paint_rect(draw, command, size)
        elif isinstance(command, Arc):
            cx, cy = command.center
            r = command.radius
            draw.arc(
                [cx - r, cy - r, cx + r, cy + r],
                command.start_angle,
                command.end_angle,
                fill=command.color,
                width=command.width,
            )
        elif isinstance(command, Text):
            _paint_text(draw, command)
        else:
            raise TypeError(f"Unknown draw command: {command!r}")

    return image


def render(
    document: Optional[FloorPlanDocument], view: Optional[ViewParams] = None
) -> Image.Image:
    """Render a floor plan to a new image.

    Args:
        document: A normalized document, or None to paint the empty canvas
            placeholder.
        view: View settings; defaults to ViewParams().

    Returns:
        An RGB image of ``view.size`` pixels. Zoom is not applied, see
        apply_zoom.
    """
    view = view or ViewParams()
    return paint(build_draw_commands(document, view), view.size)


def apply_zoom(image: Image.Image, zoom_percent: float) -> Image.Image:
    """Scale a rendered surface by ``zoom_percent``.

    The zoom is clamped to the supported range. Nearest-neighbour sampling
    keeps the output deterministic and the colours exact.
    """
    zoom = clamp_zoom(zoom_percent)
    if zoom == 100:
        return image.copy()
    width = max(1, round(image.width * zoom / 100))
    height = max(1, round(image.height * zoom / 100))
    return image.resize((width, height), Image.Resampling.NEAREST)


def generate_floor_plan_image(
    document: Optional[FloorPlanDocument],
    output_path: Path,
    view: Optional[ViewParams] = None,
) -> Path:
    """Render a floor plan and save it as a PNG.

    Args:
        document: The document to draw, or None for the placeholder.
        output_path: Where to save the PNG. Parent directories are created.
        view: View settings; the zoom is applied before saving.

    Returns:
        The path of the written image.
    """
    view = view or ViewParams()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    image = apply_zoom(render(document, view), view.zoom_percent)
    image.save(output_path, format="PNG")
    LOGGER.info("Saved floor plan image to %s (%dx%d)", output_path, image.width, image.height)
    return output_path
