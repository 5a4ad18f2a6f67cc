"""Summary badges shown next to a rendered floor plan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .. import config
from ..core.model import FloorPlanDocument
from ..geom.labels import format_square_footage


def truncate_description(
    description: str, limit: int = config.DESCRIPTION_BADGE_LIMIT
) -> str:
    """Cut ``description`` to ``limit`` characters, marking the cut."""
    if len(description) > limit:
        return description[:limit] + config.DESCRIPTION_ELLIPSIS
    return description


@dataclass(frozen=True)
class PlanSummary:
    """Presentational metadata for a document.

    Attributes:
        room_count: Number of rooms, hallways excluded.
        total_square_footage: Aggregate area as given by the document.
        description: Full description text.
    """

    room_count: int
    total_square_footage: Optional[float]
    description: str

    def badges(self) -> List[str]:
        """Return the badge texts in display order."""
        badges = [f"{self.room_count} rooms"]
        if self.total_square_footage is not None:
            area = format_square_footage(self.total_square_footage)
            if area is not None:
                badges.append(area)
        if self.description:
            badges.append(truncate_description(self.description))
        return badges


def summarize(document: FloorPlanDocument) -> PlanSummary:
    """Build the summary badges for a normalized document."""
    return PlanSummary(
        room_count=len(document.rooms),
        total_square_footage=document.total_square_footage,
        description=document.description,
    )
