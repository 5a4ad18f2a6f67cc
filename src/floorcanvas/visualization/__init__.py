"""Visualization module for floor plans.

This module provides functionality to turn a normalized floor plan into
drawing commands, paint them to a PNG image, and build the summary badges
shown alongside the drawing.
"""

from .generator import (
    ViewParams,
    apply_zoom,
    build_draw_commands,
    generate_floor_plan_image,
    paint,
    render,
)
from .summary import PlanSummary, summarize

__all__ = [
    "PlanSummary",
    "ViewParams",
    "apply_zoom",
    "build_draw_commands",
    "generate_floor_plan_image",
    "paint",
    "render",
    "summarize",
]
