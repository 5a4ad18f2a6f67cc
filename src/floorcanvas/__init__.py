"""Floor Canvas - Normalize and render AI-generated 2D floor plans."""

__version__ = "0.1.0"
__author__ = "Marco"
__email__ = "marco@example.com"

from .core.errors import FloorPlanError, MalformedDocumentError
from .core.model import Door, FloorPlanDocument, Room, Wall, Window
from .io.parser import load_document, normalize
from .visualization.generator import ViewParams, render

__all__ = [
    "Door",
    "FloorPlanDocument",
    "FloorPlanError",
    "MalformedDocumentError",
    "Room",
    "ViewParams",
    "Wall",
    "Window",
    "load_document",
    "normalize",
    "render",
]
