"""Exceptions raised while turning raw generator output into a drawing."""

from __future__ import annotations


class FloorPlanError(Exception):
    """Base class for floor plan errors."""

    pass


class MalformedDocumentError(FloorPlanError, ValueError):
    """Raised when a raw document has no usable top-level structure.

    Rendering must not be attempted for such a document.
    """

    pass
