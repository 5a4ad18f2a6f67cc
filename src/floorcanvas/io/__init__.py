"""Reading and writing floor plan documents."""

from .parser import (
    DroppedEntity,
    NormalizationReport,
    document_to_dict,
    load_document,
    normalize,
    normalize_with_report,
)

__all__ = [
    "DroppedEntity",
    "NormalizationReport",
    "document_to_dict",
    "load_document",
    "normalize",
    "normalize_with_report",
]
