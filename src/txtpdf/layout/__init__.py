"""Text layout: greedy line wrapping, pagination and the document model."""

from .document import Document, FontSpec, build_document
from .paginate import Page, PlacedLine, layout
from .wrap import MeasureFunc, collapse_whitespace, wrap

__all__ = [
    "Document",
    "FontSpec",
    "MeasureFunc",
    "Page",
    "PlacedLine",
    "build_document",
    "collapse_whitespace",
    "layout",
    "wrap",
]
