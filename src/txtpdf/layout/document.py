"""Document model tying wrapping and pagination together."""

from __future__ import annotations

from dataclasses import dataclass

from .paginate import Page, layout
from .wrap import MeasureFunc, wrap

__all__ = ["FontSpec", "Document", "build_document"]


@dataclass(frozen=True, slots=True)
class FontSpec:
    """Font used to measure and draw text.

    ``line_height`` is the vertical advance between consecutive lines in
    points.
    """

    name: str
    size: float
    line_height: float


@dataclass(frozen=True, slots=True)
class Document:
    """An immutable, fully laid out document ready for rendering."""

    title: str
    pages: tuple[Page, ...]
    font: FontSpec

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def line_count(self) -> int:
        return sum(len(p.lines) for p in self.pages)


def build_document(
    text: str,
    title: str,
    *,
    font: FontSpec,
    measure: MeasureFunc,
    page_size: tuple[float, float],
    margin: float,
) -> Document:
    """Wrap ``text`` to the writable width and lay it out onto pages."""

    page_width, page_height = page_size
    lines = wrap(text, page_width - 2 * margin, measure)
    pages = layout(lines, page_width, page_height, margin, font.line_height)
    return Document(title=title, pages=tuple(pages), font=font)
