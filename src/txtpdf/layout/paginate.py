"""Vertical pagination of wrapped lines onto fixed-size pages.

Offsets are measured from the top edge of the page.  The writable rectangle
starts at ``(margin, margin)`` and is ``page_width - 2 * margin`` wide; a new
page is started whenever the next line would cross ``page_height - margin``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["PlacedLine", "Page", "layout"]


@dataclass(frozen=True, slots=True)
class PlacedLine:
    """A line of text anchored at its top-left corner."""

    text: str
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Page:
    """A fixed-size page holding lines in top-to-bottom order."""

    width: float
    height: float
    lines: tuple[PlacedLine, ...] = ()

    @property
    def is_blank(self) -> bool:
        return not self.lines


def _check_geometry(page_width: float, page_height: float, margin: float, line_height: float) -> None:
    if page_width <= 0 or page_height <= 0:
        raise ValueError("page dimensions must be positive")
    if line_height <= 0:
        raise ValueError(f"line_height must be positive, got {line_height!r}")
    if margin < 0:
        raise ValueError(f"margin must not be negative, got {margin!r}")
    if 2 * margin >= page_width or 2 * margin >= page_height:
        raise ValueError("margins leave no writable area on the page")


def layout(
    lines: Sequence[str],
    page_width: float,
    page_height: float,
    margin: float,
    line_height: float,
) -> list[Page]:
    """Place ``lines`` onto as many pages as needed.

    Every line lands on exactly one page and page order follows line order.
    An empty ``lines`` sequence produces a single blank page.  A break is only
    taken once the current page holds at least one line, so no page is ever
    emitted empty for non-empty input.
    """

    _check_geometry(page_width, page_height, margin, line_height)

    pages: list[Page] = []
    current: list[PlacedLine] = []
    cursor = margin
    bottom = page_height - margin

    for text in lines:
        if current and cursor + line_height > bottom:
            pages.append(Page(page_width, page_height, tuple(current)))
            current = []
            cursor = margin
        current.append(PlacedLine(text, margin, cursor))
        cursor += line_height

    pages.append(Page(page_width, page_height, tuple(current)))
    return pages
