"""PDF document writer backed by reportlab.

This module is the rendering collaborator of the layout code: it resolves the
configured font, supplies the string measurement callback used for wrapping,
maps page size names to dimensions and serializes a laid out
:class:`~txtpdf.layout.Document` to disk.

Layout offsets are measured from the top of the page while reportlab's origin
is the bottom-left corner, so each line is drawn at
``page.height - line.y - ascent`` to keep it top anchored.

The PDF is first written to a ``.part`` sibling and then moved into place, so
an interrupted render never leaves a truncated file at the final path.
"""

from __future__ import annotations

import os
from pathlib import Path

from reportlab.lib.pagesizes import A4, LEGAL, LETTER
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from txtpdf.config.schema import LayoutSettings
from txtpdf.layout import Document, FontSpec, MeasureFunc
from txtpdf.utils.errors import ConfigError, RenderError
from txtpdf.utils.logging import get_logger

PathLikeStr = os.PathLike[str]

PAGE_SIZES: dict[str, tuple[float, float]] = {
    "A4": A4,
    "letter": LETTER,
    "legal": LEGAL,
}

PRODUCER = "txtpdf"

logger = get_logger(__name__)


def page_dimensions(name: str) -> tuple[float, float]:
    """Return ``(width, height)`` in points for a page size name."""

    try:
        width, height = PAGE_SIZES[name]
    except KeyError:
        raise ConfigError(f"unknown page size: {name!r}") from None
    return float(width), float(height)


def resolve_font(settings: LayoutSettings) -> FontSpec:
    """Register the configured font if needed and return its :class:`FontSpec`.

    A ``font_file`` is registered as a TrueType font under ``font_name``; in
    that case any TTF face, such as Verdana, can be used.  Without one the
    name must refer to a font reportlab already knows, e.g. one of the 14
    standard PDF fonts.

    Without ``line_height`` the advance is the face's ascent minus descent,
    11.1pt for Helvetica 12.  Verdana 12 layouts use roughly 14.5pt, so page
    counts only line up with them once a Verdana ``font_file`` and a matching
    ``line_height`` are configured.
    """

    name = settings.font_name
    if settings.font_file is not None and name not in pdfmetrics.getRegisteredFontNames():
        try:
            pdfmetrics.registerFont(TTFont(name, str(settings.font_file)))
        except Exception as exc:
            raise ConfigError(f"cannot load font file {settings.font_file}: {exc}") from exc
    try:
        pdfmetrics.getFont(name)
    except KeyError:
        raise ConfigError(f"unknown font: {name!r}") from None

    line_height = settings.line_height
    if line_height is None:
        ascent, descent = pdfmetrics.getAscentDescent(name, settings.font_size)
        line_height = ascent - descent
    return FontSpec(name=name, size=settings.font_size, line_height=float(line_height))


def make_measure(font: FontSpec) -> MeasureFunc:
    """Return a callable measuring rendered string width in points."""

    def measure(text: str) -> float:
        return pdfmetrics.stringWidth(text, font.name, font.size)

    return measure


def _draw(c: canvas.Canvas, document: Document) -> None:
    font = document.font
    ascent, _ = pdfmetrics.getAscentDescent(font.name, font.size)
    for page in document.pages:
        c.setPageSize((page.width, page.height))
        c.setFont(font.name, font.size)
        for line in page.lines:
            c.drawString(line.x, page.height - line.y - ascent, line.text)
        c.showPage()


def write_pdf(path: str | PathLikeStr, document: Document) -> None:
    """Render ``document`` and save it to ``path``.

    Parent directories are created when missing.  Any reportlab failure is
    re-raised as :class:`RenderError` and the partial output is removed.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    part_path = file_path.with_name(file_path.name + ".part")

    try:
        c = canvas.Canvas(str(part_path))
        c.setTitle(document.title)
        c.setCreator(PRODUCER)
        _draw(c, document)
        c.save()
        os.replace(part_path, file_path)
    except Exception as exc:
        part_path.unlink(missing_ok=True)
        raise RenderError(f"failed to write {file_path}: {exc}") from exc

    logger.debug("wrote %s (%d pages)", file_path, document.page_count)


__all__ = [
    "PAGE_SIZES",
    "page_dimensions",
    "resolve_font",
    "make_measure",
    "write_pdf",
]
