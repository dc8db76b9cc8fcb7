"""Batch driver converting every text file in a directory to PDF.

Each source file is handled independently: an existing ``<stem>.pdf`` in the
destination is a deliberate skip, a successful conversion deletes the source
and any exception raised while reading, laying out or writing is recorded as
a failed :class:`FileResult`.  A failure never stops the remaining files and
never deletes the failing source.

Configuration is validated once, before the first file is touched.
"""

from __future__ import annotations

import codecs
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from txtpdf.config import ConfigModel, validate_paths
from txtpdf.io import read_file, write_file
from txtpdf.io.writers.pdf_writer import make_measure, page_dimensions, resolve_font
from txtpdf.layout import Document, FontSpec, build_document
from txtpdf.utils.errors import ConfigError
from txtpdf.utils.logging import get_logger

Status = Literal["converted", "skipped", "failed"]

NO_FILES_MESSAGE = "No TXT files found in the source folder."

logger = get_logger(__name__)

__all__ = [
    "NO_FILES_MESSAGE",
    "FileResult",
    "BatchSummary",
    "destination_for",
    "find_sources",
    "check_settings",
    "convert_file",
    "run_batch",
]


@dataclass(frozen=True, slots=True)
class FileResult:
    """Outcome of processing one source file."""

    source: Path
    destination: Path
    status: Status
    reason: str | None = None

    @property
    def message(self) -> str:
        """Human readable progress line for this result."""

        if self.status == "converted":
            return f"Successfully converted {self.source.name} to PDF."
        if self.status == "skipped":
            return f"PDF already exists for {self.source.stem}. Skipping file."
        return f"Error converting {self.source}: {self.reason}"


@dataclass(slots=True)
class BatchSummary:
    """Results of a batch run in processing order."""

    results: list[FileResult] = field(default_factory=list)

    def _count(self, status: Status) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def converted(self) -> int:
        return self._count("converted")

    @property
    def skipped(self) -> int:
        return self._count("skipped")

    @property
    def failed(self) -> int:
        return self._count("failed")

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def describe(self) -> str:
        return (
            f"{len(self.results)} file(s): {self.converted} converted, "
            f"{self.skipped} skipped, {self.failed} failed"
        )


def destination_for(source: Path, destination_dir: Path) -> Path:
    """Return the PDF path for ``source`` inside ``destination_dir``."""

    return destination_dir / f"{source.stem}.pdf"


def find_sources(source_dir: Path, pattern: str) -> list[Path]:
    """Return regular files in ``source_dir`` matching ``pattern``, sorted by name."""

    return sorted(p for p in source_dir.glob(pattern) if p.is_file())


def check_settings(cfg: ConfigModel) -> tuple[FontSpec, tuple[float, float]]:
    """Resolve the font and page size, rejecting settings no file could use.

    Raises :class:`ConfigError` for an unknown font, page size or text
    encoding, and for margins that leave no writable area on the page.
    """

    font = resolve_font(cfg.layout)
    page_width, page_height = page_dimensions(cfg.layout.page_size)
    margin = cfg.layout.margin
    if 2 * margin >= page_width or 2 * margin >= page_height:
        raise ConfigError(
            f"margin {margin:g} leaves no writable area on a "
            f"{page_width:g}x{page_height:g} page"
        )
    try:
        codecs.lookup(cfg.batch.encoding)
    except LookupError:
        raise ConfigError(f"unknown text encoding: {cfg.batch.encoding!r}") from None
    return font, (page_width, page_height)


def convert_file(source: Path, destination: Path, cfg: ConfigModel) -> Document:
    """Render ``source`` to ``destination`` and return the laid out document.

    Settings are checked before the source is read, so configuration problems
    surface as :class:`ConfigError`.  No skip or delete policy is applied
    here; other exceptions propagate.
    """

    font, page_size = check_settings(cfg)
    text = read_file(source, encoding=cfg.batch.encoding)
    document = build_document(
        text,
        source.stem,
        font=font,
        measure=make_measure(font),
        page_size=page_size,
        margin=cfg.layout.margin,
    )
    write_file(destination, document)
    return document


def _process(source: Path, destination: Path, cfg: ConfigModel) -> FileResult:
    try:
        if destination.exists():
            logger.info("skipping %s: %s already exists", source.name, destination)
            return FileResult(source, destination, "skipped")
        document = convert_file(source, destination, cfg)
        if cfg.batch.delete_source:
            source.unlink()
    except Exception as exc:
        reason = str(exc) or type(exc).__name__
        logger.warning(
            "error converting %s: %s", source, reason, exc_info=logger.isEnabledFor(logging.DEBUG)
        )
        return FileResult(source, destination, "failed", reason)
    logger.info("converted %s (%d page(s))", source.name, document.page_count)
    return FileResult(source, destination, "converted")


def run_batch(
    cfg: ConfigModel,
    on_result: Callable[[FileResult], None] | None = None,
) -> BatchSummary:
    """Convert every matching file under the configured source directory.

    Raises
    ------
    ConfigError
        If the configured paths, font, page geometry or encoding are
        invalid.  Raised before any file is processed.
    """

    source_dir, destination_dir = validate_paths(cfg)
    check_settings(cfg)
    sources = find_sources(source_dir, cfg.batch.pattern)
    summary = BatchSummary()
    if not sources:
        logger.info(NO_FILES_MESSAGE)
        return summary

    logger.debug("found %d file(s) in %s", len(sources), source_dir)
    destination_dir.mkdir(parents=True, exist_ok=True)
    for result in _iter_results(sources, destination_dir, cfg):
        summary.results.append(result)
        if on_result is not None:
            on_result(result)
    return summary


def _iter_results(
    sources: Iterable[Path], destination_dir: Path, cfg: ConfigModel
) -> Iterable[FileResult]:
    for source in sources:
        yield _process(source, destination_for(source, destination_dir), cfg)
