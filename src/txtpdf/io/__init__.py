"""Extension based registry for file I/O.

A ``.txt`` reader and a ``.pdf`` writer are registered by default.  Readers
return the file contents as a string; writers persist a laid out
:class:`~txtpdf.layout.Document`.

``UnsupportedFormatError`` is raised when attempting to read or write a file
whose extension has no registered handler.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..layout import Document
from ..utils.errors import UnsupportedFormatError
from .readers.txt_reader import read_text
from .writers.pdf_writer import write_pdf

_READERS: dict[str, Callable[..., str]] = {}
_WRITERS: dict[str, Callable[..., None]] = {}


def register_reader(ext: str, func: Callable[..., str]) -> None:
    """Register a reader for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".txt"``).  Matching is
        case-insensitive.
    func:
        Callable that reads a file and returns a string.
    """

    _READERS[ext.lower()] = func


def register_writer(ext: str, func: Callable[..., None]) -> None:
    """Register a writer for files ending with ``ext``."""

    _WRITERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def read_file(path: str | os.PathLike[str], **kwargs: Any) -> str:
    """Read ``path`` using the registered reader for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return reader(path, **kwargs)


def write_file(path: str | os.PathLike[str], document: Document, **kwargs: Any) -> None:
    """Write ``document`` to ``path`` using the registered writer for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no writer is registered for the file extension.
    """

    ext = get_extension(path)
    writer = _WRITERS.get(ext)
    if writer is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    writer(path, document, **kwargs)


register_reader(".txt", read_text)
register_writer(".pdf", write_pdf)

__all__ = [
    "register_reader",
    "register_writer",
    "get_extension",
    "read_file",
    "write_file",
]
