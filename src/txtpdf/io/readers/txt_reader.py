"""Plain-text reader.

:func:`read_text` loads a whole text file.  UTF-8 byte-order marks are
consumed by the default ``"utf-8-sig"`` codec.  Decoding errors,
``FileNotFoundError`` and other I/O errors propagate to the caller; the batch
driver turns them into per-file failures.
"""

from __future__ import annotations

import os

PathLikeStr = os.PathLike[str]


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read a plain-text file.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding to use.
    errors:
        Error handling strategy passed to :func:`open`.
    """

    with open(path, "r", encoding=encoding, errors=errors) as f:
        return f.read()


__all__ = ["read_text"]
