"""Greedy line wrapping against a measured width.

Whitespace runs, newlines included, are collapsed to single spaces before
wrapping, so the output depends only on the word sequence and the widths
reported by ``measure``.  A word that is wider than ``max_width`` on its own is
placed alone on a line; words are never split.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator

MeasureFunc = Callable[[str], float]

_WHITESPACE_RE = re.compile(r"\s+")

__all__ = ["MeasureFunc", "collapse_whitespace", "wrap"]


def collapse_whitespace(text: str) -> str:
    """Return ``text`` with every whitespace run replaced by one space and stripped."""

    return _WHITESPACE_RE.sub(" ", text).strip()


def _greedy_lines(words: Iterable[str], max_width: float, measure: MeasureFunc) -> Iterator[str]:
    current = ""
    for word in words:
        candidate = f"{current} {word}" if current else word
        if current and measure(candidate) > max_width:
            yield current.rstrip()
            current = word
        else:
            current = candidate
    if current:
        yield current.rstrip()


def wrap(text: str, max_width: float, measure: MeasureFunc) -> list[str]:
    """Break ``text`` into lines no wider than ``max_width``.

    Parameters
    ----------
    text:
        Raw input text.  Line breaks in the input are not preserved.
    max_width:
        Maximum line width in the units returned by ``measure``.
    measure:
        Callable returning the rendered width of a string.

    Returns
    -------
    list[str]
        Lines in reading order, each trimmed of trailing whitespace.  Empty
        input yields an empty list.
    """

    if max_width <= 0:
        raise ValueError(f"max_width must be positive, got {max_width!r}")

    collapsed = collapse_whitespace(text)
    if not collapsed:
        return []
    return list(_greedy_lines(collapsed.split(" "), max_width, measure))
