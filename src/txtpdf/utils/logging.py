"""Logging utilities.

Every logger lives under the ``txtpdf`` namespace so a single handler attached
by :func:`configure_logging` covers the whole package.  Configuration is
idempotent: calling it again only adjusts the level.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "txtpdf"

_FORMAT = "%(levelname)s %(name)s: %(message)s"

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``txtpdf``."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    ``verbose`` lowers the threshold to ``DEBUG``; otherwise only errors are
    emitted, since per-file progress is echoed by the CLI.
    """

    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.ERROR
    root.setLevel(level)
    for handler in root.handlers:
        if getattr(handler, "_txtpdf_handler", False):
            handler.setStream(sys.stderr)  # type: ignore[attr-defined]
            break
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._txtpdf_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.propagate = True
    return root
