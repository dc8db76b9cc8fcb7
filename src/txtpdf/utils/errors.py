"""Typed exceptions for configuration, I/O formats and rendering."""


class ConfigError(ValueError):
    """Raised when configuration values are missing or point at invalid paths."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""


class RenderError(RuntimeError):
    """Raised when a document cannot be rendered or saved."""
