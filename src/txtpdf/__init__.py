"""Batch conversion of plain-text files into paginated PDF documents."""

__version__ = "0.1.0"

__all__ = ["__version__"]
