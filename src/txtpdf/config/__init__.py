"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. ``TXTPDF_SOURCE_PATH`` / ``TXTPDF_DESTINATION_PATH`` environment variables
"""

from .schema import ConfigModel, load_config, validate_paths

__all__ = ["ConfigModel", "load_config", "validate_paths"]
