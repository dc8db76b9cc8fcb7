"""Typed configuration schema and loader for the txtpdf package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint

from txtpdf.utils.errors import ConfigError

SOURCE_ENV = "TXTPDF_SOURCE_PATH"
DESTINATION_ENV = "TXTPDF_DESTINATION_PATH"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class PathSettings(BaseModel):
    """Source and destination directories."""

    source: Path | None = None
    destination: Path | None = None

    model_config = ConfigDict(extra="forbid")


class LayoutSettings(BaseModel):
    """Page geometry and font selection."""

    font_name: str
    font_file: Path | None = None
    font_size: confloat(gt=0.0)
    line_height: confloat(gt=0.0) | None = None
    margin: confloat(ge=0.0)
    page_size: Literal["A4", "letter", "legal"]

    model_config = ConfigDict(extra="forbid")


class BatchSettings(BaseModel):
    """Per-run behaviour of the batch driver."""

    pattern: str
    encoding: str
    delete_source: bool

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    paths: PathSettings
    layout: LayoutSettings
    batch: BatchSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``TXTPDF_SOURCE_PATH`` / ``TXTPDF_DESTINATION_PATH`` environment variables.
    """

    with (
        importlib_resources.files("txtpdf.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    env_paths: dict[str, str] = {}
    if environ.get(SOURCE_ENV):
        env_paths["source"] = environ[SOURCE_ENV]
    if environ.get(DESTINATION_ENV):
        env_paths["destination"] = environ[DESTINATION_ENV]
    if env_paths:
        merged = deep_merge_dicts(merged, {"paths": env_paths})

    return ConfigModel.model_validate(merged)


def validate_paths(cfg: ConfigModel) -> tuple[Path, Path]:
    """Return ``(source, destination)`` or raise :class:`ConfigError`.

    The source must be an existing directory.  The destination may be absent
    (it is created on demand) but must not be an existing regular file.
    """

    source = cfg.paths.source
    destination = cfg.paths.destination
    if source is None:
        raise ConfigError(f"source path is not configured (set paths.source or {SOURCE_ENV})")
    if destination is None:
        raise ConfigError(
            f"destination path is not configured (set paths.destination or {DESTINATION_ENV})"
        )
    if not source.is_dir():
        raise ConfigError(f"source path is not a directory: {source}")
    if destination.exists() and not destination.is_dir():
        raise ConfigError(f"destination path is not a directory: {destination}")
    font_file = cfg.layout.font_file
    if font_file is not None and not font_file.is_file():
        raise ConfigError(f"font file not found: {font_file}")
    return source, destination


__all__ = [
    "SOURCE_ENV",
    "DESTINATION_ENV",
    "ConfigModel",
    "PathSettings",
    "LayoutSettings",
    "BatchSettings",
    "deep_merge_dicts",
    "load_config",
    "validate_paths",
]
