"""Typer-based command line interface.

``txtpdf run`` converts every text file in the source directory and deletes
each source after its PDF has been written.  ``txtpdf convert`` renders a
single file and leaves the input in place.

Exit codes
----------
0 success (per-file failures included unless ``--strict``)
3 I/O error (``convert`` only: unreadable input, unsupported extension, write failure)
4 configuration error
5 strict mode with at least one failed file
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .batch import NO_FILES_MESSAGE, FileResult, convert_file, run_batch
from .config import ConfigModel, load_config
from .utils.errors import ConfigError, IOFormatError, RenderError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="txtpdf",
    help="Convert text files to PDF. Use 'txtpdf run' for a directory.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])


def _apply_overrides(
    cfg: ConfigModel,
    *,
    source: Path | None,
    dest: Path | None,
    keep_source: bool,
) -> ConfigModel:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    new_cfg = cfg.model_copy(deep=True)
    if source is not None:
        new_cfg.paths.source = source
    if dest is not None:
        new_cfg.paths.destination = dest
    if keep_source:
        new_cfg.batch.delete_source = False
    return new_cfg


def _echo_result(result: FileResult) -> None:
    typer.echo(result.message)


@app.callback()
def main() -> None:
    """Entry point for the txtpdf command group."""
    pass


@app.command()
def run(
    source: Optional[Path] = typer.Option(  # noqa: B008
        None, "--source", "-s", help="Directory holding the .txt files"
    ),
    dest: Optional[Path] = typer.Option(  # noqa: B008
        None, "--dest", "-d", help="Directory receiving the .pdf files"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    keep_source: bool = typer.Option(  # noqa: B008
        False, "--keep-source", help="Do not delete source files after conversion"
    ),
    strict: bool = typer.Option(  # noqa: B008
        False,
        "--strict/--no-strict",
        help="Exit non-zero when any file fails to convert",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Convert every text file in the source directory to PDF."""

    configure_logging(verbose)
    cfg = _apply_overrides(
        _load(config_path), source=source, dest=dest, keep_source=keep_source
    )

    try:
        summary = run_batch(cfg, on_result=_echo_result)
    except ConfigError as exc:
        _safe_exit(4, str(exc))

    if not summary.results:
        typer.echo(NO_FILES_MESSAGE)
        return
    typer.echo(summary.describe())

    if strict and not summary.ok:
        _safe_exit(5, None)


@app.command()
def convert(
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Input text file"
    ),
    out_path: Path = typer.Option(..., "--out", help="Output PDF file"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Convert a single text file to PDF without deleting it."""

    configure_logging(verbose)
    cfg = _load(config_path)

    try:
        document = convert_file(in_path, out_path, cfg)
    except ConfigError as exc:
        _safe_exit(4, str(exc))
    except (OSError, UnicodeDecodeError, IOFormatError, RenderError) as exc:
        _safe_exit(3, str(exc))

    typer.echo(f"Wrote {out_path} ({document.page_count} page(s))")
