from pathlib import Path

import pytest
from pydantic import ValidationError

from txtpdf.config import load_config, validate_paths
from txtpdf.utils.errors import ConfigError


def test_invalid_margin(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("layout:\n  margin: -5\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_page_size(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("layout:\n  page_size: A0\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_missing_paths_rejected() -> None:
    cfg = load_config(env={})
    with pytest.raises(ConfigError, match="source"):
        validate_paths(cfg)


def test_missing_destination_rejected(tmp_path: Path) -> None:
    cfg = load_config(env={"TXTPDF_SOURCE_PATH": str(tmp_path)})
    with pytest.raises(ConfigError, match="destination"):
        validate_paths(cfg)


def test_source_must_be_directory(tmp_path: Path) -> None:
    env = {
        "TXTPDF_SOURCE_PATH": str(tmp_path / "nope"),
        "TXTPDF_DESTINATION_PATH": str(tmp_path / "out"),
    }
    with pytest.raises(ConfigError, match="not a directory"):
        validate_paths(load_config(env=env))


def test_destination_must_not_be_file(tmp_path: Path) -> None:
    target = tmp_path / "out"
    target.write_text("x")
    env = {"TXTPDF_SOURCE_PATH": str(tmp_path), "TXTPDF_DESTINATION_PATH": str(target)}
    with pytest.raises(ConfigError, match="destination"):
        validate_paths(load_config(env=env))


def test_font_file_must_exist(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text(f"layout:\n  font_name: Verdana\n  font_file: {tmp_path / 'Verdana.ttf'}\n")
    env = {"TXTPDF_SOURCE_PATH": str(tmp_path), "TXTPDF_DESTINATION_PATH": str(tmp_path / "out")}
    with pytest.raises(ConfigError, match="font file"):
        validate_paths(load_config(cfg_file, env=env))


def test_valid_paths_returned(tmp_path: Path) -> None:
    env = {"TXTPDF_SOURCE_PATH": str(tmp_path), "TXTPDF_DESTINATION_PATH": str(tmp_path / "out")}
    assert validate_paths(load_config(env=env)) == (tmp_path, tmp_path / "out")
