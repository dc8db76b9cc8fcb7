from __future__ import annotations

from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from txtpdf.cli import app


def test_missing_source(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["run", "--source", str(tmp_path / "missing"), "--dest", str(tmp_path / "out")]
    )
    assert result.exit_code == 4


def test_unconfigured_paths(monkeypatch: Any) -> None:
    monkeypatch.delenv("TXTPDF_SOURCE_PATH", raising=False)
    monkeypatch.delenv("TXTPDF_DESTINATION_PATH", raising=False)
    result = CliRunner().invoke(app, ["run"])
    assert result.exit_code == 4


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "run",
            "--source",
            str(tmp_path),
            "--dest",
            str(tmp_path / "out"),
            "--config",
            str(bad_cfg),
        ],
    )
    assert result.exit_code == 4


def test_strict_mode_reports_failures(tmp_path: Path) -> None:
    source = tmp_path / "in"
    source.mkdir()
    (source / "bad.txt").write_bytes(b"\xff\xfe\xfa")
    args = ["run", "--source", str(source), "--dest", str(tmp_path / "out")]
    runner = CliRunner()

    result = runner.invoke(app, args)
    assert result.exit_code == 0
    assert f"Error converting {source / 'bad.txt'}" in result.stdout

    result = runner.invoke(app, [*args, "--strict"])
    assert result.exit_code == 5
    assert (source / "bad.txt").exists()


def test_convert_missing_input(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        app, ["convert", "--in", str(tmp_path / "nope.txt"), "--out", str(tmp_path / "o.pdf")]
    )
    assert result.exit_code == 3


def test_convert_unsupported_output(tmp_path: Path) -> None:
    in_txt = tmp_path / "in.txt"
    in_txt.write_text("data", encoding="utf-8")
    result = CliRunner().invoke(
        app, ["convert", "--in", str(in_txt), "--out", str(tmp_path / "out.docx")]
    )
    assert result.exit_code == 3


def _oversized_margin(tmp_path: Path) -> Path:
    cfg = tmp_path / "margin.yml"
    cfg.write_text("layout:\n  margin: 300\n", encoding="utf-8")
    return cfg


def test_run_rejects_oversized_margin(tmp_path: Path) -> None:
    source = tmp_path / "in"
    source.mkdir()
    (source / "a.txt").write_text("alpha", encoding="utf-8")
    dest = tmp_path / "out"
    result = CliRunner().invoke(
        app,
        [
            "run",
            "--source",
            str(source),
            "--dest",
            str(dest),
            "--config",
            str(_oversized_margin(tmp_path)),
        ],
    )
    assert result.exit_code == 4
    assert not dest.exists()
    assert (source / "a.txt").exists()


def test_convert_rejects_oversized_margin(tmp_path: Path) -> None:
    in_txt = tmp_path / "in.txt"
    in_txt.write_text("alpha", encoding="utf-8")
    out_pdf = tmp_path / "out.pdf"
    result = CliRunner().invoke(
        app,
        [
            "convert",
            "--in",
            str(in_txt),
            "--out",
            str(out_pdf),
            "--config",
            str(_oversized_margin(tmp_path)),
        ],
    )
    assert result.exit_code == 4
    assert not out_pdf.exists()


def test_convert_rejects_unknown_encoding(tmp_path: Path) -> None:
    in_txt = tmp_path / "in.txt"
    in_txt.write_text("alpha", encoding="utf-8")
    cfg = tmp_path / "enc.yml"
    cfg.write_text("batch:\n  encoding: no-such-codec\n", encoding="utf-8")
    result = CliRunner().invoke(
        app,
        ["convert", "--in", str(in_txt), "--out", str(tmp_path / "o.pdf"), "--config", str(cfg)],
    )
    assert result.exit_code == 4
