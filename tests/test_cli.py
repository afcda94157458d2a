"""Build command and CLI behaviour tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from statement_builder.cli import _build_parser, build, main
from statement_builder.config import BuildConfig
from statement_builder.logging import configure_logging, get_logger


def _write_source(root: Path, text: str = "# Hello\n\nSome *text*.\n") -> Path:
    source = root / "statement.md"
    source.write_text(text, encoding="utf-8")
    return source


def test_cli_defaults_to_current_directory() -> None:
    args = _build_parser().parse_args([])
    assert args.root == "."
    assert args.verbose is False


def test_cli_accepts_root_and_verbose() -> None:
    args = _build_parser().parse_args(["--root", "site", "-v"])
    assert args.root == "site"
    assert args.verbose is True


def test_cli_accepts_log_file(tmp_path: Path) -> None:
    args = _build_parser().parse_args(["--log-file", str(tmp_path / "build.log")])
    assert args.log_file == tmp_path / "build.log"


def test_build_writes_page_and_creates_directory(tmp_path: Path) -> None:
    _write_source(tmp_path)
    config = BuildConfig.from_root(tmp_path)

    outpath = build(config)

    assert outpath == tmp_path.resolve() / "statement" / "index.html"
    page = outpath.read_text(encoding="utf-8")
    assert "<h1>Hello</h1>\n<p>Some <em>text</em>.</p>" in page
    assert page.startswith("<!DOCTYPE html>")


def test_build_drops_byte_order_mark(tmp_path: Path) -> None:
    _write_source(tmp_path, "\ufeffHello\n")

    page = build(BuildConfig.from_root(tmp_path)).read_text(encoding="utf-8")

    assert "<p>Hello</p>" in page
    assert "\ufeff" not in page


def test_build_propagates_missing_source(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        build(BuildConfig.from_root(tmp_path))
    assert not (tmp_path / "statement").exists()


def test_main_prints_single_confirmation_line(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write_source(tmp_path)

    exit_code = main(["--root", str(tmp_path)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "Built statement/index.html from statement.md\n"
    assert (tmp_path / "statement" / "index.html").is_file()


def test_main_without_arguments_uses_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _write_source(tmp_path, "- item\n")
    monkeypatch.chdir(tmp_path)

    assert main([]) == 0

    page = (tmp_path / "statement" / "index.html").read_text(encoding="utf-8")
    assert "<ul>\n<li>item</li>\n</ul>" in page
    assert capsys.readouterr().out.startswith("Built statement/index.html")


def test_main_overwrites_existing_output(tmp_path: Path) -> None:
    _write_source(tmp_path, "first\n")
    assert main(["--root", str(tmp_path)]) == 0
    _write_source(tmp_path, "second\n")
    assert main(["--root", str(tmp_path)]) == 0

    page = (tmp_path / "statement" / "index.html").read_text(encoding="utf-8")
    assert "<p>second</p>" in page
    assert "<p>first</p>" not in page


def test_main_reports_missing_source(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["--root", str(tmp_path)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "error:" in captured.err
    assert "statement.md not found" in captured.err


def test_main_reports_write_failure_with_traceback(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write_source(tmp_path)
    # A regular file where the output directory should go.
    (tmp_path / "statement").write_text("", encoding="utf-8")

    exit_code = main(["--root", str(tmp_path)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "Traceback" in captured.err
    assert "FileExistsError" in captured.err


def test_configure_logging_does_not_stack_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert get_logger("cli").name == "statement_builder.cli"


def test_main_writes_log_file(tmp_path: Path) -> None:
    _write_source(tmp_path)
    log_file = tmp_path / "build.log"

    try:
        assert main(["--root", str(tmp_path), "-v", "--log-file", str(log_file)]) == 0
    finally:
        configure_logging()

    records = log_file.read_text(encoding="utf-8")
    assert "DEBUG statement_builder.cli: Reading" in records
    assert "index.html" in records


def test_log_file_defaults_to_none() -> None:
    assert _build_parser().parse_args([]).log_file is None
