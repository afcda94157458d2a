"""Command-line interface for building statement/index.html from statement.md."""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path

from .config import BuildConfig
from .html_builder import build_page
from .logging import configure_logging, get_logger
from .markdown import render_markdown

logger = get_logger("cli")


def build(config: BuildConfig) -> Path:
    """Render the source markdown and write the page. OS errors propagate."""
    logger.debug("Reading %s", config.source_path)
    # utf-8-sig drops a leading byte order mark.
    markdown = config.source_path.read_text(encoding="utf-8-sig")
    content_html = render_markdown(markdown)
    page = build_page(content_html, config)

    config.output_dir.mkdir(parents=True, exist_ok=True)
    config.output_path.write_text(page, encoding="utf-8")
    logger.debug("Wrote %s (%d bytes)", config.output_path, len(page.encode("utf-8")))
    return config.output_path


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="build-statement",
        description="Build statement/index.html from statement.md.",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Directory containing statement.md (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also append log records to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    config = BuildConfig.from_root(args.root)

    if not config.source_path.exists():
        print(f"error: {config.source_path} not found", file=sys.stderr)
        return 1

    try:
        outpath = build(config)
    except OSError:
        print(traceback.format_exc(), end="", file=sys.stderr)
        return 1

    print(f"Built {_relativize(outpath, config.root)} from {config.source_path.name}")
    return 0


def _relativize(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


if __name__ == "__main__":
    sys.exit(main())
