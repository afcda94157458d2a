"""Build settings for the statement page."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

SOURCE_NAME = "statement.md"
OUTPUT_DIR_NAME = "statement"
OUTPUT_NAME = "index.html"

DEFAULT_TITLE = "Moltis Statement"
DEFAULT_DESCRIPTION = "Why Moltis exists and why it is built in Rust."


@dataclass
class BuildConfig:
    """Where to read markdown from, where to write HTML to, and page metadata."""

    root: Path
    source_path: Path
    output_path: Path
    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    badge: str = "Statement"
    home_href: str = "/"
    home_label: str = "Back to home"

    @classmethod
    def from_root(cls, root: str | Path) -> "BuildConfig":
        """Resolve the fixed ``statement.md`` -> ``statement/index.html`` layout under root."""
        root = Path(root).expanduser().resolve()
        return cls(
            root=root,
            source_path=root / SOURCE_NAME,
            output_path=root / OUTPUT_DIR_NAME / OUTPUT_NAME,
        )

    @property
    def output_dir(self) -> Path:
        return self.output_path.parent
