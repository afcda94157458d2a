"""Build a styled, self-contained HTML statement page from markdown."""

from .markdown import escape, render_inline, render_markdown

__version__ = "0.1.0"

__all__ = ["escape", "render_inline", "render_markdown"]
