"""Small markdown-to-HTML renderer for the statement page.

Supports a deliberately narrow subset: ATX headings (``#`` to ``######``),
flat unordered lists, paragraphs, fenced code blocks, and the inline
link, code, bold and italic spans. Anything else is rendered as
paragraph text.
"""

from __future__ import annotations

import html
import re
from enum import Enum

_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_CODE_RE = re.compile(r"`([^`]+)`")
_BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC_RE = re.compile(r"\*([^*]+)\*")

# Heading and list text stops at CR and Unicode line separators.
_HEADING_RE = re.compile(r"(#{1,6})\s+([^\r\n\u2028\u2029]+)")
_LIST_ITEM_RE = re.compile(r"\s*-\s+([^\r\n\u2028\u2029]+)")

_FENCE = "```"


def escape(text: str) -> str:
    """HTML-escape text, using ``&#39;`` for single quotes."""
    return html.escape(text, quote=False).replace('"', "&quot;").replace("'", "&#39;")


def render_inline(text: str) -> str:
    """Render inline markdown (links, code, bold, italic) in one line of text.

    The text is escaped first; each substitution then runs over the output
    of the previous one, so the order below matters.
    """
    value = escape(text)
    value = _LINK_RE.sub(r'<a href="\2">\1</a>', value)
    value = _CODE_RE.sub(r"<code>\1</code>", value)
    value = _BOLD_RE.sub(r"<strong>\1</strong>", value)
    value = _ITALIC_RE.sub(r"<em>\1</em>", value)
    return value


class _State(Enum):
    NORMAL = "normal"
    IN_LIST = "in_list"
    IN_CODE = "in_code"


class _BlockRenderer:
    """Line scanner that emits block-level HTML.

    ``buffer`` holds pending paragraph lines while NORMAL and raw code
    lines while IN_CODE; it is always empty while IN_LIST.
    """

    def __init__(self) -> None:
        self.state = _State.NORMAL
        self.buffer: list[str] = []
        self.html: list[str] = []

    def feed(self, line: str) -> None:
        if line.startswith(_FENCE):
            self._toggle_code()
            return

        if self.state is _State.IN_CODE:
            self.buffer.append(line)
            return

        heading = _HEADING_RE.fullmatch(line)
        if heading:
            self._flush_paragraph()
            self._close_list()
            level = len(heading.group(1))
            self.html.append(f"<h{level}>{render_inline(heading.group(2).strip())}</h{level}>")
            return

        item = _LIST_ITEM_RE.fullmatch(line)
        if item:
            self._flush_paragraph()
            if self.state is not _State.IN_LIST:
                self.html.append("<ul>")
                self.state = _State.IN_LIST
            self.html.append(f"<li>{render_inline(item.group(1).strip())}</li>")
            return

        if not line.strip():
            self._flush_paragraph()
            self._close_list()
            return

        self._close_list()
        self.buffer.append(line.strip())

    def finish(self) -> str:
        self._flush_paragraph()
        self._close_list()
        self._close_code()
        return "\n".join(self.html)

    def _toggle_code(self) -> None:
        if self.state is _State.IN_CODE:
            self._close_code()
            return
        self._flush_paragraph()
        self._close_list()
        self.state = _State.IN_CODE

    def _flush_paragraph(self) -> None:
        if self.state is not _State.NORMAL or not self.buffer:
            return
        text = " ".join(self.buffer).strip()
        if text:
            self.html.append(f"<p>{render_inline(text)}</p>")
        self.buffer = []

    def _close_list(self) -> None:
        if self.state is not _State.IN_LIST:
            return
        self.html.append("</ul>")
        self.state = _State.NORMAL

    def _close_code(self) -> None:
        if self.state is not _State.IN_CODE:
            return
        code = "\n".join(escape(line) for line in self.buffer)
        self.html.append(f"<pre><code>{code}</code></pre>")
        self.state = _State.NORMAL
        self.buffer = []


def render_markdown(text: str) -> str:
    """Convert markdown text to an HTML fragment.

    Block elements are joined with newlines, in source order. Never
    raises: unmatched inline markers stay literal and an unterminated
    code fence is closed at end of input.
    """
    renderer = _BlockRenderer()
    for line in text.replace("\r\n", "\n").split("\n"):
        renderer.feed(line)
    return renderer.finish()
