"""Wrap a rendered markdown fragment in the self-contained statement page."""

from __future__ import annotations

from importlib import resources

from .config import BuildConfig
from .markdown import escape

_FONTS_URL = (
    "https://fonts.googleapis.com/css2?family=Space+Grotesk:wght@400;500;700"
    "&family=JetBrains+Mono:wght@400&display=swap"
)


def _load_asset(name: str) -> str:
    """Load a bundled CSS asset from the package."""
    return resources.files(__package__).joinpath(name).read_text(encoding="utf-8")


def build_page(content_html: str, config: BuildConfig) -> str:
    """Build the full HTML document around an already-rendered fragment.

    ``content_html`` is spliced in as-is; page metadata from ``config`` is
    escaped.
    """
    return _HTML_TEMPLATE.format(
        title=escape(config.title),
        description=escape(config.description),
        fonts_url=escape(_FONTS_URL),
        css=_load_asset("style.css"),
        badge=escape(config.badge),
        home_href=escape(config.home_href),
        home_label=escape(config.home_label),
        content_html=content_html,
    )


# ---------------------------------------------------------------------------
# HTML shell template
# ---------------------------------------------------------------------------

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta name="color-scheme" content="light dark">
  <title>{title}</title>
  <meta name="description" content="{description}">
  <link rel="icon" type="image/svg+xml" href="/favicon.svg">
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="{fonts_url}" rel="stylesheet">
  <style>
{css}
  </style>
</head>
<body>
  <main class="shell">
    <div class="top">
      <span class="badge">{badge}</span>
      <a class="home-link" href="{home_href}">{home_label}</a>
    </div>
    {content_html}
  </main>
</body>
</html>
"""
