"""Pygments highlighting for the structured (JSON) view."""

from __future__ import annotations

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_FORMATTERS: dict[str, Terminal256Formatter] = {}


def _normalize_style(style: str) -> str:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    """Return cached Pygments terminal formatter for style name."""
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def colorize_json(document: str, style: str | None) -> str:
    """Return ``document`` with ANSI colors, or unchanged when ``style`` is ``None``."""
    if style is None:
        return document
    formatter = _formatter_for_style(_normalize_style(style))
    rendered = highlight(document, JsonLexer(), formatter)
    if not document.endswith("\n") and rendered.endswith("\n"):
        rendered = rendered[:-1]
    return rendered
