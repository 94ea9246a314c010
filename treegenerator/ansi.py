"""ANSI-aware text measurement and line shaping utilities.

Styled rows carry SGR sequences that occupy no screen columns; these helpers
strip, measure and horizontally slice such rows without breaking the styling.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def strip_ansi(text: str) -> str:
    """Remove every ANSI escape sequence from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def sanitize_terminal_text(text: str) -> str:
    """Escape control bytes so file names cannot move the cursor or ring the bell."""
    if _CONTROL_RE.search(text) is None:
        return text
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", text)


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def slice_ansi_line(text: str, start_cols: int, max_cols: int) -> str:
    """Return the ``max_cols`` wide window of a styled line starting at ``start_cols``.

    Escape sequences are kept verbatim. When the window starts after a style
    sequence, the latest one is re-emitted so the visible part keeps its color.
    """
    if max_cols <= 0 or not text:
        return ""
    start_cols = max(0, start_cols)

    out: list[str] = []
    pending_sgr = ""
    col = 0
    shown = 0
    pos = 0
    while pos < len(text) and shown < max_cols:
        match = ANSI_ESCAPE_RE.match(text, pos) if text[pos] == "\x1b" else None
        if match is not None:
            seq = match.group(0)
            if out:
                out.append(seq)
            else:
                pending_sgr += seq
            pos = match.end()
            continue
        ch = text[pos]
        pos += 1
        width = char_display_width(ch)
        if col < start_cols:
            col += width
            continue
        if shown + width > max_cols:
            break
        if not out and pending_sgr:
            out.append(pending_sgr)
        out.append(ch)
        col += width
        shown += width
    return "".join(out)
