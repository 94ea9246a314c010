"""Frame composition for the interactive view.

Layout: one header row, the scrollable pane, and one status bar row. Each
render writes a complete frame with a single ``os.write``.
"""

from __future__ import annotations

import os
import sys

from .ansi import sanitize_terminal_text, slice_ansi_line
from .runtime.session import SessionController
from .runtime.viewport import Viewport

HEADER_ROWS = 1
STATUS_ROWS = 1


def pane_geometry(width: int, height: int) -> tuple[int, int]:
    """Return ``(rows, cols)`` available to the pane for a terminal size."""
    rows = max(1, height - HEADER_ROWS - STATUS_ROWS)
    cols = max(1, width - 1)
    return rows, cols


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def format_position(viewport: Viewport) -> str:
    first, last, total = viewport.visible_range()
    return f"{first}-{last}/{total} {viewport.scroll_percent():5.1f}%"


def render_frame(controller: SessionController, width: int, height: int) -> None:
    session = controller.session
    context = session.context
    theme = context.theme
    viewport = controller.viewport
    rows, cols = pane_geometry(width, height)

    out: list[str] = ["\033[H\033[J"]
    header = (
        f"{theme.header_label}{context.header_label}{theme.reset}"
        f"{theme.header_path}{sanitize_terminal_text(context.root_path)}{theme.reset}"
    )
    out.append(slice_ansi_line(header, 0, cols))
    out.append("\033[0m\r\n")

    lines = session.pane_lines()
    for row in range(rows):
        index = viewport.start + row
        if index < len(lines):
            text = slice_ansi_line(lines[index], viewport.text_x, cols)
            out.append(text)
            if "\033" in text:
                out.append("\033[0m")
        out.append("\r\n")

    status = build_status_line(controller.status_text, width, format_position(viewport))
    out.append(theme.status_bar)
    out.append(status)
    out.append("\033[0m")
    os.write(sys.stdout.fileno(), "".join(out).encode("utf-8", errors="replace"))
