"""Scroll position of the visible pane."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ScrollDirection(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


@dataclass
class Viewport:
    """Vertical/horizontal offsets clamped to the bound content and pane size."""

    total_lines: int = 0
    content_width: int = 0
    visible_rows: int = 1
    visible_cols: int = 1
    start: int = 0
    text_x: int = 0

    @property
    def max_start(self) -> int:
        return max(0, self.total_lines - self.visible_rows)

    @property
    def max_text_x(self) -> int:
        return max(0, self.content_width - self.visible_cols)

    def bind(self, total_lines: int, content_width: int) -> None:
        """Attach new content and return to the top-left corner."""
        self.total_lines = max(0, total_lines)
        self.content_width = max(0, content_width)
        self.start = 0
        self.text_x = 0

    def resize(self, visible_rows: int, visible_cols: int) -> None:
        self.visible_rows = max(1, visible_rows)
        self.visible_cols = max(1, visible_cols)
        self._clamp()

    def _clamp(self) -> None:
        self.start = max(0, min(self.start, self.max_start))
        self.text_x = max(0, min(self.text_x, self.max_text_x))

    def scroll(self, direction: ScrollDirection) -> bool:
        """Apply one scroll step, returning whether the offsets changed."""
        previous = (self.start, self.text_x)
        if direction is ScrollDirection.UP:
            self.start -= 1
        elif direction is ScrollDirection.DOWN:
            self.start += 1
        elif direction is ScrollDirection.PAGE_UP:
            self.start -= self.visible_rows
        elif direction is ScrollDirection.PAGE_DOWN:
            self.start += self.visible_rows
        elif direction is ScrollDirection.HOME:
            self.start = 0
            self.text_x = 0
        elif direction is ScrollDirection.END:
            self.start = self.max_start
        elif direction is ScrollDirection.LEFT:
            self.text_x -= 1
        elif direction is ScrollDirection.RIGHT:
            self.text_x += 1
        self._clamp()
        return (self.start, self.text_x) != previous

    def visible_range(self) -> tuple[int, int, int]:
        """Return 1-based ``(first, last, total)`` line numbers for the status bar."""
        if self.total_lines <= 0:
            return 0, 0, 0
        end = min(self.total_lines, self.start + self.visible_rows)
        return self.start + 1, end, self.total_lines

    def scroll_percent(self) -> float:
        if self.max_start <= 0:
            return 0.0
        return (self.start / self.max_start) * 100.0
