"""Interactive session state machine.

A :class:`SessionController` owns the two immutable renderings produced at
startup and a single mutable view flag. Every user input reaches it as one of
a closed set of commands through :meth:`SessionController.handle`.
"""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from ..ansi import display_width, sanitize_terminal_text
from ..highlight import colorize_json
from ..tree_model import (
    BuiltTrees,
    render_plain_text_tree,
    render_text_tree,
    structured_to_json,
)
from ..ui_theme import DEFAULT_THEME, UITheme
from .clipboard import copy_text_to_clipboard
from .viewport import ScrollDirection, Viewport

logger = logging.getLogger(__name__)

PRODUCT_NAME = "TreeGenerator"
HELP_TEXT = "^Q: quit, ^C: copy tree to clipboard, ^V: toggle tree view"
COPIED_MESSAGE = "Content copied to clipboard."
STATUS_MESSAGE_SECONDS = 2.0


class ViewMode(Enum):
    TREE = "tree"
    STRUCTURED = "structured"

    def toggled(self) -> ViewMode:
        return ViewMode.STRUCTURED if self is ViewMode.TREE else ViewMode.TREE


@dataclass(frozen=True)
class SessionContext:
    """Startup facts shared with every component that displays or exports."""

    root_path: str
    version: str
    theme: UITheme = DEFAULT_THEME
    product: str = PRODUCT_NAME

    @property
    def attribution(self) -> str:
        return f"\n\nMade with {self.product} @{self.version}"

    @property
    def header_label(self) -> str:
        return f"{self.product} @{self.version} | Path: "


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class ToggleView:
    pass


@dataclass(frozen=True)
class CopyToClipboard:
    pass


@dataclass(frozen=True)
class Scroll:
    direction: ScrollDirection


Command = Quit | ToggleView | CopyToClipboard | Scroll


class SessionOutcome(Enum):
    CONTINUE = "continue"
    QUIT = "quit"


@dataclass
class RenderedSession:
    """Both representations of one scan plus the currently displayed view."""

    context: SessionContext
    trees: BuiltTrees
    text_tree: str
    plain_text_tree: str
    structured_json: str
    structured_display: str
    current_view: ViewMode = ViewMode.TREE
    _pane_lines: dict[ViewMode, tuple[str, ...]] = field(default_factory=dict, repr=False)

    @classmethod
    def from_trees(
        cls,
        context: SessionContext,
        trees: BuiltTrees,
        initial_view: ViewMode = ViewMode.TREE,
    ) -> RenderedSession:
        structured_json = structured_to_json(trees.root)
        return cls(
            context=context,
            trees=trees,
            text_tree=render_text_tree(trees.lines, context.theme),
            plain_text_tree=render_plain_text_tree(trees.lines),
            structured_json=structured_json,
            structured_display=colorize_json(sanitize_terminal_text(structured_json), context.theme.json_style),
            current_view=initial_view,
        )

    def display_text(self, view: ViewMode | None = None) -> str:
        """Styled text bound to the pane for ``view`` (default: current view)."""
        view = view or self.current_view
        return self.text_tree if view is ViewMode.TREE else self.structured_display

    def pane_lines(self, view: ViewMode | None = None) -> tuple[str, ...]:
        view = view or self.current_view
        lines = self._pane_lines.get(view)
        if lines is None:
            lines = tuple(self.display_text(view).splitlines())
            self._pane_lines[view] = lines
        return lines

    def export_text(self) -> str:
        """Copy payload for the current view, attribution trailer included."""
        if self.current_view is ViewMode.TREE:
            content = self.plain_text_tree
        else:
            content = self.structured_json
        return content + self.context.attribution


class SessionController:
    """Finite-state controller reacting to one command at a time."""

    def __init__(
        self,
        session: RenderedSession,
        copy_text: Callable[[str], bool] = copy_text_to_clipboard,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.session = session
        self._copy_text = copy_text
        self._clock = clock
        self.viewport = Viewport()
        self.status_message = ""
        self.status_message_until = 0.0
        self.dirty = True
        self._bind_current_view()

    @property
    def current_view(self) -> ViewMode:
        return self.session.current_view

    @property
    def status_text(self) -> str:
        return self.status_message or HELP_TEXT

    def pane_lines(self) -> tuple[str, ...]:
        return self.session.pane_lines()

    def _bind_current_view(self) -> None:
        lines = self.session.pane_lines()
        width = max((display_width(line) for line in lines), default=0)
        self.viewport.bind(len(lines), width)

    def resize(self, visible_rows: int, visible_cols: int) -> None:
        self.viewport.resize(visible_rows, visible_cols)

    def handle(self, command: Command) -> SessionOutcome:
        """Apply ``command`` and report whether the session should keep running."""
        if isinstance(command, Quit):
            logger.info("quit requested")
            return SessionOutcome.QUIT
        if isinstance(command, ToggleView):
            self.toggle_view()
        elif isinstance(command, CopyToClipboard):
            self.copy_to_clipboard()
        elif isinstance(command, Scroll):
            if self.viewport.scroll(command.direction):
                self.dirty = True
        else:
            raise TypeError(f"unsupported command: {command!r}")
        return SessionOutcome.CONTINUE

    def toggle_view(self) -> None:
        self.session.current_view = self.session.current_view.toggled()
        self._bind_current_view()
        self.dirty = True
        logger.debug("switched to %s view", self.session.current_view.value)

    def copy_to_clipboard(self) -> bool:
        content = self.session.export_text()
        try:
            copied = self._copy_text(content)
        except (OSError, subprocess.SubprocessError, UnicodeError) as exc:
            logger.error("error copying to clipboard: %s", exc)
            return False
        if not copied:
            logger.error("error copying to clipboard: no clipboard command succeeded")
            return False
        logger.info("copied %s view (%d characters)", self.current_view.value, len(content))
        self.set_status_message(COPIED_MESSAGE)
        return True

    def set_status_message(self, message: str) -> None:
        """Set transient status message visible for a fixed short interval."""
        self.status_message = message
        self.status_message_until = self._clock() + STATUS_MESSAGE_SECONDS
        self.dirty = True

    def tick(self, now: float | None = None) -> bool:
        """Expire the transient status message; returns whether anything changed."""
        if not self.status_message:
            return False
        if now is None:
            now = self._clock()
        if now < self.status_message_until:
            return False
        self.status_message = ""
        self.status_message_until = 0.0
        self.dirty = True
        return True


__all__ = [
    "COPIED_MESSAGE",
    "HELP_TEXT",
    "PRODUCT_NAME",
    "STATUS_MESSAGE_SECONDS",
    "Command",
    "CopyToClipboard",
    "Quit",
    "RenderedSession",
    "Scroll",
    "SessionContext",
    "SessionController",
    "SessionOutcome",
    "ToggleView",
    "ViewMode",
]
