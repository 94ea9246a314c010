"""Runtime composition layer for TreeGenerator.

Builds both trees once, wraps them in a session and either prints the chosen
representation or hands the session to the interactive loop.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..tree_model import build_trees
from .loop import run_main_loop
from .session import RenderedSession, SessionContext, SessionController, ViewMode
from .terminal import TerminalController

logger = logging.getLogger(__name__)

WINDOW_TITLE = "File Tree"


def build_session(context: SessionContext, initial_view: ViewMode = ViewMode.TREE) -> RenderedSession:
    """Run the tree builder exactly once for ``context.root_path``."""
    trees = build_trees(Path(context.root_path))
    return RenderedSession.from_trees(context, trees, initial_view=initial_view)


def print_session(session: RenderedSession) -> None:
    """Write the current view without the terminal UI.

    Names that are not valid UTF-8 are written back as their original bytes.
    """
    text = session.display_text()
    if not text.endswith("\n"):
        text += "\n"
    sys.stdout.flush()
    sys.stdout.buffer.write(text.encode("utf-8", errors="surrogateescape"))
    sys.stdout.buffer.flush()


def run_session(
    context: SessionContext,
    initial_view: ViewMode = ViewMode.TREE,
    nopager: bool = False,
) -> None:
    session = build_session(context, initial_view=initial_view)
    if nopager or not (sys.stdin.isatty() and sys.stdout.isatty()):
        print_session(session)
        return

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd=stdin_fd, stdout_fd=sys.stdout.fileno())
    terminal.set_title(WINDOW_TITLE)
    controller = SessionController(session)
    logger.info("interactive session started for %s (pid %d)", context.root_path, os.getpid())
    run_main_loop(controller, terminal, stdin_fd)
    logger.info("interactive session ended")
    sys.stdout.write(f"Thanks for using {context.product}!\n")
