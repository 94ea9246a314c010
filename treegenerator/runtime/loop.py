"""Main interactive event loop for the terminal UI.

Each iteration expires transient status text, redraws when needed, waits
briefly for one key and dispatches at most one command to the controller.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import KeyBindings, default_key_bindings, read_key
from ..render import pane_geometry, render_frame
from .session import SessionController, SessionOutcome
from .terminal import TerminalController

KEY_POLL_TIMEOUT_MS = 100


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    read_key: Callable[[int, int | None], str] = read_key
    render_frame: Callable[[SessionController, int, int], None] = render_frame
    terminal_size: Callable[[], os.terminal_size] = lambda: shutil.get_terminal_size((80, 24))


def run_main_loop(
    controller: SessionController,
    terminal: TerminalController,
    stdin_fd: int,
    bindings: KeyBindings | None = None,
    callbacks: RuntimeLoopCallbacks | None = None,
) -> None:
    """Run the interactive loop until a quit command is dispatched."""
    bindings = bindings if bindings is not None else default_key_bindings()
    ops = callbacks if callbacks is not None else RuntimeLoopCallbacks()
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            controller.tick()
            term = ops.terminal_size()
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                controller.resize(*pane_geometry(*size))
                controller.dirty = True
            if controller.dirty:
                ops.render_frame(controller, *size)
                controller.dirty = False

            key = ops.read_key(stdin_fd, KEY_POLL_TIMEOUT_MS)
            if not key:
                continue
            command = bindings.command_for_key(key)
            if command is None:
                continue
            if controller.handle(command) is SessionOutcome.QUIT:
                return
