"""Key-token to session-command table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..runtime.session import Command, CopyToClipboard, Quit, Scroll, ToggleView
from ..runtime.viewport import ScrollDirection


def normalize_key(key: str) -> str:
    """Drop mouse coordinates so ``MOUSE_WHEEL_UP:3:9`` matches ``MOUSE_WHEEL_UP``."""
    if key.startswith("MOUSE_"):
        return key.split(":", 1)[0]
    return key


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single command."""

    combos: tuple[str, ...]
    command: Command


class KeyBindings:
    """Small key-dispatch table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize if normalize is not None else normalize_key
        self._commands: dict[str, Command] = {}

    def register_binding(self, binding: KeyBinding) -> KeyBindings:
        """Register one binding, overwriting existing commands for same combos."""
        for combo in binding.combos:
            self._commands[self._normalize(combo)] = binding.command
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyBindings:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def command_for_key(self, key: str) -> Command | None:
        return self._commands.get(self._normalize(key))


def default_key_bindings() -> KeyBindings:
    return KeyBindings().register_bindings(
        KeyBinding(("CTRL_Q", "q", "EOF"), Quit()),
        KeyBinding(("CTRL_C",), CopyToClipboard()),
        KeyBinding(("CTRL_V",), ToggleView()),
        KeyBinding(("UP", "MOUSE_WHEEL_UP"), Scroll(ScrollDirection.UP)),
        KeyBinding(("DOWN", "MOUSE_WHEEL_DOWN"), Scroll(ScrollDirection.DOWN)),
        KeyBinding(("LEFT",), Scroll(ScrollDirection.LEFT)),
        KeyBinding(("RIGHT",), Scroll(ScrollDirection.RIGHT)),
        KeyBinding(("PAGE_UP",), Scroll(ScrollDirection.PAGE_UP)),
        KeyBinding(("PAGE_DOWN",), Scroll(ScrollDirection.PAGE_DOWN)),
        KeyBinding(("HOME",), Scroll(ScrollDirection.HOME)),
        KeyBinding(("END",), Scroll(ScrollDirection.END)),
    )


__all__ = ["KeyBinding", "KeyBindings", "default_key_bindings", "normalize_key"]
