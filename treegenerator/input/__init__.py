"""Input-layer public API for key decoding and command lookup.

Exports are split between low-level terminal decoding (`read_key`) and the
key-to-command table used by the runtime loop.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .bindings import KeyBinding, KeyBindings, default_key_bindings, normalize_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "KeyBindings",
    "default_key_bindings",
    "normalize_key",
]
