"""Public runtime orchestration entry points.

This package groups the session bootstrap (`run_session`) and the lower-level
controller, viewport and event-loop pieces used by tests and composition code.
"""

from __future__ import annotations


def run_session(*args, **kwargs):
    """Lazily import the session entrypoint to avoid heavy bootstrap on import."""
    from .app import run_session as _run_session

    return _run_session(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = [
    "run_session",
    "run_main_loop",
]
