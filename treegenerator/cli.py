"""Command-line front door for TreeGenerator.

Parses CLI options, validates the root directory and reads the package
version. Then dispatches into the session runtime.
"""

from __future__ import annotations

import argparse
import logging
from importlib import metadata
from pathlib import Path

from .logs import configure_logging
from .runtime import run_session
from .runtime.config import load_log_level, load_theme_name
from .runtime.session import SessionContext, ViewMode
from .ui_theme import available_theme_names, resolve_theme

DISTRIBUTION_NAME = "treegenerator"
LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = logging.getLogger(__name__)


def package_version() -> str:
    """Return the installed distribution version; unreadable metadata is fatal."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError as exc:
        raise SystemExit(f"Error while reading package metadata: {exc}") from exc


def resolve_root_path(raw_path: str | None) -> Path:
    """Validate the positional path and return it resolved.

    Missing, nonexistent, unstatable and non-directory paths raise
    ``SystemExit`` with a descriptive message.
    """
    if not raw_path:
        raise SystemExit("Usage: treegenerator <path>")
    path = Path(raw_path)
    try:
        exists = path.exists()
        is_dir = path.is_dir()
    except OSError as exc:
        raise SystemExit(f"Error stating {path}: {exc}") from exc
    if not exists:
        raise SystemExit("Error: The provided path does not exist.")
    if not is_dir:
        raise SystemExit("Error: The provided path is not a directory.")
    return path.resolve()


def _build_parser(version: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treegenerator",
        description="Show a directory as an ASCII tree and a JSON tree, and copy either to the clipboard.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Root directory to render.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--json", action="store_true", help="Start in the structured (JSON) view.")
    parser.add_argument("--nopager", action="store_true", help="Print the selected view and exit.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_NAMES,
        default=None,
        help="Log file verbosity (default: WARNING).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {version}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, validate the root path and start the session."""
    version = package_version()
    args = _build_parser(version).parse_args(argv)
    root = resolve_root_path(args.path)

    if args.log_level is not None:
        log_level = logging.getLevelName(args.log_level)
    else:
        log_level = load_log_level() or logging.WARNING
    configure_logging(log_level)
    logger.info("starting %s %s for %s", DISTRIBUTION_NAME, version, root)

    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    context = SessionContext(root_path=str(root), version=version, theme=theme)
    initial_view = ViewMode.STRUCTURED if args.json else ViewMode.TREE
    run_session(context, initial_view=initial_view, nopager=args.nopager)


if __name__ == "__main__":
    main()
