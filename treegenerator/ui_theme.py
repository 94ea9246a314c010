"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the tree rows and the screen chrome. Highlighting
of the structured JSON view is delegated to Pygments and follows ``json_style``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    tree_marker: str
    tree_dir: str
    tree_file: str
    header_label: str
    header_path: str
    status_bar: str
    json_style: str | None


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_marker="\033[90m",
    tree_dir="\033[34m",
    tree_file="\033[32m",
    header_label="\033[36m",
    header_path="\033[37m",
    status_bar="\033[37;44m",
    json_style="monokai",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_marker="\033[2;38;5;31m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;117m",
    header_label="\033[1;38;5;39m",
    header_path="\033[38;5;153m",
    status_bar="\033[38;5;231;48;5;24m",
    json_style="native",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_marker="",
    tree_dir="",
    tree_file="",
    header_label="",
    header_path="",
    status_bar="\033[7m",
    json_style=None,
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]
