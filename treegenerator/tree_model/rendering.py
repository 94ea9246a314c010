"""Presentation of built trees: styled/plain text rows and the JSON export.

The JSON produced here is the byte-level contract for copied output:
two-space indentation, the root as ``{"path", "type", "children"}`` and every
other node as ``{"name"[, "children"]}``.
"""

from __future__ import annotations

import json
from collections.abc import Iterable

from ..ansi import sanitize_terminal_text
from ..ui_theme import UITheme
from .types import EntryKind, RootNode, TreeLine, TreeNode

ROOT_TYPE = "directory"


def format_tree_line(line: TreeLine, theme: UITheme) -> str:
    """Return ``<indent><branch><name>`` with marker and kind colors applied."""
    name_style = theme.tree_dir if line.kind is EntryKind.DIRECTORY else theme.tree_file
    name = sanitize_terminal_text(line.name)
    if not theme.reset:
        return f"{line.indent}{line.branch}{name}"
    return (
        f"{theme.tree_marker}{line.indent}{line.branch}{theme.reset}"
        f"{name_style}{name}{theme.reset}"
    )


def render_text_tree(lines: Iterable[TreeLine], theme: UITheme) -> str:
    return "".join(format_tree_line(line, theme) + "\n" for line in lines)


def render_plain_text_tree(lines: Iterable[TreeLine]) -> str:
    """Unstyled text tree built from raw entry names."""
    return "".join(line.plain_text + "\n" for line in lines)


def _node_to_dict(node: TreeNode) -> dict[str, object]:
    data: dict[str, object] = {"name": node.name}
    if node.is_directory:
        data["children"] = [_node_to_dict(child) for child in node.children]
    return data


def structured_to_dict(root: RootNode) -> dict[str, object]:
    return {
        "path": root.path,
        "type": ROOT_TYPE,
        "children": [_node_to_dict(child) for child in root.children],
    }


def structured_to_json(root: RootNode) -> str:
    return json.dumps(structured_to_dict(root), indent=2, ensure_ascii=False)


def _node_from_dict(data: object) -> TreeNode:
    if not isinstance(data, dict) or not isinstance(data.get("name"), str):
        raise ValueError(f"invalid tree node: {data!r}")
    if "children" not in data:
        return TreeNode(name=data["name"], kind=EntryKind.FILE)
    children = data["children"]
    if not isinstance(children, list):
        raise ValueError(f"children of {data['name']!r} must be a list")
    return TreeNode(
        name=data["name"],
        kind=EntryKind.DIRECTORY,
        children=tuple(_node_from_dict(child) for child in children),
    )


def structured_from_json(document: str) -> RootNode:
    """Parse an exported JSON document back into a :class:`RootNode`.

    Raises ``ValueError`` (``json.JSONDecodeError`` included) when the text is
    not a well-formed export.
    """
    data = json.loads(document)
    if not isinstance(data, dict) or data.get("type") != ROOT_TYPE:
        raise ValueError("document root must be a directory object")
    path = data.get("path")
    children = data.get("children")
    if not isinstance(path, str) or not isinstance(children, list):
        raise ValueError("document root requires string 'path' and list 'children'")
    return RootNode(path=path, children=tuple(_node_from_dict(child) for child in children))


__all__ = [
    "format_tree_line",
    "render_text_tree",
    "render_plain_text_tree",
    "structured_to_dict",
    "structured_to_json",
    "structured_from_json",
]
