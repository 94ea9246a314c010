"""Domain model for the dual text/structured directory tree.

This package contains non-UI tree primitives:
- line and node datatypes shared by both representations
- the single-pass filesystem walk that produces them
- text formatting and the JSON export contract
"""

from __future__ import annotations

from .types import BuiltTrees, EntryKind, RootNode, TreeLine, TreeNode
from .build import TreeBuilder, build_trees, classify_entry, list_entry_names
from .rendering import (
    format_tree_line,
    render_plain_text_tree,
    render_text_tree,
    structured_from_json,
    structured_to_dict,
    structured_to_json,
)

__all__ = [
    "BuiltTrees",
    "EntryKind",
    "RootNode",
    "TreeLine",
    "TreeNode",
    "TreeBuilder",
    "build_trees",
    "classify_entry",
    "list_entry_names",
    "format_tree_line",
    "render_plain_text_tree",
    "render_text_tree",
    "structured_from_json",
    "structured_to_dict",
    "structured_to_json",
]
