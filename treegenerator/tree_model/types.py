"""Domain datatypes for the text tree and the structured tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BRANCH_MIDDLE = "├── "
BRANCH_LAST = "└── "
INDENT_GUIDE = "│   "
INDENT_BLANK = "    "


class EntryKind(Enum):
    """Filesystem classification carried by both representations."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class TreeLine:
    """One rendered text-tree row for a non-root entry."""

    indent: str
    is_last: bool
    name: str
    kind: EntryKind
    depth: int = 0

    @property
    def branch(self) -> str:
        return BRANCH_LAST if self.is_last else BRANCH_MIDDLE

    @property
    def child_indent(self) -> str:
        """Indent inherited by this entry's own children."""
        return self.indent + (INDENT_BLANK if self.is_last else INDENT_GUIDE)

    @property
    def plain_text(self) -> str:
        return f"{self.indent}{self.branch}{self.name}"


@dataclass(frozen=True)
class TreeNode:
    """Structured-tree node; directories always carry a (possibly empty) children tuple."""

    name: str
    kind: EntryKind
    children: tuple["TreeNode", ...] = ()

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def descendant_count(self) -> int:
        return sum(1 + child.descendant_count() for child in self.children)


@dataclass(frozen=True)
class RootNode:
    """Structured-tree root keyed by the resolved input path instead of a name."""

    path: str
    children: tuple[TreeNode, ...] = ()

    def descendant_count(self) -> int:
        return sum(1 + child.descendant_count() for child in self.children)


@dataclass(frozen=True)
class BuiltTrees:
    """Both representations produced by one traversal."""

    lines: tuple[TreeLine, ...]
    root: RootNode


__all__ = [
    "BRANCH_LAST",
    "BRANCH_MIDDLE",
    "INDENT_BLANK",
    "INDENT_GUIDE",
    "EntryKind",
    "TreeLine",
    "TreeNode",
    "RootNode",
    "BuiltTrees",
]
