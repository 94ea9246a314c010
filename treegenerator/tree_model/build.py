"""Single-pass directory walk producing the text tree and the structured tree.

Both representations are appended from the same loop iteration, so they always
describe the same entries in the same order. Entries that cannot be listed or
classified are dropped and logged; the walk itself never aborts.
"""

from __future__ import annotations

import logging
import os
import stat
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .types import BuiltTrees, EntryKind, RootNode, TreeLine, TreeNode

logger = logging.getLogger(__name__)

ListEntries = Callable[[Path], list[str]]
Classify = Callable[[Path], EntryKind]


def list_entry_names(directory: Path) -> list[str]:
    """Return entry names in the order the platform listing call yields them."""
    return os.listdir(directory)


def classify_entry(path: Path) -> EntryKind:
    """Classify ``path`` with a stat call that follows symlinks."""
    mode = os.stat(path).st_mode
    return EntryKind.DIRECTORY if stat.S_ISDIR(mode) else EntryKind.FILE


@dataclass(frozen=True)
class _Survivor:
    name: str
    kind: EntryKind
    child_names: list[str] | None
    is_last: bool


class TreeBuilder:
    """Depth-first, pre-order builder of :class:`BuiltTrees`.

    ``list_entries`` and ``classify`` default to ``os.listdir`` / ``os.stat``
    and may be replaced to simulate unreadable entries.
    """

    def __init__(
        self,
        list_entries: ListEntries = list_entry_names,
        classify: Classify = classify_entry,
    ) -> None:
        self._list_entries = list_entries
        self._classify = classify
        self._lines: list[TreeLine] = []
        self.skipped = 0

    def build(self, root: Path) -> BuiltTrees:
        """Walk ``root`` (an existing directory) and return both representations."""
        started = time.perf_counter()
        self._lines = []
        self.skipped = 0
        root_path = str(root)
        logger.info("building trees for %s", root_path)

        names = self._safe_list(root)
        children = self._walk(root, names, indent="", depth=0) if names is not None else ()
        trees = BuiltTrees(lines=tuple(self._lines), root=RootNode(path=root_path, children=children))

        logger.debug(
            "built %d entries for %s in %.3fs (%d skipped)",
            len(trees.lines),
            root_path,
            time.perf_counter() - started,
            self.skipped,
        )
        return trees

    def _safe_list(self, directory: Path) -> list[str] | None:
        try:
            return list(self._list_entries(directory))
        except OSError as exc:
            self.skipped += 1
            logger.warning("cannot read directory %s: %s", directory, exc)
            return None

    def _survivors(self, directory: Path, names: list[str]) -> list[_Survivor]:
        survivors: list[_Survivor] = []
        for index, name in enumerate(names):
            entry_path = directory / name
            try:
                kind = self._classify(entry_path)
            except OSError as exc:
                self.skipped += 1
                logger.warning("cannot stat %s: %s", entry_path, exc)
                continue
            child_names: list[str] | None = None
            if kind is EntryKind.DIRECTORY:
                child_names = self._safe_list(entry_path)
                if child_names is None:
                    continue
            survivors.append(
                _Survivor(name=name, kind=kind, child_names=child_names, is_last=index == len(names) - 1)
            )
        return survivors

    def _walk(self, directory: Path, names: list[str], indent: str, depth: int) -> tuple[TreeNode, ...]:
        survivors = self._survivors(directory, names)
        nodes: list[TreeNode] = []
        for survivor in survivors:
            line = TreeLine(
                indent=indent,
                is_last=survivor.is_last,
                name=survivor.name,
                kind=survivor.kind,
                depth=depth,
            )
            self._lines.append(line)
            if survivor.child_names is None:
                nodes.append(TreeNode(name=survivor.name, kind=survivor.kind))
                continue
            # Descendant lines must follow this line, so recurse before the next sibling.
            grandchildren = self._walk(
                directory / survivor.name,
                survivor.child_names,
                indent=line.child_indent,
                depth=depth + 1,
            )
            nodes.append(TreeNode(name=survivor.name, kind=survivor.kind, children=grandchildren))
        return tuple(nodes)


def build_trees(
    root: Path,
    list_entries: ListEntries = list_entry_names,
    classify: Classify = classify_entry,
) -> BuiltTrees:
    """Convenience wrapper running one :class:`TreeBuilder` over ``root``."""
    return TreeBuilder(list_entries=list_entries, classify=classify).build(root)


__all__ = [
    "TreeBuilder",
    "build_trees",
    "classify_entry",
    "list_entry_names",
]
