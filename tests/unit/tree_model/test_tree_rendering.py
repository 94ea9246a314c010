"""Tests for text-row styling and the JSON export contract."""

from __future__ import annotations

import json
import unittest

from treegenerator.tree_model import (
    EntryKind,
    RootNode,
    TreeLine,
    TreeNode,
    format_tree_line,
    render_text_tree,
    structured_from_json,
    structured_to_json,
)
from treegenerator.ui_theme import DEFAULT_THEME, PLAIN_THEME

EXAMPLE_ROOT = RootNode(
    path="/r",
    children=(
        TreeNode("a.txt", EntryKind.FILE),
        TreeNode("b", EntryKind.DIRECTORY, (TreeNode("c.txt", EntryKind.FILE),)),
    ),
)

EXAMPLE_JSON = """{
  "path": "/r",
  "type": "directory",
  "children": [
    {
      "name": "a.txt"
    },
    {
      "name": "b",
      "children": [
        {
          "name": "c.txt"
        }
      ]
    }
  ]
}"""


class StructuredExportTests(unittest.TestCase):
    def test_example_export_matches_two_space_json_contract(self) -> None:
        self.assertEqual(structured_to_json(EXAMPLE_ROOT), EXAMPLE_JSON)

    def test_empty_directories_export_empty_children_lists(self) -> None:
        root = RootNode(path="/r", children=(TreeNode("empty", EntryKind.DIRECTORY),))

        data = json.loads(structured_to_json(root))

        self.assertEqual(data, {"path": "/r", "type": "directory", "children": [{"name": "empty", "children": []}]})

    def test_non_ascii_names_are_written_verbatim(self) -> None:
        root = RootNode(path="/r", children=(TreeNode("résumé.txt", EntryKind.FILE),))

        self.assertIn('"name": "résumé.txt"', structured_to_json(root))

    def test_exported_document_parses_back_into_same_tree(self) -> None:
        self.assertEqual(structured_from_json(EXAMPLE_JSON), EXAMPLE_ROOT)

    def test_parse_rejects_documents_without_directory_root(self) -> None:
        with self.assertRaises(ValueError):
            structured_from_json('{"path": "/r", "children": []}')
        with self.assertRaises(ValueError):
            structured_from_json('{"path": "/r", "type": "directory", "children": [{"children": []}]}')
        with self.assertRaises(ValueError):
            structured_from_json("not json")


class TextTreeFormattingTests(unittest.TestCase):
    def test_plain_theme_rows_have_no_escape_sequences(self) -> None:
        line = TreeLine(indent="│   ", is_last=True, name="c.txt", kind=EntryKind.FILE, depth=1)

        self.assertEqual(format_tree_line(line, PLAIN_THEME), "│   └── c.txt")

    def test_default_theme_colors_directories_and_files_differently(self) -> None:
        directory = TreeLine(indent="", is_last=False, name="b", kind=EntryKind.DIRECTORY)
        file_line = TreeLine(indent="", is_last=True, name="a.txt", kind=EntryKind.FILE)

        styled_dir = format_tree_line(directory, DEFAULT_THEME)
        styled_file = format_tree_line(file_line, DEFAULT_THEME)

        self.assertIn(f"{DEFAULT_THEME.tree_dir}b{DEFAULT_THEME.reset}", styled_dir)
        self.assertIn(f"{DEFAULT_THEME.tree_file}a.txt{DEFAULT_THEME.reset}", styled_file)
        self.assertIn(f"{DEFAULT_THEME.tree_marker}├── ", styled_dir)

    def test_control_characters_in_names_are_escaped_for_display(self) -> None:
        line = TreeLine(indent="", is_last=True, name="bad\x1b[2Jname", kind=EntryKind.FILE)

        self.assertEqual(format_tree_line(line, PLAIN_THEME), "└── bad\\x1b[2Jname")

    def test_render_text_tree_terminates_every_row(self) -> None:
        lines = (
            TreeLine(indent="", is_last=False, name="a.txt", kind=EntryKind.FILE),
            TreeLine(indent="", is_last=True, name="b", kind=EntryKind.DIRECTORY),
        )

        self.assertEqual(render_text_tree(lines, PLAIN_THEME), "├── a.txt\n└── b\n")


if __name__ == "__main__":
    unittest.main()
