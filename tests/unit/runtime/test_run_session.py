"""Tests for session bootstrap outside the interactive terminal."""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from treegenerator.runtime.app import build_session, print_session, run_session
from treegenerator.runtime.session import RenderedSession, SessionContext, ViewMode
from treegenerator.tree_model import BuiltTrees, EntryKind, RootNode, TreeLine, TreeNode, build_trees
from treegenerator.ui_theme import PLAIN_THEME


def utf8_stdout() -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(), encoding="utf-8")


class RunSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        (self.root / "a.txt").write_text("a", encoding="utf-8")
        self.context = SessionContext(root_path=str(self.root), version="1.2.3", theme=PLAIN_THEME)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_build_session_scans_root_once(self) -> None:
        with mock.patch("treegenerator.runtime.app.build_trees", wraps=build_trees) as build_mock:
            session = build_session(self.context)

        build_mock.assert_called_once_with(self.root)
        self.assertEqual(session.plain_text_tree, "└── a.txt\n")

    def test_nopager_prints_tree_view(self) -> None:
        stdout = utf8_stdout()
        with mock.patch("sys.stdout", stdout), mock.patch("treegenerator.runtime.app.run_main_loop") as loop_mock:
            run_session(self.context, nopager=True)

        loop_mock.assert_not_called()
        self.assertEqual(stdout.buffer.getvalue().decode("utf-8"), "└── a.txt\n")

    def test_non_tty_output_prints_structured_view(self) -> None:
        stdout = utf8_stdout()
        with mock.patch("sys.stdin", io.StringIO()), mock.patch("sys.stdout", stdout), mock.patch(
            "treegenerator.runtime.app.run_main_loop"
        ) as loop_mock:
            run_session(self.context, initial_view=ViewMode.STRUCTURED)

        loop_mock.assert_not_called()
        data = json.loads(stdout.buffer.getvalue())
        self.assertEqual(data, {"path": str(self.root), "type": "directory", "children": [{"name": "a.txt"}]})

    def test_undecodable_file_name_is_printed_as_original_bytes(self) -> None:
        trees = BuiltTrees(
            lines=(TreeLine(indent="", is_last=True, name="bad\udcff.txt", kind=EntryKind.FILE),),
            root=RootNode(path="/r", children=(TreeNode("bad\udcff.txt", EntryKind.FILE),)),
        )
        session = RenderedSession.from_trees(self.context, trees)
        stdout = utf8_stdout()

        with mock.patch("sys.stdout", stdout):
            print_session(session)

        self.assertEqual(stdout.buffer.getvalue(), "└── bad".encode("utf-8") + b"\xff.txt\n")

    def test_interactive_session_sets_title_and_says_goodbye(self) -> None:
        stdin = mock.Mock()
        stdin.isatty.return_value = True
        stdin.fileno.return_value = 0
        stdout = mock.Mock()
        stdout.isatty.return_value = True
        stdout.fileno.return_value = 1
        with mock.patch("sys.stdin", stdin), mock.patch("sys.stdout", stdout), mock.patch(
            "treegenerator.runtime.app.TerminalController"
        ) as terminal_cls, mock.patch("treegenerator.runtime.app.run_main_loop") as loop_mock:
            run_session(self.context)

        terminal_cls.assert_called_once_with(stdin_fd=0, stdout_fd=1)
        terminal_cls.return_value.set_title.assert_called_once_with("File Tree")
        loop_mock.assert_called_once()
        stdout.write.assert_called_with("Thanks for using TreeGenerator!\n")


if __name__ == "__main__":
    unittest.main()
