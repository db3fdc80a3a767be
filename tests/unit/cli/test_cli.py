"""CLI argument and start-path behavior tests.

Verifies how ``lazyexplorer.cli.main`` chooses the starting prompt and the
non-interactive ``--list`` output.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyexplorer import cli
from lazyexplorer.config import ALWAYS_SHOW_DOT_FILES


class _CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "pkg").mkdir()
        (self.root / "pkg" / "mod.py").write_text("x = 1\n", encoding="utf-8")
        (self.root / "notes.txt").write_text("n\n", encoding="utf-8")
        (self.root / ".hidden").write_text("h\n", encoding="utf-8")
        self._config_patch = mock.patch("lazyexplorer.config.CONFIG_PATH", self.root / "no-config.json")
        self._config_patch.start()

    def tearDown(self) -> None:
        self._config_patch.stop()
        self._tmp.cleanup()


class CliStartPromptTests(_CliTestCase):
    def test_no_path_starts_from_buffer_or_working_directory(self) -> None:
        with mock.patch.object(sys, "argv", ["lx"]), mock.patch("lazyexplorer.cli.run_explorer") as run_explorer:
            cli.main()

        run_explorer.assert_called_once()
        _explorer, start_prompt = run_explorer.call_args.args
        self.assertIsNone(start_prompt)

    def test_directory_argument_starts_inside_it(self) -> None:
        with mock.patch.object(sys, "argv", ["lx", str(self.root / "pkg")]), mock.patch(
            "lazyexplorer.cli.run_explorer"
        ) as run_explorer:
            cli.main()

        _explorer, start_prompt = run_explorer.call_args.args
        self.assertEqual(start_prompt, str(self.root / "pkg") + os.sep)

    def test_file_argument_starts_in_its_directory(self) -> None:
        with mock.patch.object(sys, "argv", ["lx", str(self.root / "pkg" / "mod.py")]), mock.patch(
            "lazyexplorer.cli.run_explorer"
        ) as run_explorer:
            cli.main()

        _explorer, start_prompt = run_explorer.call_args.args
        self.assertEqual(start_prompt, str(self.root / "pkg") + os.sep)

    def test_missing_path_exits(self) -> None:
        missing = str(self.root / "absent")
        with mock.patch.object(sys, "argv", ["lx", missing]), mock.patch("lazyexplorer.cli.run_explorer") as run_explorer:
            with self.assertRaises(SystemExit) as raised:
                cli.main()

        self.assertEqual(str(raised.exception), f"Path not found: {missing}")
        run_explorer.assert_not_called()

    def test_flags_build_layered_config(self) -> None:
        with mock.patch.object(sys, "argv", ["lx", "--show-dotfiles", "--mask", "*.py", "--mask", "*.txt"]), mock.patch(
            "lazyexplorer.cli.run_explorer"
        ) as run_explorer:
            cli.main()

        explorer, _start_prompt = run_explorer.call_args.args
        self.assertTrue(explorer.config.option_set(ALWAYS_SHOW_DOT_FILES))
        self.assertEqual(explorer.config.file_masks(), ["*.py", "*.txt"])


class CliListTests(_CliTestCase):
    def _run_list(self, *argv: str) -> list[str]:
        stdout = io.StringIO()
        with mock.patch.object(sys, "argv", ["lx", "--list", *argv]), mock.patch.object(sys, "stdout", stdout):
            cli.main()
        return stdout.getvalue().splitlines()

    def test_list_prints_directory_entries(self) -> None:
        self.assertEqual(self._run_list(str(self.root) + "/"), ["pkg/", "notes.txt"])

    def test_list_uses_trailing_text_as_abbreviation(self) -> None:
        self.assertEqual(self._run_list(str(self.root) + "/no"), ["notes.txt"])

    def test_list_shows_dotfiles_when_requested(self) -> None:
        lines = self._run_list("--show-dotfiles", str(self.root) + "/")
        self.assertIn(".hidden", lines)
        self.assertIn("../", lines)

    def test_list_applies_masks(self) -> None:
        self.assertEqual(self._run_list("--mask", "*.txt", str(self.root) + "/"), ["pkg/"])


if __name__ == "__main__":
    unittest.main()
