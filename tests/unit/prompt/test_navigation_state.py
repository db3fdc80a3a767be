"""Tests for prompt-derived view path and abbreviation."""

from __future__ import annotations

import unittest

from lazyexplorer.prompt import NavigationState


class NavigationStateTests(unittest.TestCase):
    def test_partial_name_lists_parent_and_abbreviates(self) -> None:
        state = NavigationState("/home/u/proj/src")

        self.assertFalse(state.at_directory())
        self.assertEqual(state.view_path(), "/home/u/proj")
        self.assertEqual(state.abbreviation(), "src")

    def test_trailing_separator_lists_directory_itself(self) -> None:
        state = NavigationState("/home/u/proj/")

        self.assertTrue(state.at_directory())
        self.assertEqual(state.view_path(), "/home/u/proj")
        self.assertEqual(state.abbreviation(), "")

    def test_root_prompt_lists_root(self) -> None:
        state = NavigationState("/")

        self.assertTrue(state.at_directory())
        self.assertEqual(state.view_path(), "/")
        self.assertEqual(state.abbreviation(), "")

    def test_name_under_root(self) -> None:
        state = NavigationState("/et")

        self.assertEqual(state.view_path(), "/")
        self.assertEqual(state.abbreviation(), "et")

    def test_set_keeps_text_verbatim(self) -> None:
        state = NavigationState("/a/")
        state.set("~//not normalized")
        self.assertEqual(state.prompt, "~//not normalized")

    def test_up_one_dir_drops_last_component(self) -> None:
        state = NavigationState("/home/u/proj/src")
        state.up_one_dir()
        self.assertEqual(state.prompt, "/home/u/proj/")

        state.up_one_dir()
        self.assertEqual(state.prompt, "/home/u/")

    def test_up_one_dir_stops_at_root(self) -> None:
        state = NavigationState("/home/")
        state.up_one_dir()
        self.assertEqual(state.prompt, "/")
        state.up_one_dir()
        self.assertEqual(state.prompt, "/")


if __name__ == "__main__":
    unittest.main()
