"""Tests for configuration providers and value coercion.

Malformed config must degrade to defaults rather than raise.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyexplorer import config
from lazyexplorer.config import (
    ALWAYS_SHOW_DOT_FILES,
    JsonConfigProvider,
    StaticConfigProvider,
    coerce_flag,
    coerce_masks,
)


class CoercionTests(unittest.TestCase):
    def test_boolean_like_flag_values(self) -> None:
        for value in (True, 1, 2.5, "1", "yes", "true", "on"):
            with self.subTest(value=value):
                self.assertTrue(coerce_flag(value))
        for value in (False, 0, 0.0, "", "0", "false", "No", " off ", None, [], {}):
            with self.subTest(value=value):
                self.assertFalse(coerce_flag(value))

    def test_masks_from_list_or_comma_string(self) -> None:
        self.assertEqual(coerce_masks(["*.o", " ", "build", 3]), ["*.o", "build"])
        self.assertEqual(coerce_masks("*.o, *.a,,tags"), ["*.o", "*.a", "tags"])
        self.assertEqual(coerce_masks({"*.o": True}), [])


class JsonConfigProviderTests(unittest.TestCase):
    def test_reads_flags_and_masks_from_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(
                json.dumps({ALWAYS_SHOW_DOT_FILES: "1", "file_masks": ["*.pyc"]}),
                encoding="utf-8",
            )
            with mock.patch("lazyexplorer.config.CONFIG_PATH", config_path):
                provider = JsonConfigProvider()

                self.assertTrue(provider.option_set(ALWAYS_SHOW_DOT_FILES))
                self.assertFalse(provider.option_set("SomethingElse"))
                self.assertEqual(provider.file_masks(), ["*.pyc"])

    def test_missing_or_malformed_config_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazyexplorer.config.CONFIG_PATH", config_path):
                provider = JsonConfigProvider()
                self.assertFalse(provider.option_set(ALWAYS_SHOW_DOT_FILES))
                self.assertEqual(provider.file_masks(), [])

                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                self.assertFalse(JsonConfigProvider().option_set(ALWAYS_SHOW_DOT_FILES))

                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_config_file_is_read_once_per_provider(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps({ALWAYS_SHOW_DOT_FILES: True}), encoding="utf-8")
            with mock.patch("lazyexplorer.config.CONFIG_PATH", config_path):
                with mock.patch("lazyexplorer.config.load_config", wraps=config.load_config) as load:
                    provider = JsonConfigProvider()
                    for _ in range(5):
                        self.assertTrue(provider.option_set(ALWAYS_SHOW_DOT_FILES))
                        provider.file_masks()

                self.assertEqual(load.call_count, 1)


class StaticConfigProviderTests(unittest.TestCase):
    def test_static_options_override_fallback(self) -> None:
        fallback = StaticConfigProvider(options={ALWAYS_SHOW_DOT_FILES: True, "Other": True}, masks=["*.o"])
        provider = StaticConfigProvider(options={ALWAYS_SHOW_DOT_FILES: False}, masks=["*.a"], fallback=fallback)

        self.assertFalse(provider.option_set(ALWAYS_SHOW_DOT_FILES))
        self.assertTrue(provider.option_set("Other"))
        self.assertEqual(provider.file_masks(), ["*.o", "*.a"])

    def test_unset_option_defaults_to_false(self) -> None:
        self.assertFalse(StaticConfigProvider().option_set(ALWAYS_SHOW_DOT_FILES))


if __name__ == "__main__":
    unittest.main()
