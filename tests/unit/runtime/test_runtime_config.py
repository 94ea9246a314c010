"""Tests for config loading and input sanitization.

Ensures malformed config data falls back to defaults instead of failing.
"""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from treegenerator.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("treegenerator.runtime.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_theme_name())
                self.assertIsNone(config.load_log_level())

    def test_theme_and_log_level_are_read(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text('{"theme": " ocean ", "log_level": "debug"}\n', encoding="utf-8")
            with mock.patch("treegenerator.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertEqual(config.load_log_level(), logging.DEBUG)

    def test_malformed_values_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text('{"theme": 3, "log_level": "chatty"}\n', encoding="utf-8")
            with mock.patch("treegenerator.runtime.config.CONFIG_PATH", config_path):
                self.assertIsNone(config.load_theme_name())
                self.assertIsNone(config.load_log_level())

            config_path.write_text("[1, 2", encoding="utf-8")
            with mock.patch("treegenerator.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
