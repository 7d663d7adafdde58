"""Tests for config persistence and defensive loading."""

from __future__ import annotations

import locale
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from filelisting.listing_model.rendering import DEFAULT_DATE_FORMAT
from filelisting.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_date_format_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "native" / "config.json"
            with mock.patch("filelisting.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_date_format(), DEFAULT_DATE_FORMAT)
                config.save_date_format("%d.%m.%Y")
                self.assertEqual(config.load_date_format(), "%d.%m.%Y")
                self.assertTrue(config_path.exists())

    def test_blank_values_are_not_persisted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("filelisting.runtime.config.CONFIG_PATH", config_path):
                config.save_collation_locale("   ")
                self.assertFalse(config_path.exists())
                self.assertIsNone(config.load_collation_locale())

    def test_malformed_config_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1, 2", encoding="utf-8")
            with mock.patch("filelisting.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_no_results_message(), "No results")

    def test_non_object_config_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text('["date_format"]\n', encoding="utf-8")
            with mock.patch("filelisting.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_wrong_value_types_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("filelisting.runtime.config.CONFIG_PATH", config_path):
                config.save_config({"date_format": 12, "no_results_message": "Nothing here"})
                self.assertEqual(config.load_date_format(), DEFAULT_DATE_FORMAT)
                self.assertEqual(config.load_no_results_message(), "Nothing here")

    def test_unsupported_locale_is_reported(self) -> None:
        with mock.patch("filelisting.runtime.config.locale.setlocale", side_effect=locale.Error("nope")):
            with self.assertLogs("filelisting.runtime.config", level="WARNING"):
                self.assertFalse(config.apply_collation_locale("xx_XX.bogus"))

    def test_supported_locale_sets_collation(self) -> None:
        with mock.patch("filelisting.runtime.config.locale.setlocale") as setlocale:
            self.assertTrue(config.apply_collation_locale("C"))
        setlocale.assert_called_once_with(locale.LC_COLLATE, "C")


if __name__ == "__main__":
    unittest.main()
