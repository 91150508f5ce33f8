from __future__ import annotations

import contextlib
import io
import logging
import sys
import unittest
from pathlib import Path

from pydantic import ValidationError


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


import main  # noqa: E402
from ui.settings import AppSettings, DisplaySettings  # noqa: E402


class DisplaySettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = DisplaySettings()
        self.assertEqual(settings.square_size, 80)
        self.assertEqual(settings.fps, 60)

    def test_rejects_out_of_range_values(self) -> None:
        with self.assertRaises(ValidationError):
            DisplaySettings(square_size=10)
        with self.assertRaises(ValidationError):
            DisplaySettings(fps=0)


class AppSettingsTests(unittest.TestCase):
    def test_log_level_is_normalised(self) -> None:
        settings = AppSettings(log_level="DEBUG")
        self.assertEqual(settings.log_level, "debug")
        self.assertEqual(settings.logging_level, logging.DEBUG)

    def test_unknown_log_level_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            AppSettings(log_level="verbose")


class CommandLineTests(unittest.TestCase):
    def test_load_settings_from_arguments(self) -> None:
        settings = main.load_settings(["--text", "--square-size", "64", "--log-level", "info"])
        self.assertTrue(settings.text_mode)
        self.assertEqual(settings.display.square_size, 64)
        self.assertEqual(settings.logging_level, logging.INFO)

    def test_invalid_arguments_exit(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.load_settings(["--square-size", "5"])


if __name__ == "__main__":
    unittest.main()
