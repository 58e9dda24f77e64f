# tests/test_settings.py
from __future__ import annotations

import os
import unittest
from unittest import mock
from zoneinfo import ZoneInfo

import settings


class TestGetSetting(unittest.TestCase):
    def setUp(self) -> None:
        settings._ENV_CACHE.pop("X_TO_MD_SAMPLE", None)

    def tearDown(self) -> None:
        settings._ENV_CACHE.pop("X_TO_MD_SAMPLE", None)

    def test_reads_environment_once(self) -> None:
        with mock.patch.dict(os.environ, {"X_TO_MD_SAMPLE": "zh"}):
            self.assertEqual(settings.get_setting("X_TO_MD_SAMPLE", "en"), "zh")
        # Cached after the first read
        self.assertEqual(settings.get_setting("X_TO_MD_SAMPLE", "en"), "zh")

    def test_default_when_unset(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(settings.get_setting("X_TO_MD_SAMPLE", "output"), "output")


class TestDisplayTimezone(unittest.TestCase):
    def test_named_zone(self) -> None:
        self.assertEqual(settings.get_display_timezone("Asia/Shanghai"), ZoneInfo("Asia/Shanghai"))

    def test_empty_name_means_local_time(self) -> None:
        self.assertIsNone(settings.get_display_timezone(""))


if __name__ == "__main__":
    unittest.main()
