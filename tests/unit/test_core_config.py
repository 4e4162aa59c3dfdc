import json
import logging
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from picker.core import config as core_config


class CoreConfigTests(unittest.TestCase):
    def test_normalize_fills_defaults(self):
        cfg = core_config.normalize_config(None)
        self.assertEqual(cfg, core_config.DEFAULT_CONFIG)

    def test_normalize_coerces_history_limit(self):
        self.assertEqual(core_config.normalize_config({"history_limit": "12"})["history_limit"], 12)
        self.assertEqual(core_config.normalize_config({"history_limit": -3})["history_limit"], 0)
        self.assertEqual(
            core_config.normalize_config({"history_limit": "lots"})["history_limit"],
            core_config.DEFAULT_CONFIG["history_limit"],
        )

    def test_load_save_round_trip_uses_normalization(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            config_file = config_dir / "config.json"
            with patch.object(core_config, "CONFIG_DIR", config_dir), patch.object(
                core_config, "CONFIG_FILE", config_file
            ):
                core_config.save_config({"history_limit": "5", "debug": 1})
                loaded = core_config.load_config()

                self.assertEqual(loaded["history_limit"], 5)
                self.assertIs(loaded["debug"], True)
                self.assertFalse(config_file.with_suffix(".json.tmp").exists())

    def test_load_corrupt_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_file = Path(tmpdir) / "config.json"
            config_file.write_text("{not json", encoding="utf-8")
            with patch.object(core_config, "CONFIG_FILE", config_file):
                with self.assertLogs("picker", level="WARNING") as logs:
                    loaded = core_config.load_config()

        self.assertEqual(loaded, core_config.DEFAULT_CONFIG)
        self.assertTrue(any("Failed to load config" in line for line in logs.output))

    def test_save_writes_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir) / "nested"
            config_file = config_dir / "config.json"
            with patch.object(core_config, "CONFIG_DIR", config_dir), patch.object(
                core_config, "CONFIG_FILE", config_file
            ):
                core_config.save_config({})
            with open(config_file, encoding="utf-8") as f:
                self.assertEqual(json.load(f), core_config.DEFAULT_CONFIG)

    def test_configure_logging_sets_picker_level(self):
        logger = logging.getLogger("picker")
        original = logger.level
        try:
            with patch.dict("os.environ", {}, clear=True):
                core_config.configure_logging({"debug": True})
                self.assertEqual(logger.level, logging.DEBUG)
                core_config.configure_logging({"debug": False})
                self.assertEqual(logger.level, logging.WARNING)
            with patch.dict("os.environ", {"PICKER_DEBUG": "1"}):
                core_config.configure_logging({"debug": False})
                self.assertEqual(logger.level, logging.DEBUG)
        finally:
            logger.setLevel(original)


if __name__ == "__main__":
    unittest.main()
