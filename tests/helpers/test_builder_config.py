import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from util.builder_config import BuilderConfig

ENV_KEYS = ("FORM_BUILDER_TITLE", "FORM_BUILDER_WIDTH", "FORM_BUILDER_HEIGHT", "FORM_BUILDER_LOG_LEVEL")


class TestBuilderConfig(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.env_file = Path(self._tmp.name) / ".env"
        self.env_file.write_text("")
        cleaned = {k: v for k, v in os.environ.items() if k not in ENV_KEYS}
        self._patcher = mock.patch.dict(os.environ, cleaned, clear=True)
        self._patcher.start()

    def tearDown(self) -> None:
        self._patcher.stop()
        self._tmp.cleanup()

    def test_defaults(self) -> None:
        config = BuilderConfig(str(self.env_file))
        self.assertEqual(config.window_title, "Dynamic Form")
        self.assertEqual((config.window_width, config.window_height), (1200, 800))
        self.assertEqual(config.log_level, "INFO")

    def test_values_from_env_file(self) -> None:
        self.env_file.write_text(
            "FORM_BUILDER_TITLE=Survey\nFORM_BUILDER_WIDTH=900\nFORM_BUILDER_LOG_LEVEL=debug\n"
        )
        config = BuilderConfig(str(self.env_file))
        self.assertEqual(config.window_title, "Survey")
        self.assertEqual(config.window_width, 900)
        self.assertEqual(config.log_level, "DEBUG")

    def test_environment_wins_over_env_file(self) -> None:
        self.env_file.write_text("FORM_BUILDER_TITLE=From file\n")
        os.environ["FORM_BUILDER_TITLE"] = "From env"
        self.assertEqual(BuilderConfig(str(self.env_file)).window_title, "From env")

    def test_invalid_values_fall_back(self) -> None:
        self.env_file.write_text(
            "FORM_BUILDER_WIDTH=wide\nFORM_BUILDER_HEIGHT=-5\nFORM_BUILDER_LOG_LEVEL=LOUD\n"
        )
        with self.assertLogs("util.builder_config", level="WARNING") as logs:
            config = BuilderConfig(str(self.env_file))
        self.assertEqual(config.window_width, 1200)
        self.assertEqual(config.window_height, 800)
        self.assertEqual(config.log_level, "INFO")
        self.assertEqual(len(logs.records), 3)


if __name__ == "__main__":
    unittest.main()
