import os
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Dynamic Form"
DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 800
DEFAULT_LOG_LEVEL = "INFO"


class BuilderConfig:
    """Settings for the form builder, read from .env and the environment."""

    def __init__(self, env_file: str | None = None):
        # Values already in the environment win over the .env file
        load_dotenv(env_file)

        self.window_title = os.getenv('FORM_BUILDER_TITLE', '').strip() or DEFAULT_TITLE
        self.window_width = _int_setting('FORM_BUILDER_WIDTH', DEFAULT_WIDTH)
        self.window_height = _int_setting('FORM_BUILDER_HEIGHT', DEFAULT_HEIGHT)
        self.log_level = _log_level_setting('FORM_BUILDER_LOG_LEVEL', DEFAULT_LOG_LEVEL)

        logger.debug(
            "Loaded BuilderConfig: title=%r size=%dx%d log_level=%s",
            self.window_title, self.window_width, self.window_height, self.log_level,
        )


def _int_setting(name: str, default: int) -> int:
    raw = os.getenv(name, '').strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {raw!r}, using {default}")
        return default
    if value <= 0:
        logger.warning(f"{name} must be positive, got {value}, using {default}")
        return default
    return value


def _log_level_setting(name: str, default: str) -> str:
    raw = os.getenv(name, '').strip().upper()
    if not raw:
        return default
    if not isinstance(logging.getLevelName(raw), int):
        logger.warning(f"Unknown log level for {name}: {raw!r}, using {default}")
        return default
    return raw
