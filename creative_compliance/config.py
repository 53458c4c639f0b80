"""
config.py — Environment configuration for the compliance engine.

Reads tunables from environment variables (and a local .env file).
The font-size ceiling is a hard product rule and is not configurable.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path


# Load .env file if it exists
def _load_dotenv():
    env_path = Path(__file__).parent.parent / ".env"
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip()
                    if key and value and key not in os.environ:
                        os.environ[key] = value

_load_dotenv()


class Settings:
    """Engine settings loaded from environment variables."""

    def __init__(self):
        # Formats
        self.default_format: str = os.environ.get("CREATIVE_DEFAULT_FORMAT", "instagram-feed")
        self.background_color: str = os.environ.get("CREATIVE_BACKGROUND_COLOR", "#FFFFFF")

        # Center-stack layout
        self.stack_margin: float = float(os.environ.get("CREATIVE_STACK_MARGIN", "40"))
        self.stack_spacing: float = float(os.environ.get("CREATIVE_STACK_SPACING", "24"))

        # Contrast repair search
        self.contrast_step: int = int(os.environ.get("CREATIVE_CONTRAST_STEP", "10"))
        self.contrast_max_iterations: int = int(os.environ.get("CREATIVE_CONTRAST_MAX_ITERATIONS", "50"))

        # Logging
        self.log_level: str = os.environ.get("LOG_LEVEL", "INFO").upper()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Args:
        level: Log level name; defaults to the LOG_LEVEL setting.

    Returns:
        The configured ``creative_compliance`` logger.
    """
    logger = logging.getLogger("creative_compliance")
    logger.setLevel(level or get_settings().log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
