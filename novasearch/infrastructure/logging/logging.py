import logging
import sys

from novasearch.core.config import get_settings


def setup_logging() -> None:
    """Configure the root logger from application settings."""
    settings = get_settings()

    root_logger = logging.getLogger()

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    root_logger.addHandler(console_handler)

    root_logger.info("Logging initialised, level: %s", settings.log_level)
