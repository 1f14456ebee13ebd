"""Logging setup for the API process."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stderr handler on the root logger.

    Args:
        level: Logging level name (e.g. "INFO", "DEBUG")
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    # Vendor SDKs log every request through httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
