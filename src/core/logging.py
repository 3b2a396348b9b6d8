"""Logging setup: one stdout handler on the root logger, quiet HTTP libraries."""

import logging
import sys
from typing import Optional

from src.core.config import Settings, settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_level(config: Settings) -> int:
    """DEBUG when the app runs in debug mode, else the configured level name."""
    if config.debug:
        return logging.DEBUG
    return getattr(logging, config.log_level.upper())


def setup_logging(config: Optional[Settings] = None) -> None:
    """Configure root logging for the application."""
    config = config or settings

    logging.basicConfig(
        level=resolve_log_level(config),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Request lines from every scrape and sendMessage call
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
