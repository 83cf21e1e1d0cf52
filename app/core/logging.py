"""Logging configuration."""
import logging
import sys
from typing import Optional

from app.core.config import settings

# Client libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure application logging.

    Args:
        level: Level name overriding ``settings.log_level``
    """
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, None)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logging.basicConfig(
        level=log_level,
        format=settings.log_format,
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
