"""Loguru sink configuration."""

import sys
from pathlib import Path

from loguru import logger

from euro_lottery.config import settings


def setup_logging(level: str | None = None, log_file: Path | None = None) -> None:
    """Replace loguru's default handler with the configured stderr/file sinks.

    The engine itself never calls this; the host application calls it once at
    startup, before using the services.
    """
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    if log_file is None:
        log_file = settings.LOG_FILE

    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(str(log_file), rotation="10 MB", retention="7 days", level=level)
    logger.debug("Logging configured for {} at {}", settings.APP_NAME, level)
