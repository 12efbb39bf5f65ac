"""Logging utilities for hamember.

Usage:
    from hamember.utils.logger import logger
    logger.info("message")

Log level and log directory are controlled by environment variables:
    HAMEMBER_LOG=DEBUG
    HAMEMBER_LOG_DIR=~/.hamember/logs
"""

from __future__ import annotations

import logging
import os
import sys
from functools import lru_cache
from pathlib import Path

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
)


def _get_log_settings() -> tuple[str, str]:
    """Get log settings, trying centralized config first, falling back to env vars.

    Returns:
        Tuple of (log_level, log_dir)
    """
    try:
        from hamember.config import get_settings

        settings = get_settings()
        return settings.logging.log, settings.storage.log_dir
    except Exception:
        # Fallback to raw env vars if settings can't be loaded
        # (e.g., a malformed .env during early init)
        return (
            os.getenv("HAMEMBER_LOG", "INFO"),
            os.getenv("HAMEMBER_LOG_DIR", "~/.hamember/logs"),
        )


@lru_cache(maxsize=None)
def get_logger() -> logging.Logger:
    """Returns a configured logger for hamember.

    Log level is set by HAMEMBER_LOG env var (default INFO).
    """
    log_level_str, log_dir_str = _get_log_settings()

    log_level = getattr(logging, log_level_str.strip().upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    logger = logging.getLogger("hamember")

    # Add file handler for startup diagnostics
    try:
        log_dir = Path(log_dir_str).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)

        proc_name = os.path.basename(sys.argv[0])
        if "hamember-resolve" in proc_name:
            filename = "hamember-resolve.log"
        else:
            filename = "hamember.log"

        file_handler = logging.FileHandler(log_dir / filename)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
    except OSError:
        pass

    return logger


logger = get_logger()
