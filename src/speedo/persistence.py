"""Saving profiling reports to the log folder.

Logs go to ``<home>/.speedo/log/YYYYMMDD-HHMMSS.log``. Nothing here runs
unless a caller asks for it; printing a report never writes a log.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from .config import Config
from .exceptions import LogWriteError
from .reporter import Reporter

logger = logging.getLogger(__name__)

LOG_NAME_FORMAT = "%Y%m%d-%H%M%S"


def log_file_name(now: datetime | None = None) -> str:
    """Name of the log file for the given local time (defaults to now)."""
    if now is None:
        now = datetime.now()
    return f"{now.strftime(LOG_NAME_FORMAT)}.log"


def save_log(reporter: Reporter, config: Config, now: datetime | None = None) -> Path:
    """Save the current report of ``reporter`` to the log folder.

    Args:
        reporter: Reporter whose report to save.
        config: Configuration naming the home directory.
        now: Timestamp used for the file name (defaults to now).

    Returns:
        Path of the written log file.

    Raises:
        HomeDirectoryError: If the home directory is not configured.
        LogWriteError: If the folder or file cannot be written.
    """
    folder = config.log_dir
    path = folder / log_file_name(now)

    try:
        folder.mkdir(parents=True, exist_ok=True)
        path.write_text(reporter.format(), encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to save log: {e}")
        raise LogWriteError(str(e), path=str(path)) from e

    logger.info(f"Saved profiling log to {path}")
    return path
