"""
Logging Setup

Centralised logging configuration:
- One format for every module logger
- stdout by default, optional rotating log file
- Level from argument or config (e.g. SHOP_LOG_LEVEL)
"""
from __future__ import annotations
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> None:
    """Configure application-wide logging.

    Args:
        level: Logging level, as a number or a name such as "DEBUG".
        log_file: Optional path to a log file; enables file logging.
        max_bytes: Maximum size per log file before rotation.
        backup_count: Number of rotated files to keep.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [stdout_handler]

    if log_file:
        log_file_path = Path(log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )

    logger = logging.getLogger(__name__)
    if log_file:
        logger.info("Logging configured: file=%s, level=%s", log_file, logging.getLevelName(level))
    else:
        logger.info("Logging configured: stdout, level=%s", logging.getLevelName(level))
