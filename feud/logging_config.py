"""Centralized logging configuration for the feud board."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
FILE_DATEFMT = '%Y-%m-%d %H:%M:%S'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the ``feud`` logger and its children.

    What gets logged:
        - feud.round: reveals and points at INFO, misses with lives left,
          lives exhaustion, awards and level changes; unknown level ids
          at WARNING; ignored guesses and awards at DEBUG
        - feud.catalog: catalog files loaded
        - feud.utils: JSON load failures at ERROR before re-raising

    The console gets level and message only, on stderr so the board on
    stdout stays readable. Log files add timestamps and source lines.

    Args:
        log_dir: Directory for log files (default: ./logs)
        level: Logging level (default: INFO)
        log_to_file: Whether to log to file (default: True)
        log_to_console: Whether to log to console (default: True)

    Returns:
        Configured logger instance

    Example:
        from feud.logging_config import setup_logging
        logger = setup_logging(log_to_file=False)
        logger.info("Board ready")
    """
    logger = logging.getLogger('feud')
    logger.setLevel(level)
    logger.handlers = []

    if log_to_file:
        log_file = session_log_path(log_dir or Path('logs'))
        logger.addHandler(_handler(logging.FileHandler(log_file), level, FILE_FORMAT, FILE_DATEFMT))

    if log_to_console:
        logger.addHandler(_handler(logging.StreamHandler(sys.stderr), level, CONSOLE_FORMAT))

    return logger


def session_log_path(log_dir: Path) -> Path:
    """Create ``log_dir`` if needed and return a per-session log file path."""
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f'feud_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'


def _handler(
    handler: logging.Handler, level: int, fmt: str, datefmt: Optional[str] = None
) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler
