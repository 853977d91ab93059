"""
Logging utilities for gibbons.

Library modules log through ``logging.getLogger(__name__)`` and only emit
DEBUG records (rejected compositions, replication, registry changes).
``setup_logging`` attaches console and file handlers to the ``gibbons``
logger so those records become visible.

Example:
    >>> from gibbons.core import edge, seq, vertex
    >>> from gibbons.utils import setup_logging
    >>> import logging
    >>>
    >>> logger = setup_logging(level=logging.DEBUG)
    >>> seq(edge(2), vertex(3, 1, 'tanh'))
    2026-01-01 12:00:00 | DEBUG    | seq rejected: 2 exits cannot feed 3 entries
"""

import os
import sys
import logging
from typing import Optional
from datetime import datetime


LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """
    Colored console formatter.

    Adds colors to log levels for better readability.
    """

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # Color a copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname:<8}{self.RESET}"

        return super().format(record)


def setup_logging(
    name: str = 'gibbons',
    log_dir: Optional[str] = None,
    level: int = logging.INFO,
    console: bool = True,
    file: bool = True,
    colored: bool = True
) -> logging.Logger:
    """
    Setup logging configuration.

    Args:
        name: Logger name (``gibbons`` covers every library module)
        log_dir: Directory for log files
        level: Logging level
        console: Enable console logging
        file: Enable file logging (only if log_dir is given)
        colored: Use colored console output

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        if colored:
            console_formatter = ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        else:
            console_formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    if file and log_dir:
        os.makedirs(log_dir, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file = os.path.join(log_dir, f'{name}_{timestamp}.log')

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")

    return logger
