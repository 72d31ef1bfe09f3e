"""
Logging Configuration
Wires the 'nullspace_viz' logger to stdout and, optionally, a file.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the package logger. Safe to call more than once.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path; the file is truncated on each run.
    """
    logger = logging.getLogger("nullspace_viz")
    logger.setLevel(level)

    # Drops the library NullHandler too; this is now an application.
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.addHandler(_handler(logging.StreamHandler(sys.stdout), level))
    if log_file:
        logger.addHandler(_handler(logging.FileHandler(log_file, mode='w', encoding='utf-8'), level))

    # A --snapshot run at the default level stays silent apart from the result.
    logger.debug("Logging initialized (level=%s, file=%s)", logging.getLevelName(level), log_file)
