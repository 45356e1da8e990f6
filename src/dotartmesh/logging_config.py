"""
Logging Configuration
Sets up the package logger for the command line tool.

stdout carries the report, so console logging goes to stderr.
"""
import logging
import sys
from typing import Optional, TextIO

CONSOLE_FORMAT = '%(levelname)s %(name)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configures the logger for the 'dotartmesh' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file. The file always
                  receives DEBUG records with timestamps.
        stream: Console stream, sys.stderr when omitted.
    """
    logger = logging.getLogger("dotartmesh")
    logger.setLevel(logging.DEBUG if log_file else level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized (console level {logging.getLevelName(level)}).")
