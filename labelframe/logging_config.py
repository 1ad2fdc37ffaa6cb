"""
Logging Configuration
Sets up the package logger for labelframe.
"""
import logging
import sys
from typing import Optional, Union

from labelframe.config import LOG_LEVEL


def setup_logging(level: Optional[Union[int, str]] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'labelframe' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG"). Defaults to
            LABELFRAME_LOG_LEVEL from the environment.
        log_file: Optional path to save logs to a file.
    """
    if level is None:
        level = LOG_LEVEL

    logger = logging.getLogger("labelframe")
    logger.setLevel(level)

    # Re-init must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
