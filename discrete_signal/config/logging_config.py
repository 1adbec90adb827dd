"""
Logging Configuration
=====================

Root logger setup for the command-line entry point (main.py).
Library modules only create module loggers; handlers are installed here.
"""

import os
import logging
from typing import Optional, Tuple


def setup_logging(
    log_file: Optional[str] = None,
    level: int = logging.INFO
) -> Tuple[logging.Logger, Optional[str]]:
    """
    Configure the root logger for the command-line entry points.

    The console shows bare messages at `level`; when log_file is given, a
    file handler additionally records everything from DEBUG upwards with
    timestamps.

    Returns:
        (root logger, log file path or None)
    """
    log_format = '%(asctime)s - %(levelname)s - %(message)s'

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if log_file else level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    if log_file is not None:
        log_directory = os.path.dirname(log_file)
        if log_directory:
            os.makedirs(log_directory, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    return logger, log_file
