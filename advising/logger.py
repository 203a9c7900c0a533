"""
Logging setup for the advising assistant.

Every module logs through ``logging.getLogger(__name__)``; this configures the
shared ``advising`` parent logger once with a console handler and, when asked,
a rotating file handler.
"""

import logging
from logging.handlers import RotatingFileHandler

from advising.config import LOG_FILE, LOG_LEVEL

LOGGER_NAME = "advising"
FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


def setup_logging(log_level=None, log_file=None, stream=None):
    """
    Configure the ``advising`` logger.

    Args:
        log_level: level name or number (default: ADVISING_LOG_LEVEL or INFO)
        log_file: optional path for a rotating log file (default: ADVISING_LOG_FILE)
        stream: console stream (default: stderr)

    Returns:
        logging.Logger: the configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level or LOG_LEVEL)

    # Prevent adding handlers multiple times
    if logger.handlers:
        return logger

    console = logging.StreamHandler(stream)
    console.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(console)

    log_file = log_file or LOG_FILE
    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    return logger
