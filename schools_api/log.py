# schools_api/log.py

import logging
import sys

LOGGER_NAME = "schools_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure and return the application logger. Safe to call more than once:
    the stdout handler is only attached the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
