"""Logging setup for abcbank."""
import logging
import os

from config.settings import Settings

LOG_FORMAT = '%(asctime)s:%(levelname)s:%(name)s: %(message)s'


def configure_logging(settings: Settings) -> logging.Logger:
    """Send the ``abcbank`` logger's records to the configured log file.

    Calling this again with the same log file does not add a second handler.
    """
    logger = logging.getLogger('abcbank')
    logger.setLevel(settings.log_level)

    path = os.path.abspath(settings.log_file)
    for existing in logger.handlers:
        if isinstance(existing, logging.FileHandler) and existing.baseFilename == path:
            return logger

    handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
