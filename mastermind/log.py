"""
Logger setup for the console game.
Only a stderr handler: the game writes no files.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(module)s - %(message)s"
LOGGER_NAME = "mastermind"

# The one handler this module owns; other handlers on the logger are left alone
_console_handler = None


def setup_logger(level="WARNING") -> logging.Logger:
    """
    Configures the package logger with a single console handler.
    Calling it again only updates the level.
    Args:
        level (str | int): logging level name or number. Default is WARNING so
            log lines do not interleave with the game text.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    global _console_handler
    if _console_handler is None:
        _console_handler = logging.StreamHandler()
        _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _console_handler not in logger.handlers:
        logger.addHandler(_console_handler)
    _console_handler.setLevel(level)

    logger.propagate = False
    logger.debug("Logger initialized at %s", logging.getLevelName(logger.level))
    return logger
