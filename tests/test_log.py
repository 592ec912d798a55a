import logging

import mastermind.log as log
from mastermind.log import LOGGER_NAME, setup_logger


def test_setup_logger_is_idempotent():
    logger = setup_logger("INFO")
    handler = log._console_handler

    again = setup_logger("DEBUG")

    assert again is logger
    assert log._console_handler is handler
    assert logger.handlers.count(handler) == 1
    assert handler.level == logging.DEBUG
    assert again.level == logging.DEBUG
    assert again.propagate is False

def test_setup_logger_leaves_other_handlers_alone():
    logger = logging.getLogger(LOGGER_NAME)
    other = logging.NullHandler()
    other.setLevel(logging.ERROR)
    logger.addHandler(other)
    try:
        setup_logger("DEBUG")

        # someone else's handler does not stop ours from being added
        assert log._console_handler in logger.handlers
        assert other.level == logging.ERROR
    finally:
        logger.removeHandler(other)

def test_module_loggers_inherit_package_handler():
    setup_logger("WARNING")
    child = logging.getLogger(LOGGER_NAME + ".engine")

    assert child.getEffectiveLevel() == logging.WARNING
