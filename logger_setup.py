# logger_setup.py

import logging
import os

import constants


def setup_logging(level="INFO", log_file=None, console=True):
    """
    Sets up logging for the application.

    Configures a dedicated application logger (not the root logger) so that
    log lines from pygame or other libraries are left alone. The curses
    front end owns the terminal, so it calls this with console=False and
    relies on the file handler only.

    Returns the configured logger.
    """
    logger = logging.getLogger(constants.LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    formatter = logging.Formatter(constants.LOG_FORMAT)

    # Clear existing handlers to avoid duplication if this function is called again
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug(f"Logging initialized at level {level}. Log file: {log_file}")
    return logger
