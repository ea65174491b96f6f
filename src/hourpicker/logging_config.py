"""
Logging Configuration
=====================
All modules log through `logging.getLogger(__name__)`, so every record ends
up under the `LOGGER_NAME` ("hourpicker") namespace. The library itself never
attaches handlers; hosts that want the sync transitions on screen (e.g. the
demo) call `setup_logging()` once at startup.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "hourpicker"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach stdout (and optionally file) handlers to the `LOGGER_NAME` logger.

    Calling it again replaces the previous handlers, so a restarted demo or a
    test never prints each record twice.

    Args:
        level: Level for the logger and its handlers. DEBUG shows every
            external/selector transition of the sync controller.
        log_file: Optional path; the file is truncated on setup.

    Returns:
        The configured `hourpicker` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized for '{LOGGER_NAME}' at {logging.getLevelName(level)}.")
    return logger
