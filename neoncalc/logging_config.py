"""
Logging Configuration
Console (and optional file) output for the ``neoncalc`` package logger.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "neoncalc"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    (Re)configure the package logger.

    Streamlit re-executes ``app.py`` on every interaction, so this runs once
    per rerun. Handlers from the previous call are closed before new ones are
    attached; a log file is therefore held open by exactly one handler.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path; records are appended to it.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    first_setup = not logger.handlers
    _drop_handlers(logger)
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if first_setup:
        logger.info("Logging initialized.")
