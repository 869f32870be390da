"""Centralized logging configuration for the tool."""

import logging
import sys

_LOGGER_NAME = "tokenmint"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Send ``tokenmint`` log records to stderr at ``level``.

    stdout stays reserved for the rendered mint plan or balance report.
    Unknown level names fall back to INFO. Calling this again replaces the
    previous handler, which matters when stderr is swapped (e.g. under a
    CLI test runner).
    """
    log_format = "%(asctime)s | %(levelname)-8s | %(name)-40s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Prevent duplicate logs if called multiple times
    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a tokenmint module.

    Module names already under ``tokenmint.`` are used unchanged; anything
    else is nested below the package logger so ``setup_logging`` applies.
    """
    if name == _LOGGER_NAME or name.startswith(f"{_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")
