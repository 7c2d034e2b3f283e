"""Shared logger for the whole package."""
import logging
import os
import sys

LOG_LEVEL_ENV: str = "RPN_CALC_LOG_LEVEL"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_logger(name: str = "rpn_calc") -> logging.Logger:
    """
    Create the package logger, writing to stderr.

    The level is read from the ``RPN_CALC_LOG_LEVEL`` environment variable
    and falls back to INFO when the variable is unset or unknown.

    :param str name: Logger name

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(name)

    level_name: str = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    log.setLevel(level)

    # Avoid stacking handlers when the module is reloaded
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)

    return log


logger: logging.Logger = build_logger()
