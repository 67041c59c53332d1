"""Shared logger for the expr_tree package."""
import logging
import os
import sys

# Environment variable overriding the default log level
LOG_LEVEL_ENV: str = "EXPR_TREE_LOG_LEVEL"
LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def get_logger(name: str = "expr_tree") -> logging.Logger:
    """
    Return the package logger, configuring its handler on first use.

    :param str name: Logger name

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
        log.setLevel(os.environ.get(LOG_LEVEL_ENV, "INFO").upper())
    return log


logger: logging.Logger = get_logger()
