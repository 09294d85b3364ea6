"""
Logging Configuration

All package loggers hang off the "storefront" logger and write to stderr,
so CLI reports on stdout stay pipeable. HTTP connection chatter from
urllib3 (under requests) is shown only in verbose mode.
"""

import logging
import sys

PACKAGE_LOGGER = "storefront"
TRANSPORT_LOGGERS = ("urllib3",)

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
VERBOSE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _level_for(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        verbose: DEBUG level, timestamps, and urllib3 connection logs
        quiet: WARNING level (ignored when verbose is set)

    Returns:
        The configured "storefront" logger
    """
    level = _level_for(verbose, quiet)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(VERBOSE_LOG_FORMAT if verbose else LOG_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    # Repeated calls replace the handler
    logger.handlers.clear()
    logger.addHandler(handler)

    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)

    return logger
