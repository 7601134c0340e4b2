# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Logging for series resolution.

Everything here uses the standard library's `logging` module. Library code
only ever asks for a logger with `get_series_logger`; configuring handlers
and levels is left to the application, which can use `set_verbosity` to get
the same layout as the rest of the stack.
"""

import logging
import logging.config
import sys

DEFAULT_LOG_FORMAT = "%(name)s: [%(levelname)s] %(message)s"
DEFAULT_LOG_VERBOSITY = 2

# Map verbosity numbers to `logging` levels.
DEFAULT_LOGGING_VERBOSITY_LEVELS = {
    # verbosity: level
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
}


class SeriesLogger(logging.getLoggerClass()):
    """A Logger class that doesn't allow you to call exception()."""

    def exception(self, *args, **kwargs):
        raise NotImplementedError(
            "Don't log exceptions to the series logger; raise them instead"
        )


def get_series_logger(tag=None):
    """Return a logger for series resolution.

    :param tag: Appended to "hostseries" in the form "hostseries.<tag>" to
        name the logger. If None, the logger is simply "hostseries".
    """
    if tag is None:
        logger_name = "hostseries"
    else:
        logger_name = "hostseries.%s" % tag

    serieslog = logging.getLogger(logger_name)
    # Swap the class so every logger handed out here is a SeriesLogger,
    # leaving all other loggers to the logging package.
    serieslog.__class__ = SeriesLogger

    return serieslog


def get_logging_level(verbosity: int) -> int:
    """Return the `logging` level corresponding to `verbosity`.

    The level returned should be treated as *inclusive*.

    :param verbosity: 0, 1, 2, or 3, meaning very quiet logging, quiet
        logging, normal logging, and verbose/debug logging. Values outside
        that range are clamped.
    """
    levels = DEFAULT_LOGGING_VERBOSITY_LEVELS
    v_min, v_max = min(levels), max(levels)
    if verbosity > v_max:
        return levels[v_max]
    elif verbosity < v_min:
        return levels[v_min]
    else:
        return levels[verbosity]


def get_logging_config(verbosity: int):
    """Return a configuration dict usable with `logging.config.dictConfig`.

    :param verbosity: See `get_logging_level`.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "stdout": {
                "format": DEFAULT_LOG_FORMAT,
                "datefmt": "",  # To prevent using the default format
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "stream": sys.__stdout__,
                "formatter": "stdout",
            },
        },
        "loggers": {
            "hostseries": {
                "level": get_logging_level(verbosity),
                "handlers": ["stdout"],
                "propagate": False,
            },
        },
    }


def set_verbosity(verbosity: int = DEFAULT_LOG_VERBOSITY):
    """Reconfigure verbosity of the `hostseries` loggers."""
    logging.config.dictConfig(get_logging_config(verbosity))
