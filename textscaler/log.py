#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""
Tagged loggers for textscaler components.

External command lines and their raw output are logged at
LOG_PROTOCOL_TRACE, timer activity at LOG_TRACE.
"""

import logging

import colorlog
from wrapt import synchronized


# Trace log levels
LOG_TRACE = 5
LOG_PROTOCOL_TRACE = 4

logging.addLevelName(LOG_TRACE, "TRACE")
logging.addLevelName(LOG_PROTOCOL_TRACE, "PROTOCOL")

PLAIN_FORMAT = " %(name)s/%(levelname)-8s | %(message)s"
COLOR_FORMAT = (
    " %(log_color)s%(name)s/%(levelname)-8s%(reset)s |"
    " %(log_color)s%(message)s%(reset)s"
)


class Log:
    """
    Logging module

    Call get() to get a cached instance of a specific logger.
    Colored output can optionally be enabled.
    """

    _LOGGERS: dict[str, logging.Logger] = {}
    _use_color = False

    @synchronized
    @classmethod
    def get(cls, tag: str) -> logging.Logger:
        """
        Get the global logger instance for the given tag

        :param tag: the log tag
        :return: the logger instance
        """
        if tag not in cls._LOGGERS:
            if cls._use_color:
                handler = colorlog.StreamHandler()
                handler.setFormatter(colorlog.ColoredFormatter(COLOR_FORMAT))
            else:
                handler = logging.StreamHandler()
                handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

            logger = logging.getLogger(tag)
            logger.addHandler(handler)

            cls._LOGGERS[tag] = logger

        return cls._LOGGERS[tag]

    @classmethod
    def enable_color(cls, enable: bool):
        """
        Enable colored output for loggers. Must be called before
        any loggers are initialized with get()
        """
        cls._use_color = enable

    @classmethod
    def set_verbosity(cls, verbosity: int) -> int:
        """
        Map a count of -d flags to a level and apply it to every
        logger under the textscaler namespace.

        :param verbosity: 0 for warnings, 1 for info, 2 for debug, 3+ for trace
        :return: the level that was applied
        """
        levels = (logging.WARNING, logging.INFO, logging.DEBUG, LOG_TRACE)
        level = levels[min(max(verbosity, 0), len(levels) - 1)]

        logging.getLogger("textscaler").setLevel(level)
        return level
