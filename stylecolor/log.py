#
# Copyright (C) 2026 Stylecolor Developers — LGPL-3.0-or-later
#
import logging

import colorlog
from wrapt import synchronized


# Trace log level
LOG_TRACE = 5

logging.addLevelName(LOG_TRACE, 'TRACE')


class Log(object):
    """
    Logging module

    Call get() to get a cached instance of a specific logger.
    Colored output can optionally be enabled.
    """

    _LOGGERS = {}
    _use_color = False
    _level = None


    @classmethod
    def get(cls, tag):
        """
        Get the global logger instance for the given tag

        :param tag: the log tag
        :return: the logger instance
        """
        with synchronized(cls):
            if tag not in cls._LOGGERS:
                logger = logging.getLogger(tag)
                logger.addHandler(cls._create_handler())
                if cls._level is not None:
                    logger.setLevel(cls._level)

                cls._LOGGERS[tag] = logger

            return cls._LOGGERS[tag]


    @classmethod
    def _create_handler(cls) -> logging.Handler:
        if cls._use_color:
            handler = colorlog.StreamHandler()
            handler.setFormatter(colorlog.ColoredFormatter( \
                ' %(log_color)s%(name)s/%(levelname)-8s%(reset)s |'
                ' %(log_color)s%(message)s%(reset)s'))
        else:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter( \
                ' %(name)s/%(levelname)-8s | %(message)s'))
        return handler


    @classmethod
    def enable_color(cls, enable: bool):
        """
        Enable colored output for loggers. Loggers which were
        already created get their handler replaced.
        """
        with synchronized(cls):
            if cls._use_color == enable:
                return
            cls._use_color = enable

            for logger in cls._LOGGERS.values():
                for handler in list(logger.handlers):
                    logger.removeHandler(handler)
                logger.addHandler(cls._create_handler())


    @classmethod
    def set_level(cls, level):
        """
        Set the level of every logger created through get()

        :param level: a logging level, by number or by name
        """
        with synchronized(cls):
            cls._level = level
            for logger in cls._LOGGERS.values():
                logger.setLevel(level)
