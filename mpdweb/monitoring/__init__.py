# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Monitoring Package

Provides:
- get_logger: module loggers for the whole gateway
- setup_logging: console handler installation at process start
"""

import sys
from typing import Union

import colorama

from mpdweb.monitoring.logging.log_colored_formatter import ColoredLogFormatter

# ``logging`` in this namespace is the subpackage, not the standard library.
from logging import INFO, Logger, StreamHandler, getLogger

__all__ = ["get_logger", "setup_logging"]


def get_logger(name: str) -> Logger:
    """Return the logger for a module."""
    return getLogger(name)


def setup_logging(level: Union[int, str] = INFO) -> Logger:
    """
    Install the colored console handler on the root logger.

    Calling it again replaces the previously installed handler, so the
    bootstrap and tests can both call it safely.

    Args:
        level: Root log level, as a number or a level name

    Returns:
        The configured root logger
    """
    colorama.just_fix_windows_console()

    root = getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_mpdweb_handler", False):
            root.removeHandler(handler)

    handler = StreamHandler(sys.stderr)
    handler.setFormatter(ColoredLogFormatter())
    handler._mpdweb_handler = True
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    return root
