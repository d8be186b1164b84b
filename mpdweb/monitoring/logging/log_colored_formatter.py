# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Colored Log Formatter.

Formats records as a single console line:

    • 12:00:01 [session_invoker] Connected to mpd at localhost:6600 (path=/next)

Component names are shortened to their last dotted segment and any
``extra={...}`` values passed to the logger are appended in parentheses.
"""

import logging
from typing import Any, Dict, Optional

from colorama import Style

from mpdweb.monitoring.logging.log_color_scheme import ColorScheme

# Attributes every LogRecord carries; anything else came from ``extra``.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}


class ColoredLogFormatter(logging.Formatter):
    """Console formatter with per-level colors."""

    def __init__(self, datefmt: str = "%H:%M:%S"):
        super().__init__(datefmt=datefmt)

    @staticmethod
    def _simplify_component_name(name: str) -> str:
        return name.rsplit(".", 1)[-1]

    @staticmethod
    def format_extra(extra: Optional[Dict[str, Any]]) -> str:
        if not extra:
            return ""
        parts = ", ".join(f"{key}={value}" for key, value in extra.items())
        return f" ({parts})"

    def _extract_extra(self, record: logging.LogRecord) -> Dict[str, Any]:
        return {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        }

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        color = ColorScheme.color_for(level)
        component = self._simplify_component_name(record.name)

        line = (
            f"{color}{ColorScheme.symbol_for(level)} "
            f"{self.formatTime(record, self.datefmt)} "
            f"{ColorScheme.COMPONENT}[{component}]{Style.RESET_ALL}{color} "
            f"{record.getMessage()}"
            f"{ColorScheme.EXTRA}{self.format_extra(self._extract_extra(record))}"
            f"{Style.RESET_ALL}"
        )

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line
