# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""Colors and symbols used by the console log formatter."""

from colorama import Fore, Style


class ColorScheme:
    """Per-level colors and symbols."""

    COLORS = {
        "DEBUG": Fore.BLUE,
        "INFO": Fore.WHITE,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    SYMBOLS = {
        "DEBUG": "·",
        "INFO": "•",
        "WARNING": "⚠",
        "ERROR": "✖",
        "CRITICAL": "✖",
    }

    COMPONENT = Fore.CYAN
    EXTRA = Style.DIM

    @classmethod
    def color_for(cls, level_name: str) -> str:
        return cls.COLORS.get(level_name, "")

    @classmethod
    def symbol_for(cls, level_name: str) -> str:
        return cls.SYMBOLS.get(level_name, " ")
