# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
HTTP Command Handlers

- CommandHandlers: one handler per gateway path (index, status, next,
  previous, play, stop, goto)
"""

from mpdweb.routes.handlers.command_handlers import CommandHandlers

__all__ = ["CommandHandlers"]
