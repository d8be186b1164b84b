# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Domain actions package.

Contains the control actions run against the music daemon.
"""

from .control_actions import (
    ControlAction,
    PlayAction,
    StopAction,
    GotoAction,
    NextTrackAction,
    PreviousTrackAction,
)

__all__ = [
    "ControlAction",
    "PlayAction",
    "StopAction",
    "GotoAction",
    "NextTrackAction",
    "PreviousTrackAction",
]
