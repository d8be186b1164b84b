# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
View Models (Domain Layer).

Rendering-ready structures built once per request from raw daemon data.
They are frozen: templates read them, nothing writes them.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PlaylistDisplayEntry:
    """
    One queue entry as shown on the index page.

    Attributes:
        position: Queue position as reported by the daemon
        name: "<artist> <title>", or the file path when either tag is missing
    """
    position: str
    name: str


@dataclass(frozen=True)
class IndexViewModel:
    """
    Data behind the index page.

    Track fields are only filled while the daemon is playing, so a stopped or
    paused daemon never shows the last played song.
    """
    playing: bool = False
    populated: bool = False
    state: str = ""
    artist: str = ""
    title: str = ""
    album: str = ""
    file: str = ""
    playlist: Tuple[PlaylistDisplayEntry, ...] = ()
    refresh_seconds: int = 3


@dataclass(frozen=True)
class StatusViewModel:
    """Raw daemon status as (key, value) pairs sorted by key."""
    data: Tuple[Tuple[str, str], ...] = ()
