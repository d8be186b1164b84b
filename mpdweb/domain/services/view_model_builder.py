# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
View Model Builder (Domain Layer).

Pure functions turning daemon attribute mappings into view-models. Missing
keys read as the empty string.
"""

from typing import Iterable, Mapping, Optional

from mpdweb.domain.models.view_models import (
    IndexViewModel,
    PlaylistDisplayEntry,
    StatusViewModel,
)

PLAYING_STATE = "play"


def playlist_entry_name(entry: Mapping[str, str]) -> str:
    """Label a queue entry with "<artist> <title>", falling back to its file path."""
    artist = entry.get("artist", "")
    title = entry.get("title", "")
    if artist and title:
        return f"{artist} {title}"
    return entry.get("file", "")


def build_playlist(playlist: Iterable[Mapping[str, str]]) -> tuple:
    """Convert raw queue entries to display entries, keeping daemon order."""
    return tuple(
        PlaylistDisplayEntry(position=entry.get("pos", ""), name=playlist_entry_name(entry))
        for entry in playlist
    )


def build_index_view_model(
    status: Mapping[str, str],
    song: Optional[Mapping[str, str]],
    playlist: Iterable[Mapping[str, str]] = (),
    refresh_seconds: int = 3,
) -> IndexViewModel:
    """
    Build the index page view-model.

    Args:
        status: Daemon status attributes
        song: Current song attributes (ignored unless playing). None when
            the song could not be read; the track fields then keep their
            not-playing defaults.
        playlist: Queue entries, shown whatever the playback state
        refresh_seconds: Page auto-refresh interval

    Returns:
        IndexViewModel
    """
    state = status.get("state", "")
    entries = build_playlist(playlist)

    if state != PLAYING_STATE or song is None:
        return IndexViewModel(state=state, playlist=entries, refresh_seconds=refresh_seconds)

    artist = song.get("artist", "")
    title = song.get("title", "")
    return IndexViewModel(
        playing=True,
        populated=bool(artist) and bool(title),
        state=state,
        artist=artist,
        title=title,
        album=song.get("album", ""),
        file=song.get("file", ""),
        playlist=entries,
        refresh_seconds=refresh_seconds,
    )


def build_status_view_model(status: Mapping[str, str]) -> StatusViewModel:
    return StatusViewModel(data=tuple(sorted(status.items())))
