# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Control Session Protocol (Domain Layer).

Defines what control actions and handlers need from an open connection to
the music daemon, so the domain layer stays independent of the MPD client
library.

Attribute mappings use the lowercased protocol keys ("state", "artist",
"title", "album", "file", "pos", ...) with every value a single string.
"""

from typing import Dict, List, Protocol

Attributes = Dict[str, str]


class ControlSessionProtocol(Protocol):
    """
    One open control session with the daemon.

    Every command raises DaemonCommandError when the daemon rejects it and
    DaemonConnectionError when the connection is lost.
    """

    def status(self) -> Attributes:
        """Return the daemon status ("state", "volume", "song", ...)."""
        ...

    def current_song(self) -> Attributes:
        """Return the tags of the current song, empty when there is none."""
        ...

    def playlist_info(self, start: int = -1, end: int = -1) -> List[Attributes]:
        """
        Return queue entries in queue order.

        Args:
            start: First position, -1 for the whole queue
            end: Position after the last one, -1 for "until the end"
        """
        ...

    def play(self, position: int = -1) -> None:
        """Start playback at a queue position, -1 to resume at the current cursor."""
        ...

    def next(self) -> None:
        """Skip to the next queue entry."""
        ...

    def previous(self) -> None:
        """Go back to the previous queue entry."""
        ...

    def stop(self) -> None:
        """Stop playback."""
        ...

    def close(self) -> None:
        """Release the connection. Idempotent, never raises."""
        ...


class ControlSessionFactory(Protocol):
    """Opens control sessions against one fixed daemon address."""

    def open(self) -> ControlSessionProtocol:
        """
        Connect to the daemon.

        Raises:
            DaemonConnectionError: If the daemon cannot be reached
        """
        ...
