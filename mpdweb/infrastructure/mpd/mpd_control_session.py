# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
MPD Control Session (Infrastructure Layer).

Adapts python-mpd2's synchronous MPDClient to ControlSessionProtocol and
translates library failures into the gateway exception hierarchy:

- mpd.CommandError (daemon ACK) and other protocol errors -> DaemonCommandError
- mpd.ConnectionError and socket errors -> DaemonConnectionError
- replies that are not valid UTF-8 -> DaemonCommandError
"""

import functools
from typing import Any, Callable, Dict, List, Optional, TypeVar

from mpd import CommandError, ConnectionError as MPDConnectionError, MPDClient, MPDError

from mpdweb.domain.protocols.control_session_protocol import Attributes
from mpdweb.monitoring import get_logger
from mpdweb.monitoring.core.exceptions import DaemonCommandError, DaemonConnectionError

logger = get_logger(__name__)

T = TypeVar("T")

MULTI_VALUE_SEPARATOR = ", "


def _normalize(attrs: Dict[str, Any]) -> Attributes:
    """Flatten repeated tags (returned as lists) into single strings."""
    return {
        key: MULTI_VALUE_SEPARATOR.join(value) if isinstance(value, list) else str(value)
        for key, value in attrs.items()
    }


def _translate_errors(command: str) -> Callable:
    """Decorator mapping python-mpd2 and socket failures of one command."""
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except CommandError as e:
                raise DaemonCommandError(f"mpd command '{command}' failed: {e}") from e
            except (MPDConnectionError, OSError) as e:
                raise DaemonConnectionError(f"lost connection to mpd during '{command}': {e}") from e
            except UnicodeDecodeError as e:
                raise DaemonCommandError(f"mpd sent an undecodable reply to '{command}': {e}") from e
            except MPDError as e:
                raise DaemonCommandError(f"mpd protocol error during '{command}': {e}") from e
        return wrapper
    return decorator


class MPDControlSession:
    """One connected MPDClient."""

    def __init__(self, client: MPDClient, address: str):
        self._client = client
        self._address = address
        self._closed = False

    @property
    def address(self) -> str:
        return self._address

    @_translate_errors("status")
    def status(self) -> Attributes:
        return _normalize(self._client.status())

    @_translate_errors("currentsong")
    def current_song(self) -> Attributes:
        return _normalize(self._client.currentsong())

    @_translate_errors("playlistinfo")
    def playlist_info(self, start: int = -1, end: int = -1) -> List[Attributes]:
        if start < 0:
            entries = self._client.playlistinfo()
        elif end < 0:
            entries = self._client.playlistinfo(f"{start}:")
        else:
            entries = self._client.playlistinfo(f"{start}:{end}")
        return [_normalize(entry) for entry in entries]

    @_translate_errors("play")
    def play(self, position: int = -1) -> None:
        if position < 0:
            self._client.play()
        else:
            self._client.play(position)

    @_translate_errors("next")
    def next(self) -> None:
        self._client.next()

    @_translate_errors("previous")
    def previous(self) -> None:
        self._client.previous()

    @_translate_errors("stop")
    def stop(self) -> None:
        self._client.stop()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._client.disconnect()
        except (MPDError, OSError) as e:
            logger.debug(f"Ignoring error while disconnecting from mpd at {self._address}: {e}")


class MPDSessionFactory:
    """
    Opens MPDControlSessions against one daemon address.

    A fresh MPDClient is created for every session; nothing is pooled.
    """

    def __init__(
        self,
        host: str,
        port: int,
        timeout: Optional[float] = None,
        client_class: Callable[[], MPDClient] = MPDClient,
    ):
        """
        Args:
            host: Daemon host name
            port: Daemon TCP port
            timeout: Socket timeout in seconds, None for the transport default
            client_class: MPDClient constructor (replaced in tests)
        """
        self._host = host
        self._port = port
        self._timeout = timeout
        self._client_class = client_class

    @property
    def address(self) -> str:
        return f"{self._host}:{self._port}"

    def open(self) -> MPDControlSession:
        client = self._client_class()
        if self._timeout is not None:
            client.timeout = self._timeout

        try:
            client.connect(self._host, self._port)
        except (MPDError, OSError, UnicodeDecodeError) as e:
            raise DaemonConnectionError(f"failed to connect to mpd at {self.address}: {e}") from e

        logger.debug(f"Connected to mpd {getattr(client, 'mpd_version', '?')} at {self.address}")
        return MPDControlSession(client, self.address)
