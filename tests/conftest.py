# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Shared pytest fixtures.

The control session is a Mock implementing ControlSessionProtocol; every
command it receives is recorded in ``mock_calls`` so tests can assert on
the exact command order sent to the daemon.
"""

import pytest
from unittest.mock import Mock

from mpdweb.infrastructure.mpd.session_invoker import SessionInvoker
from mpdweb.infrastructure.rendering.template_registry import TemplateRegistry


PLAYING_STATUS = {"state": "play", "volume": "80", "song": "1", "playlistlength": "3"}
STOPPED_STATUS = {"state": "stop", "volume": "80", "playlistlength": "3"}

CURRENT_SONG = {
    "file": "music/foo/bar.flac",
    "artist": "Foo",
    "title": "Bar",
    "album": "Baz",
    "pos": "1",
}

PLAYLIST = [
    {"file": "music/foo/intro.flac", "artist": "Foo", "title": "Intro", "pos": "0"},
    {"file": "music/foo/bar.flac", "artist": "Foo", "title": "Bar", "pos": "1"},
    {"file": "music/untagged.mp3", "pos": "2"},
]


@pytest.fixture
def mock_session():
    """Create a mock control session talking to a playing daemon."""
    session = Mock()
    session.status = Mock(return_value=dict(PLAYING_STATUS))
    session.current_song = Mock(return_value=dict(CURRENT_SONG))
    session.playlist_info = Mock(return_value=[dict(entry) for entry in PLAYLIST])
    session.play = Mock(return_value=None)
    session.next = Mock(return_value=None)
    session.previous = Mock(return_value=None)
    session.stop = Mock(return_value=None)
    session.close = Mock(return_value=None)
    return session


@pytest.fixture
def mock_session_factory(mock_session):
    """Create a mock session factory handing out mock_session."""
    factory = Mock()
    factory.open = Mock(return_value=mock_session)
    return factory


@pytest.fixture
def invoker(mock_session_factory):
    """Create a SessionInvoker over the mock session factory."""
    return SessionInvoker(mock_session_factory)


@pytest.fixture(scope="session")
def templates():
    """Load the packaged templates once for the whole run."""
    return TemplateRegistry()


@pytest.fixture
def sent_commands(mock_session):
    """Return a callable listing the (command, args) sent to mock_session, in order."""
    def commands():
        return [(name, args) for name, args, _kwargs in mock_session.mock_calls if name != "close"]
    return commands
