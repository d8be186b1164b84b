# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""Tests for SessionInvoker."""

import pytest
from unittest.mock import Mock

from mpdweb.infrastructure.mpd.session_invoker import SessionInvoker
from mpdweb.monitoring.core.exceptions import DaemonCommandError, DaemonConnectionError


class TestSessionInvoker:
    """Tests for the connect/operate/disconnect lifecycle."""

    def test_returns_operation_result(self, invoker, mock_session, mock_session_factory):
        result = invoker.invoke(lambda session: session.status())

        assert result["state"] == "play"
        mock_session_factory.open.assert_called_once_with()
        mock_session.close.assert_called_once_with()

    def test_operation_called_once_with_open_session(self, invoker, mock_session):
        operation = Mock(return_value="done")

        assert invoker.invoke(operation) == "done"
        operation.assert_called_once_with(mock_session)

    def test_connection_failure_skips_operation(self, mock_session_factory, mock_session):
        mock_session_factory.open.side_effect = DaemonConnectionError("connection refused")
        operation = Mock()

        with pytest.raises(DaemonConnectionError, match="connection refused"):
            SessionInvoker(mock_session_factory).invoke(operation)

        operation.assert_not_called()
        mock_session.close.assert_not_called()

    def test_session_released_when_operation_fails(self, invoker, mock_session):
        def operation(session):
            raise DaemonCommandError("bad song index")

        with pytest.raises(DaemonCommandError, match="bad song index"):
            invoker.invoke(operation)

        mock_session.close.assert_called_once_with()

    def test_session_released_on_unexpected_exception(self, invoker, mock_session):
        def operation(session):
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError, match="bug"):
            invoker.invoke(operation)

        mock_session.close.assert_called_once_with()

    def test_release_failure_does_not_mask_operation_error(self, invoker, mock_session):
        mock_session.close.side_effect = OSError("socket already closed")

        def operation(session):
            raise DaemonCommandError("original failure")

        with pytest.raises(DaemonCommandError, match="original failure"):
            invoker.invoke(operation)

        mock_session.close.assert_called_once_with()

    def test_release_failure_does_not_mask_success(self, invoker, mock_session):
        mock_session.close.side_effect = OSError("socket already closed")

        assert invoker.invoke(lambda session: 42) == 42

    def test_each_invoke_opens_a_new_session(self, invoker, mock_session_factory, mock_session):
        invoker.invoke(lambda session: None)
        invoker.invoke(lambda session: None)

        assert mock_session_factory.open.call_count == 2
        assert mock_session.close.call_count == 2

    def test_session_context_manager(self, invoker, mock_session):
        with invoker.session() as session:
            assert session is mock_session
            mock_session.close.assert_not_called()

        mock_session.close.assert_called_once_with()
