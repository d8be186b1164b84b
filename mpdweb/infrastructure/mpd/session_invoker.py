# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Session Invoker (Infrastructure Layer).

Runs one logical operation inside one control session:
connect, call the operation once, disconnect. The session is released on
every exit path and a failing release never replaces the operation's own
result or exception. There are no retries.
"""

from contextlib import contextmanager
from typing import Callable, Iterator, TypeVar

from mpdweb.domain.protocols.control_session_protocol import (
    ControlSessionFactory,
    ControlSessionProtocol,
)
from mpdweb.monitoring import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class SessionInvoker:
    """Owns the connect/operate/disconnect lifecycle of a control session."""

    def __init__(self, session_factory: ControlSessionFactory):
        """
        Args:
            session_factory: Opens connected sessions, raising
                             DaemonConnectionError when the daemon is unreachable
        """
        self._session_factory = session_factory

    @contextmanager
    def session(self) -> Iterator[ControlSessionProtocol]:
        """Open a session and release it when the block exits."""
        session = self._session_factory.open()
        try:
            yield session
        finally:
            self._release(session)

    def invoke(self, operation: Callable[[ControlSessionProtocol], T]) -> T:
        """
        Run an operation inside a fresh control session.

        Args:
            operation: Callable performing zero or more commands on the session

        Returns:
            Whatever the operation returns

        Raises:
            DaemonConnectionError: If the session cannot be opened (the
                                   operation is not called)
            Exception: Anything the operation raises, unchanged
        """
        with self.session() as session:
            return operation(session)

    @staticmethod
    def _release(session: ControlSessionProtocol) -> None:
        try:
            session.close()
        except Exception as e:
            logger.warning(f"Failed to release control session: {e}")
