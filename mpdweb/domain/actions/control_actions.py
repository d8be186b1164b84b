# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Control Action Definitions (Domain Layer).

Each action is one logical operation on an open control session. The
SessionInvoker runs ``action.execute`` between connect and disconnect.

This follows the Command Pattern:
- ControlAction = Command interface
- Concrete actions = Command implementations
- ControlSessionProtocol = Receiver
- SessionInvoker = Invoker

Track-skip commands do not start playback on their own, so NextTrackAction
and PreviousTrackAction first start playback when the daemon is stopped.
Nothing is rolled back if the skip fails after that implicit play.
"""

from abc import ABC, abstractmethod

from mpdweb.domain.protocols.control_session_protocol import ControlSessionProtocol
from mpdweb.monitoring import get_logger
from mpdweb.monitoring.core.exceptions import DaemonError

logger = get_logger(__name__)

STOPPED_STATE = "stop"
CURRENT_POSITION = -1


def _with_context(error: DaemonError, context: str) -> DaemonError:
    return type(error)(f"{context} {error}")


class ControlAction(ABC):
    """Abstract base class for control actions."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the action name for identification and logging."""
        pass

    @abstractmethod
    def execute(self, session: ControlSessionProtocol) -> None:
        """
        Execute the action.

        Args:
            session: Open control session

        Raises:
            DaemonError: If any daemon command fails
        """
        pass

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"


class PlayAction(ControlAction):
    """Start or resume playback at the current cursor."""

    @property
    def name(self) -> str:
        return "play"

    def execute(self, session: ControlSessionProtocol) -> None:
        logger.debug("[ACTION:play] Starting playback")
        session.play(CURRENT_POSITION)


class StopAction(ControlAction):
    """Stop playback."""

    @property
    def name(self) -> str:
        return "stop"

    def execute(self, session: ControlSessionProtocol) -> None:
        logger.debug("[ACTION:stop] Stopping playback")
        session.stop()


class GotoAction(ControlAction):
    """Start playback at a given queue position."""

    def __init__(self, position: int):
        if position < 0:
            raise ValueError(f"position must be non-negative, got {position}")
        self.position = position

    @property
    def name(self) -> str:
        return "goto"

    def execute(self, session: ControlSessionProtocol) -> None:
        logger.debug(f"[ACTION:goto] Playing queue position {self.position}")
        session.play(self.position)


class _SkipAction(ControlAction):
    """Track skip guarded by an implicit play when the daemon is stopped."""

    def execute(self, session: ControlSessionProtocol) -> None:
        try:
            status = session.status()
        except DaemonError as e:
            raise _with_context(e, "error getting status") from e

        if status.get("state", "") == STOPPED_STATE:
            logger.debug(f"[ACTION:{self.name}] Daemon stopped, starting playback first")
            try:
                session.play(CURRENT_POSITION)
            except DaemonError as e:
                raise _with_context(e, "error starting playback when stopped") from e

        self._skip(session)

    @abstractmethod
    def _skip(self, session: ControlSessionProtocol) -> None:
        pass


class NextTrackAction(_SkipAction):
    """Skip to the next queue entry."""

    @property
    def name(self) -> str:
        return "next"

    def _skip(self, session: ControlSessionProtocol) -> None:
        session.next()


class PreviousTrackAction(_SkipAction):
    """Go back to the previous queue entry."""

    @property
    def name(self) -> str:
        return "previous"

    def _skip(self, session: ControlSessionProtocol) -> None:
        session.previous()
