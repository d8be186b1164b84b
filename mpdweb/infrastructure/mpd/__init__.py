# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""MPD transport: control sessions and their lifecycle."""

from .mpd_control_session import MPDControlSession, MPDSessionFactory
from .session_invoker import SessionInvoker

__all__ = ["MPDControlSession", "MPDSessionFactory", "SessionInvoker"]
