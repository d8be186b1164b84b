# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Command Handlers for HTTP Requests

One handler per gateway path. Each handler runs its daemon work through the
SessionInvoker and turns the outcome into a response:
- control actions redirect to the index page on success
- status and index render a template
- any GatewayError becomes a plain-text body with status 200, no redirect

Handlers never let a GatewayError reach the HTTP layer.
"""

import functools
import logging
import re
from typing import Any, Callable, Mapping

from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response

from mpdweb.domain.actions.control_actions import (
    ControlAction,
    GotoAction,
    NextTrackAction,
    PlayAction,
    PreviousTrackAction,
    StopAction,
)
from mpdweb.domain.models.view_models import IndexViewModel
from mpdweb.domain.protocols.control_session_protocol import ControlSessionProtocol
from mpdweb.domain.services.view_model_builder import (
    build_index_view_model,
    build_status_view_model,
)
from mpdweb.infrastructure.mpd.session_invoker import SessionInvoker
from mpdweb.infrastructure.rendering.template_registry import (
    INDEX_TEMPLATE,
    STATUS_TEMPLATE,
    TemplateRegistry,
)
from mpdweb.monitoring import get_logger
from mpdweb.monitoring.core.exceptions import (
    DaemonCommandError,
    DaemonError,
    GatewayError,
    InvalidParameterError,
    MissingParameterError,
    get_error_category,
    is_client_error,
)

logger = get_logger(__name__)

HOME = "/"
POSITION_PARAM = "position"
MISSING_POSITION = "Missing position parameter"
INVALID_POSITION = "Failed to convert position parameter to integer"
NEGATIVE_POSITION = "Position parameter must not be negative"
INDEX_CONTEXT = "failed to get mpd-status"
STATUS_PAGE_CONTEXT = "failed to get status"

_INTEGER = re.compile(r"-?[0-9]+")

Query = Mapping[str, str]


def parse_position(query: Query) -> int:
    """
    Read the required, non-negative ``position`` query parameter.

    Raises:
        MissingParameterError: If the parameter is absent or empty
        InvalidParameterError: If it is not a non-negative integer
    """
    raw = query.get(POSITION_PARAM, "")
    if not raw:
        raise MissingParameterError(MISSING_POSITION)
    if not _INTEGER.fullmatch(raw):
        raise InvalidParameterError(INVALID_POSITION)

    position = int(raw)
    if position < 0:
        raise InvalidParameterError(NEGATIVE_POSITION)
    return position


class CommandHandlers:
    """Handlers for the gateway's HTTP paths."""

    def __init__(self, invoker: SessionInvoker, templates: TemplateRegistry, refresh_seconds: int = 3):
        """
        Args:
            invoker: Runs operations inside a fresh control session
            templates: Registry holding the index and status templates
            refresh_seconds: Auto-refresh interval of the index page
        """
        self._invoker = invoker
        self._templates = templates
        self._refresh_seconds = refresh_seconds

    # MARK: - Control actions

    def next(self, query: Query) -> Response:
        return self._run_action(NextTrackAction())

    def previous(self, query: Query) -> Response:
        return self._run_action(PreviousTrackAction())

    def play(self, query: Query) -> Response:
        return self._run_action(PlayAction())

    def stop(self, query: Query) -> Response:
        return self._run_action(StopAction())

    def goto(self, query: Query) -> Response:
        try:
            action = GotoAction(parse_position(query))
        except GatewayError as e:
            return self._error_response("goto", e)
        return self._run_action(action)

    # MARK: - Pages

    def status(self, query: Query) -> Response:
        """Render the raw daemon status as a key/value table."""
        try:
            status = self._invoker.invoke(functools.partial(_read_status, context=STATUS_PAGE_CONTEXT))
            body = self._templates.render(STATUS_TEMPLATE, build_status_view_model(status))
        except GatewayError as e:
            return self._error_response("status", e)
        return HTMLResponse(body)

    def index(self, query: Query) -> Response:
        """
        Render the index page.

        Connection failures and a failing status query replace the page
        with the error text. A failing current-song or queue query only
        leaves that part of the page at its not-playing or empty default.
        """
        try:
            view_model = self._invoker.invoke(self._collect_index)
            body = self._templates.render(INDEX_TEMPLATE, view_model)
        except GatewayError as e:
            return self._error_response("index", e)
        return HTMLResponse(body)

    # MARK: - Helpers

    def _collect_index(self, session: ControlSessionProtocol) -> IndexViewModel:
        status = _read_status(session)
        song = _best_effort(session.current_song, None, "current song")
        playlist = _best_effort(lambda: session.playlist_info(-1, -1), [], "current playlist")
        return build_index_view_model(status, song, playlist, self._refresh_seconds)

    def _run_action(self, action: ControlAction) -> Response:
        try:
            self._invoker.invoke(action.execute)
        except GatewayError as e:
            return self._error_response(action.name, e)

        logger.info(f"Action '{action.name}' completed")
        return RedirectResponse(HOME, status_code=302)

    @staticmethod
    def _error_response(action: str, error: GatewayError) -> Response:
        level = logging.INFO if is_client_error(error) else logging.WARNING
        logger.log(level, f"Request '{action}' failed: {error}", extra={"category": get_error_category(error)})
        return PlainTextResponse(str(error))


def _read_status(session: ControlSessionProtocol, context: str = INDEX_CONTEXT) -> Mapping[str, str]:
    try:
        return session.status()
    except DaemonError as e:
        raise type(e)(f"{context} {e}") from e


def _best_effort(fetch: Callable[[], Any], default: Any, what: str) -> Any:
    """Return fetch(), or default when the daemon rejects the command."""
    try:
        return fetch()
    except DaemonCommandError as e:
        logger.warning(f"Failed to get {what}, showing defaults: {e}")
        return default
