# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Gateway Router

Dispatches requests to handlers by exact path match against a route table
built once at startup. The query string is not part of the match and no
trailing-slash normalization happens. Unknown paths are redirected to the
index page instead of answering 404.
"""

from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from fastapi import Request
from fastapi.responses import RedirectResponse, Response
from starlette.concurrency import run_in_threadpool

from mpdweb.monitoring import get_logger
from mpdweb.routes.handlers.command_handlers import CommandHandlers

logger = get_logger(__name__)

Handler = Callable[[Mapping[str, str]], Response]


def build_routes(handlers: CommandHandlers) -> Mapping[str, Handler]:
    """
    Build the immutable route table.

    Args:
        handlers: Command handlers to route to

    Returns:
        Read-only mapping of path -> handler
    """
    routes: Dict[str, Handler] = {
        "/": handlers.index,
        "/status": handlers.status,
        "/next": handlers.next,
        "/prev": handlers.previous,
        "/play": handlers.play,
        "/stop": handlers.stop,
        "/goto": handlers.goto,
    }
    return MappingProxyType(routes)


class GatewayRouter:
    """Exact-path dispatcher over an injected route table."""

    def __init__(self, routes: Mapping[str, Handler], fallback: str = "/"):
        """
        Args:
            routes: Path -> handler mapping, copied into a read-only view
            fallback: Redirect target for unknown paths
        """
        self._routes = MappingProxyType(dict(routes))
        self._fallback = fallback
        logger.info(f"GatewayRouter initialized with {len(self._routes)} routes: {list(self._routes)}")

    @property
    def routes(self) -> Mapping[str, Handler]:
        return self._routes

    def resolve(self, path: str) -> Optional[Handler]:
        """Return the handler for a path, or None when it is not registered."""
        return self._routes.get(path)

    async def dispatch(self, request: Request) -> Response:
        """
        Dispatch a request to its handler.

        Handlers talk to the daemon with blocking sockets, so they run in
        the worker thread pool; a hung daemon only holds its own request.
        """
        path = request.url.path
        handler = self.resolve(path)

        if handler is None:
            logger.debug(f"No route for {request.method} {path}, redirecting to {self._fallback}")
            return RedirectResponse(self._fallback, status_code=302)

        logger.debug(
            f"API Request: {request.method} {path} -> {getattr(handler, '__name__', handler)}",
            extra={"method": request.method, "path": path},
        )
        return await run_in_threadpool(handler, request.query_params)
