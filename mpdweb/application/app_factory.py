# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Application Factory.

Wires the gateway together:
config -> session factory -> invoker -> templates -> handlers -> route table
-> router -> FastAPI app.

Collaborators can be injected so tests run against fakes.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import Response

import mpdweb
from mpdweb.config import GatewayConfig
from mpdweb.domain.protocols.control_session_protocol import ControlSessionFactory
from mpdweb.infrastructure.mpd.mpd_control_session import MPDSessionFactory
from mpdweb.infrastructure.mpd.session_invoker import SessionInvoker
from mpdweb.infrastructure.rendering.template_registry import TemplateRegistry
from mpdweb.monitoring import get_logger
from mpdweb.routes.gateway_router import GatewayRouter, build_routes
from mpdweb.routes.handlers.command_handlers import CommandHandlers

logger = get_logger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(
    config: Optional[GatewayConfig] = None,
    session_factory: Optional[ControlSessionFactory] = None,
    templates: Optional[TemplateRegistry] = None,
) -> FastAPI:
    """
    Create the gateway application.

    Args:
        config: Gateway configuration (defaults to GatewayConfig())
        session_factory: Opens control sessions (defaults to MPD at config's address)
        templates: Template registry (defaults to the packaged templates)

    Returns:
        FastAPI application whose only route hands every path to GatewayRouter
    """
    config = config or GatewayConfig()
    if session_factory is None:
        session_factory = MPDSessionFactory(config.mpd_host, config.mpd_port, config.mpd_timeout)
    templates = templates or TemplateRegistry()

    handlers = CommandHandlers(
        SessionInvoker(session_factory),
        templates,
        refresh_seconds=config.refresh_seconds,
    )
    router = GatewayRouter(build_routes(handlers))

    app = FastAPI(
        title="mpdweb",
        version=mpdweb.__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.gateway_router = router

    async def gateway(request: Request) -> Response:
        return await router.dispatch(request)

    app.add_api_route(
        "/{path:path}",
        gateway,
        methods=ALL_METHODS,
        include_in_schema=False,
    )

    logger.info(f"Gateway application created for mpd at {config.mpd_address}")
    return app
