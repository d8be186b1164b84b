# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Gateway entry point.

Usage:
    python -m mpdweb
    MPD_HOST=music.local HTTP_PORT=8080 mpdweb

Daemon failures are reported per request; the process only exits non-zero
when the configuration is invalid or the HTTP listener cannot serve.
"""

import sys

import uvicorn

from mpdweb.application.app_factory import create_app
from mpdweb.config import GatewayConfig
from mpdweb.monitoring import get_logger, setup_logging
from mpdweb.monitoring.core.exceptions import ConfigurationError

logger = get_logger("mpdweb")


def main() -> int:
    try:
        config = GatewayConfig.from_env()
    except ConfigurationError as e:
        setup_logging()
        logger.critical(f"Invalid configuration: {e}")
        return 2

    setup_logging(config.log_level)
    app = create_app(config)

    logger.info(f"http://localhost:{config.http_port}/")
    uvicorn.run(
        app,
        host=config.http_host,
        port=config.http_port,
        timeout_keep_alive=max(1, round(config.http_read_timeout)),
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
