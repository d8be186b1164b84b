# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Gateway Configuration.

Holds the daemon address, the HTTP listener settings and the page refresh
interval. Values come from environment variables; every field has a default
so the gateway runs unconfigured against a local daemon.
"""

import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, TypeVar

from mpdweb.monitoring.core.exceptions import ConfigurationError

T = TypeVar("T")

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class GatewayConfig:
    """
    Runtime configuration of the gateway.

    Attributes:
        mpd_host: Host name of the music daemon
        mpd_port: TCP port of the music daemon
        mpd_timeout: Socket timeout for daemon I/O in seconds, None for the
                     transport default
        http_host: Address the HTTP listener binds to
        http_port: Port the HTTP listener binds to
        http_read_timeout: Keep-alive/read timeout of the HTTP server in seconds
        refresh_seconds: Auto-refresh interval of the index page
        log_level: Root log level name
    """
    mpd_host: str = "localhost"
    mpd_port: int = 6600
    mpd_timeout: Optional[float] = None
    http_host: str = "0.0.0.0"
    http_port: int = 8888
    http_read_timeout: float = 5.0
    refresh_seconds: int = 3
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration values."""
        if not self.mpd_host:
            raise ValueError("mpd_host cannot be empty")

        for name in ("mpd_port", "http_port"):
            port = getattr(self, name)
            if not 1 <= port <= 65535:
                raise ValueError(f"{name} must be between 1 and 65535, got {port}")

        if self.mpd_timeout is not None and self.mpd_timeout <= 0:
            raise ValueError(f"mpd_timeout must be positive, got {self.mpd_timeout}")

        if self.http_read_timeout <= 0:
            raise ValueError(f"http_read_timeout must be positive, got {self.http_read_timeout}")

        if self.refresh_seconds < 1:
            raise ValueError(f"refresh_seconds must be at least 1, got {self.refresh_seconds}")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(LOG_LEVELS))}, got {self.log_level}"
            )

    @property
    def mpd_address(self) -> str:
        return f"{self.mpd_host}:{self.mpd_port}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GatewayConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Validated GatewayConfig

        Raises:
            ConfigurationError: If a variable cannot be parsed or is out of range
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def read(name: str, convert: Callable[[str], T], default: T) -> T:
            raw = env.get(name, "").strip()
            if not raw:
                return default
            try:
                return convert(raw)
            except ValueError:
                raise ConfigurationError(f"{name} has an invalid value: {raw!r}")

        try:
            return cls(
                mpd_host=read("MPD_HOST", str, defaults.mpd_host),
                mpd_port=read("MPD_PORT", int, defaults.mpd_port),
                mpd_timeout=read("MPD_TIMEOUT", float, defaults.mpd_timeout),
                http_host=read("HTTP_HOST", str, defaults.http_host),
                http_port=read("HTTP_PORT", int, defaults.http_port),
                http_read_timeout=read("HTTP_READ_TIMEOUT", float, defaults.http_read_timeout),
                refresh_seconds=read("REFRESH_SECONDS", int, defaults.refresh_seconds),
                log_level=read("LOG_LEVEL", str.upper, defaults.log_level),
            )
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
