# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Gateway Exception Hierarchy.

Every failure a request can run into is one of these exceptions. Handlers
catch GatewayError and write its text as the response body, so the message
of each exception is what the user sees.

Hierarchy:
- GatewayError
  - DaemonError
    - DaemonConnectionError
    - DaemonCommandError
  - ClientInputError
    - MissingParameterError
    - InvalidParameterError
  - RenderError
  - ConfigurationError
"""

from typing import List


class GatewayError(Exception):
    """Base class for all gateway errors."""


# Daemon errors

class DaemonError(GatewayError):
    """The music daemon could not complete a request."""


class DaemonConnectionError(DaemonError):
    """The daemon is unreachable, refused the handshake or dropped the link."""


class DaemonCommandError(DaemonError):
    """The daemon is reachable but rejected or failed a command."""


# Client input errors

class ClientInputError(GatewayError):
    """The HTTP request itself is malformed."""


class MissingParameterError(ClientInputError):
    """A required query parameter is absent or empty."""


class InvalidParameterError(ClientInputError):
    """A query parameter could not be converted to the expected type."""


# Rendering errors

class RenderError(GatewayError):
    """A template could not be found or executed."""


# Configuration errors

class ConfigurationError(GatewayError):
    """The process environment holds an invalid setting."""


_CATEGORIES: List[tuple] = [
    (DaemonConnectionError, "connection"),
    (DaemonCommandError, "command"),
    (ClientInputError, "client"),
    (RenderError, "render"),
    (ConfigurationError, "configuration"),
]


def get_error_category(error: Exception) -> str:
    """
    Get the category name of an error, for logging.

    Args:
        error: Exception to classify

    Returns:
        One of "connection", "command", "client", "render",
        "configuration" or "unknown"
    """
    for error_type, category in _CATEGORIES:
        if isinstance(error, error_type):
            return category
    return "unknown"


def is_client_error(error: Exception) -> bool:
    """Return True if the error was caused by the request rather than the daemon."""
    return isinstance(error, ClientInputError)

