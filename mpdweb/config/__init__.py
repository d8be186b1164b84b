# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Configuration package.

Configuration is read once by the bootstrap and passed down explicitly;
nothing in the gateway reads the environment on its own.
"""

from .gateway_config import GatewayConfig

__all__ = ["GatewayConfig"]
