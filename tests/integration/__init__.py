# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Integration tests.

Exercise the gateway over real HTTP requests (FastAPI TestClient) and real
TCP sessions against a fake MPD daemon.
"""
