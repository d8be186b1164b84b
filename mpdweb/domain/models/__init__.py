# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""Domain models."""

from .view_models import IndexViewModel, PlaylistDisplayEntry, StatusViewModel

__all__ = ["IndexViewModel", "PlaylistDisplayEntry", "StatusViewModel"]
