# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""HTML rendering from named templates."""

from .template_registry import TemplateRegistry

__all__ = ["TemplateRegistry"]
