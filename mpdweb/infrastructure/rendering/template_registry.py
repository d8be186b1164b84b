# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Template Registry (Infrastructure Layer).

Loads the named page templates once at startup and renders view-models with
them. Handlers refer to templates by name only.
"""

from typing import Any, Dict, Mapping, Optional

from jinja2 import (
    BaseLoader,
    Environment,
    PackageLoader,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)

from mpdweb.monitoring import get_logger
from mpdweb.monitoring.core.exceptions import RenderError

logger = get_logger(__name__)

INDEX_TEMPLATE = "index"
STATUS_TEMPLATE = "status"

DEFAULT_TEMPLATES: Mapping[str, str] = {
    INDEX_TEMPLATE: "index.html",
    STATUS_TEMPLATE: "status.html",
}


class TemplateRegistry:
    """Named jinja2 templates, loaded eagerly."""

    def __init__(
        self,
        templates: Mapping[str, str] = DEFAULT_TEMPLATES,
        loader: Optional[BaseLoader] = None,
    ):
        """
        Args:
            templates: Template name -> file name inside the loader
            loader: jinja2 loader (defaults to the package's templates directory)

        Raises:
            jinja2.TemplateError: If a template is missing or does not compile
        """
        self._environment = Environment(
            loader=loader or PackageLoader("mpdweb", "templates"),
            autoescape=select_autoescape(default=True),
            undefined=StrictUndefined,
        )
        self._templates: Dict[str, Template] = {
            name: self._environment.get_template(filename)
            for name, filename in templates.items()
        }
        logger.debug(f"Template registry loaded: {sorted(self._templates)}")

    @property
    def names(self) -> list:
        return sorted(self._templates)

    def render(self, name: str, view_model: Any) -> str:
        """
        Render a view-model with a named template.

        The view-model is available to the template as ``vm``.

        Raises:
            RenderError: If the template is unknown or fails to execute
        """
        template = self._templates.get(name)
        if template is None:
            raise RenderError(f"template '{name}' is not registered")

        try:
            return template.render(vm=view_model)
        except TemplateError as e:
            raise RenderError(f"failed to render {name} template: {e}") from e
