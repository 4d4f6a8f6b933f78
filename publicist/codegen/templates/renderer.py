"""
Template Rendering Engine.

This module provides template-based code generation using Jinja2
templates registered under an identifier. It includes validation, error
handling, and the custom filters shared by every generator.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateError

from ...utils.config import get_config
from ...utils.exceptions import TemplateRenderError
from ...utils.naming import goify, tabs, depth_var


class JinjaTemplateRenderer:
    """Jinja2-based renderer for code generation templates."""

    def __init__(self, templates: Optional[Dict[str, str]] = None,
                 functions: Optional[Dict[str, Callable[..., Any]]] = None):
        """
        Initialize the template renderer.

        Args:
            templates: Template sources keyed by template identifier
            functions: Extra global functions available to templates
        """
        self._templates: Dict[str, str] = dict(templates or {})
        self._env = Environment(
            loader=DictLoader(self._templates),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            autoescape=False,
        )

        self._setup_custom_filters()
        self._env.globals.update(functions or {})

    def _setup_custom_filters(self) -> None:
        """Set up custom Jinja2 filters for code generation."""

        def tabs_filter(depth: int) -> str:
            """Indentation for a nesting depth."""
            return tabs(depth, get_config().codegen.indent)

        def goify_filter(name: str, first_upper: bool = True) -> str:
            """Go identifier for a design name."""
            return goify(name, first_upper)

        self._env.filters["tabs"] = tabs_filter
        self._env.filters["goify"] = goify_filter

        self._env.globals["depth_var"] = depth_var

    def register_template(self, template_id: str, source: str) -> None:
        """Register or replace the template ``template_id``."""
        self._templates[template_id] = source

    def render(self, template_id: str, context: Dict[str, Any]) -> str:
        """
        Render a registered template with the given context.

        Raises:
            TemplateRenderError: if the template is unknown, malformed,
                or refers to a variable missing from the context
        """
        try:
            template = self._env.get_template(template_id)
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(template_id, str(e) or type(e).__name__) from e

    def render_string(self, source: str, context: Dict[str, Any]) -> str:
        """Render a template string with the given context."""
        try:
            return self._env.from_string(source).render(**context)
        except TemplateError as e:
            raise TemplateRenderError("<string>", str(e)) from e

    def validate_template(self, source: str) -> List[str]:
        """Return syntax errors of a template string, empty when valid."""
        try:
            self._env.parse(source)
        except TemplateError as e:
            return [str(e)]
        return []

    def list_templates(self) -> List[str]:
        """List registered template identifiers."""
        return sorted(self._templates)


def create_template_renderer(templates: Optional[Dict[str, str]] = None,
                             functions: Optional[Dict[str, Callable[..., Any]]] = None) -> JinjaTemplateRenderer:
    """Create a template renderer."""
    return JinjaTemplateRenderer(templates, functions)
