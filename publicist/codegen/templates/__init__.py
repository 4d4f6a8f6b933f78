"""
Code generation templates and the Jinja2 renderer that runs them.
"""

from .renderer import JinjaTemplateRenderer, create_template_renderer
from .publicize import (
    PUBLICIZE_TEMPLATES,
    SIMPLE_PUBLICIZE,
    RECURSIVE_PUBLICIZE,
    OBJECT_PUBLICIZE,
    ARRAY_PUBLICIZE,
    MAP_PUBLICIZE,
    FIELD_GUARD,
    PUBLICIZE_METHOD,
)

__all__ = [
    "JinjaTemplateRenderer",
    "create_template_renderer",
    "PUBLICIZE_TEMPLATES",
    "SIMPLE_PUBLICIZE",
    "RECURSIVE_PUBLICIZE",
    "OBJECT_PUBLICIZE",
    "ARRAY_PUBLICIZE",
    "MAP_PUBLICIZE",
    "FIELD_GUARD",
    "PUBLICIZE_METHOD",
]
