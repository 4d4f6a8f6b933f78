"""
Design DSL.

Designs are plain Python functions calling the functions exported here;
``publicist.eval.run`` evaluates them against the root expression and
raises every error they reported at the end.
"""

from .response import (
    define_response,
    define_response_template,
    parse_response_args,
    response,
    status,
    media,
    headers,
    header,
)
from .scopes import (
    api,
    resource,
    action,
    default_media,
    description,
    media_type,
)
from ..design.status import *  # noqa: F401,F403

__all__ = [
    "define_response",
    "define_response_template",
    "parse_response_args",
    "response",
    "status",
    "media",
    "headers",
    "header",
    "api",
    "resource",
    "action",
    "default_media",
    "description",
    "media_type",
]
