"""
Root Design Expression.

The root holds the process-wide design state the response DSL consults:
user-defined response templates, the built-in default responses, media
types and resources. It is populated while designs run and read while
code is generated.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .expressions import HTTPResponseExpr, ResourceExpr
from .status import STATUS_CODES
from .types import MediaTypeExpr
from ..utils.logging import get_logger

logger = get_logger(__name__)


def default_responses() -> Dict[str, HTTPResponseExpr]:
    """Build the default response of every standard HTTP status."""
    return {name: HTTPResponseExpr(name=name, status=code) for name, code in STATUS_CODES.items()}


class RootExpr:
    """The API: root of every design expression."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Forget everything defined so far."""
        self.name = ""
        self.description = ""
        self.responses: List[HTTPResponseExpr] = []
        self.default_responses: Dict[str, HTTPResponseExpr] = default_responses()
        self.media_types: Dict[str, MediaTypeExpr] = {}
        self.resources: List[ResourceExpr] = []

    def eval_name(self) -> str:
        if self.name:
            return f'API "{self.name}"'
        return "API"

    def response(self, name: str) -> Optional[HTTPResponseExpr]:
        """User-defined response template with the given name."""
        for resp in self.responses:
            if resp.name == name:
                return resp
        return None

    def add_response(self, resp: HTTPResponseExpr) -> None:
        self.responses.append(resp)

    def default_response(self, name: str) -> Optional[HTTPResponseExpr]:
        """Built-in response for the standard status ``name``."""
        return self.default_responses.get(name)

    def media_type(self, identifier: str) -> Optional[MediaTypeExpr]:
        """Media type registered under ``identifier``."""
        return self.media_types.get(identifier)

    def add_media_type(self, mt: MediaTypeExpr) -> MediaTypeExpr:
        if mt.identifier in self.media_types:
            logger.warning(f"Media type {mt.identifier} redefined")
        self.media_types[mt.identifier] = mt
        return mt

    def resource(self, name: str) -> Optional[ResourceExpr]:
        for res in self.resources:
            if res.name == name:
                return res
        return None

    def add_resource(self, res: ResourceExpr) -> None:
        self.resources.append(res)


# Global root instance
_root = RootExpr()


def get_root() -> RootExpr:
    """Get the global root expression."""
    return _root
