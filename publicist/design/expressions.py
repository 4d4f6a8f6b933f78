"""
Design Expressions.

This module defines the expressions built by the design DSL: responses
and the resources and actions that own them.
"""

from __future__ import annotations

from typing import List, Optional, Union
from dataclasses import dataclass, field

from .types import AttributeExpr, DataType, Object


@dataclass(eq=False)
class HTTPResponseExpr:
    """
    A named HTTP response.

    ``type`` overrides the body type implied by ``media_type``.
    ``standard`` is True while the response is an unmodified copy of a
    built-in default response. ``parent`` points back at the owning
    resource or action and is set when the response is attached.
    """

    name: str
    status: int = 0
    media_type: str = ""
    type: Optional[DataType] = None
    headers: Optional[AttributeExpr] = None
    description: str = ""
    standard: bool = False
    parent: Optional["Scope"] = field(default=None, repr=False)

    def eval_name(self) -> str:
        """Name used to identify the response in diagnostics."""
        name = f'response "{self.name}"'
        if self.parent is not None:
            name += f" of {self.parent.eval_name()}"
        return name

    def header(self, name: str) -> Optional[AttributeExpr]:
        """Look up a header attribute by name."""
        if self.headers is None or not isinstance(self.headers.type, Object):
            return None
        return self.headers.type.attribute(name)

    def header_names(self) -> List[str]:
        """Header names in declaration order."""
        if self.headers is None or not isinstance(self.headers.type, Object):
            return []
        return [nat.name for nat in self.headers.type]

    def add_header(self, name: str, attribute: AttributeExpr, required: bool = False) -> None:
        """Append a header, creating the header set on first use."""
        if self.headers is None:
            self.headers = AttributeExpr(Object())
        self.headers.type.set(name, attribute)
        if required and name not in self.headers.required:
            self.headers.required.append(name)

    def dup(self) -> "HTTPResponseExpr":
        """
        Copy the response so the copy can be configured without touching
        the original. The header set is copied; the body type is shared.
        The copy is not attached to any scope.
        """
        return HTTPResponseExpr(
            name=self.name,
            status=self.status,
            media_type=self.media_type,
            type=self.type,
            headers=self.headers.dup() if self.headers is not None else None,
            description=self.description,
            standard=self.standard,
        )


class _ResponseOwner:
    """Response lookup shared by every scope that owns responses."""

    responses: List[HTTPResponseExpr]

    def response(self, name: str) -> Optional[HTTPResponseExpr]:
        """Return the response with the given name, if defined in this scope."""
        for resp in self.responses:
            if resp.name == name:
                return resp
        return None

    def add_response(self, resp: HTTPResponseExpr) -> None:
        resp.parent = self
        self.responses.append(resp)


@dataclass(eq=False)
class ResourceExpr(_ResponseOwner):
    """A group of actions sharing a default media type and responses."""

    name: str
    media_type: str = ""
    description: str = ""
    responses: List[HTTPResponseExpr] = field(default_factory=list)
    actions: List["ActionExpr"] = field(default_factory=list)

    def eval_name(self) -> str:
        return f'resource "{self.name}"'

    def default_media_type(self) -> str:
        """Media type used by OK responses that do not set their own."""
        return self.media_type

    def action(self, name: str) -> Optional["ActionExpr"]:
        for act in self.actions:
            if act.name == name:
                return act
        return None


@dataclass(eq=False)
class ActionExpr(_ResponseOwner):
    """A single operation of a resource."""

    name: str
    resource: Optional[ResourceExpr] = field(default=None, repr=False)
    description: str = ""
    responses: List[HTTPResponseExpr] = field(default_factory=list)

    def eval_name(self) -> str:
        name = f'action "{self.name}"'
        if self.resource is not None:
            name += f" of {self.resource.eval_name()}"
        return name

    def default_media_type(self) -> str:
        """Actions use the media type of their resource."""
        if self.resource is None:
            return ""
        return self.resource.default_media_type()


Scope = Union[ResourceExpr, ActionExpr]


@dataclass(eq=False)
class HeadersExpr:
    """The header set of a response, active while a headers block runs."""

    response: HTTPResponseExpr

    def eval_name(self) -> str:
        return f"headers of {self.response.eval_name()}"
