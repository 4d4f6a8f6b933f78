"""
Scope DSL.

Functions that create the expressions responses attach to: the API,
resources and their actions, plus the media types responses refer to.

    run(lambda: api("cellar", lambda: response("Unavailable", lambda: status(503))))

    def bottle():
        default_media(BottleMedia)
        action("show", lambda: response(OK))

    run(lambda: resource("bottle", bottle))
"""

from __future__ import annotations

from typing import Callable, Optional, Union

from ..design.expressions import ActionExpr, HTTPResponseExpr, ResourceExpr
from ..design.root import RootExpr, get_root
from ..design.types import AttributeExpr, MediaTypeExpr
from ..eval import context as eval_ctx


def api(name: str, block: Optional[Callable[[], None]] = None) -> None:
    """Name the API and run its block, where response templates are defined."""
    root = eval_ctx.current()
    if not isinstance(root, RootExpr):
        eval_ctx.incompatible_dsl("api")
        return
    root.name = name
    if block is not None:
        eval_ctx.execute(block, root)


def resource(name: str, block: Optional[Callable[[], None]] = None) -> Optional[ResourceExpr]:
    """Define a resource. The resource is registered even if its block fails."""
    root = eval_ctx.current()
    if not isinstance(root, RootExpr):
        eval_ctx.incompatible_dsl("resource")
        return None
    res = root.resource(name)
    if res is None:
        res = ResourceExpr(name=name)
        root.add_resource(res)
    if block is not None:
        eval_ctx.execute(block, res)
    return res


def action(name: str, block: Optional[Callable[[], None]] = None) -> Optional[ActionExpr]:
    """Define an action of the current resource."""
    res = eval_ctx.current()
    if not isinstance(res, ResourceExpr):
        eval_ctx.incompatible_dsl("action")
        return None
    act = res.action(name)
    if act is None:
        act = ActionExpr(name=name, resource=res)
        res.actions.append(act)
    if block is not None:
        eval_ctx.execute(block, act)
    return act


def default_media(media: Union[str, MediaTypeExpr]) -> None:
    """Set the media type OK responses of the current resource default to."""
    res = eval_ctx.current()
    if not isinstance(res, ResourceExpr):
        eval_ctx.incompatible_dsl("default_media")
        return
    if isinstance(media, MediaTypeExpr):
        res.media_type = media.identifier
    else:
        res.media_type = media


def description(text: str) -> None:
    """Describe the current API, resource, action or response."""
    expr = eval_ctx.current()
    if not isinstance(expr, (RootExpr, ResourceExpr, ActionExpr, HTTPResponseExpr)):
        eval_ctx.incompatible_dsl("description")
        return
    expr.description = text


def media_type(identifier: str, attribute: AttributeExpr, type_name: Optional[str] = None) -> MediaTypeExpr:
    """
    Define a media type and register it under its identifier so
    responses can refer to it by identifier.
    """
    if type_name is None:
        type_name = identifier.rsplit("/", 1)[-1].split("+", 1)[0].replace("vnd.", "", 1)
    return get_root().add_media_type(MediaTypeExpr(type_name, identifier, attribute))
