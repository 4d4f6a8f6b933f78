"""
Response DSL.

``response`` defines a named HTTP response on the enclosing resource or
action, starting from a user-defined response template or the built-in
default response of the same name when one exists:

    response(OK, BottleMedia)              # body type and media type

    response(OK, "application/vnd.bottle") # media type by identifier

    response(OK, lambda: status(201))      # override the status

    def not_found():
        description("Bottle not found")
        headers(lambda: header("X-Request-Id"))

    response("BottleNotFound", not_found)  # custom response

Inside a response block ``status``, ``description``, ``media`` and
``headers`` configure the response. Errors are reported to the
evaluation context, never raised.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Union
from dataclasses import dataclass, field

from ..design.expressions import (
    ActionExpr,
    HeadersExpr,
    HTTPResponseExpr,
    ResourceExpr,
    Scope,
)
from ..design.root import RootExpr, get_root
from ..design.types import AttributeExpr, DataType, MediaTypeExpr, String
from ..eval import context as eval_ctx
from ..utils.exceptions import DuplicateDefinitionError, InvalidTemplateArgumentError
from ..utils.logging import PublicistLogger

plog = PublicistLogger(__name__)


# =============================================================================
# Argument Parsing
# =============================================================================

@dataclass
class BlockArg:
    """Trailing configuration block."""
    block: Callable[[], None]


@dataclass
class TypeArg:
    """Body type given as a type or as a registered media type identifier."""
    type: DataType


@dataclass
class StringArg:
    """Positional response template parameter."""
    value: Any


@dataclass
class ResponseArgs:
    """Arguments of ``response`` sorted by kind."""
    block: Optional[BlockArg] = None
    type: Optional[TypeArg] = None
    params: List[StringArg] = field(default_factory=list)


def _as_type(arg: Any, root: RootExpr) -> Optional[DataType]:
    if isinstance(arg, DataType):
        return arg
    if isinstance(arg, str):
        return root.media_type(arg)
    return None


def parse_response_args(name: str, args: tuple, root: RootExpr) -> ResponseArgs:
    """
    Sort the positional arguments of ``response``, right to left: an
    optional trailing block, then an optional body type as the first
    remaining argument, then template parameters.

    Raises:
        InvalidTemplateArgumentError: when template parameters remain,
            response templates with parameters are not supported
    """
    args = list(args)
    parsed = ResponseArgs()
    if args and callable(args[-1]) and not isinstance(args[-1], DataType):
        parsed.block = BlockArg(args.pop())
    if args:
        dt = _as_type(args[0], root)
        if dt is not None:
            parsed.type = TypeArg(dt)
            args = args[1:]
    parsed.params = [StringArg(a) for a in args]

    for param in parsed.params:
        if not isinstance(param.value, str):
            raise InvalidTemplateArgumentError(
                f"invalid response template parameter {param.value!r}, must be a string",
                param.value,
            )
    if parsed.params:
        raise InvalidTemplateArgumentError(
            f"no response template named {name!r}", parsed.params[0].value)
    return parsed


# =============================================================================
# Response Definition
# =============================================================================

def _build_response(name: str, args: ResponseArgs, root: RootExpr) -> Optional[HTTPResponseExpr]:
    """Create the response and run its block; None when the block failed."""
    user = root.response(name)
    default = root.default_response(name)
    if user is not None:
        resp = user.dup()
    elif default is not None:
        resp = default.dup()
        resp.standard = True
    else:
        resp = HTTPResponseExpr(name=name)

    if args.block is not None:
        resp.standard = False
        if not eval_ctx.execute(args.block.block, resp):
            return None

    if args.type is not None:
        dt = args.type.type
        if isinstance(dt, MediaTypeExpr):
            resp.media_type = dt.identifier
        resp.type = dt
        resp.standard = False

    return resp


def _template_status(name: str, root: RootExpr) -> int:
    """Status of the response template ``name`` starts from, 0 when none."""
    base = root.response(name) or root.default_response(name)
    return base.status if base is not None else 0


def define_response(scope: Scope, name: str, *args: Any) -> Optional[HTTPResponseExpr]:
    """
    Define the response ``name`` on ``scope``.

    The scope is only modified when the definition succeeds; otherwise
    the error is reported to the evaluation context and None returned.

    Args:
        scope: Owning resource or action
        name: Response name, unique within the scope
        args: Optional body type or media type identifier followed by an
            optional configuration block

    Returns:
        The attached response, or None on error
    """
    if scope.response(name) is not None:
        eval_ctx.report_error(DuplicateDefinitionError(name, scope.eval_name()))
        return None

    root = get_root()
    try:
        parsed = parse_response_args(name, args, root)
    except InvalidTemplateArgumentError as e:
        eval_ctx.report_error(e)
        return None

    resp = _build_response(name, parsed, root)
    if resp is None:
        return None

    # Success responses keep the scope media type when their status is overridden.
    if not resp.media_type and 200 in (resp.status, _template_status(name, root)):
        resp.media_type = scope.default_media_type()
    scope.add_response(resp)
    plog.log_definition("response", name, scope.eval_name())
    return resp


def define_response_template(root: RootExpr, name: str, *args: Any) -> Optional[HTTPResponseExpr]:
    """
    Define a reusable response at the API level. Responses of the same
    name defined on resources and actions start from a copy of it.
    """
    if root.response(name) is not None:
        eval_ctx.report_error(DuplicateDefinitionError(name, root.eval_name()))
        return None
    try:
        parsed = parse_response_args(name, args, root)
    except InvalidTemplateArgumentError as e:
        eval_ctx.report_error(e)
        return None

    resp = _build_response(name, parsed, root)
    if resp is None:
        return None
    root.add_response(resp)
    plog.log_definition("response template", name, root.eval_name())
    return resp


def response(name: str, *args: Any) -> None:
    """
    Define a response on the current resource or action, or a response
    template when called at the API level.
    """
    current = eval_ctx.current()
    if isinstance(current, (ActionExpr, ResourceExpr)):
        define_response(current, name, *args)
    elif isinstance(current, RootExpr):
        define_response_template(current, name, *args)
    else:
        eval_ctx.incompatible_dsl("response")


# =============================================================================
# Response Configuration
# =============================================================================

def status(code: int) -> None:
    """Set the status code of the current response."""
    resp = eval_ctx.current()
    if not isinstance(resp, HTTPResponseExpr):
        eval_ctx.incompatible_dsl("status")
        return
    resp.status = code


def media(media_type: Union[str, MediaTypeExpr]) -> None:
    """
    Set the media type of the current response, either by identifier or
    from a media type defined in the design, which also becomes the
    response body type.
    """
    resp = eval_ctx.current()
    if not isinstance(resp, HTTPResponseExpr):
        eval_ctx.incompatible_dsl("media")
        return
    if isinstance(media_type, MediaTypeExpr):
        resp.media_type = media_type.identifier
        resp.type = media_type
    else:
        resp.media_type = media_type


def headers(block: Callable[[], None]) -> None:
    """Declare the headers of the current response."""
    resp = eval_ctx.current()
    if not isinstance(resp, HTTPResponseExpr):
        eval_ctx.incompatible_dsl("headers")
        return
    eval_ctx.execute(block, HeadersExpr(resp))


def header(name: str, dt: DataType = String, description: str = "", required: bool = False) -> None:
    """Declare a response header inside a ``headers`` block."""
    hdrs = eval_ctx.current()
    if not isinstance(hdrs, HeadersExpr):
        eval_ctx.incompatible_dsl("header")
        return
    hdrs.response.add_header(name, AttributeExpr(dt, description=description), required)
