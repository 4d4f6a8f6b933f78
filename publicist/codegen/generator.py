"""
Publicize method generation.

Turns user types into complete Go ``Publicize`` methods and collects the
user types a design needs them for.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..design.root import RootExpr, get_root
from ..design.types import (
    AttributeExpr,
    DataType,
    UserTypeExpr,
    Object,
    Array,
    Map,
    as_object,
)
from ..utils.config import get_config
from ..utils.exceptions import UnsupportedTypeError
from ..utils.logging import PublicistLogger
from ..utils.naming import goify
from .publicizer import recursive_publicizer, run_template
from .templates.publicize import PUBLICIZE_METHOD

plog = PublicistLogger(__name__)


def publicize_method(user_type: UserTypeExpr) -> str:
    """
    Render the method creating the public struct of ``user_type`` from
    its private counterpart.

    Raises:
        UnsupportedTypeError: if the user type is not an object
    """
    obj = as_object(user_type)
    if obj is None:
        raise UnsupportedTypeError(user_type.type_name)

    plog.log_synthesis_start(user_type.type_name, len(obj))
    body = recursive_publicizer(AttributeExpr(user_type), "source", "target", 1)
    return run_template(PUBLICIZE_METHOD, {
        "method_name": get_config().codegen.method_name,
        "private": goify(user_type.type_name, False),
        "public": goify(user_type.type_name, True),
        "body": body,
        "depth": 0,
    })


def generate_publicizers(types: Iterable[UserTypeExpr]) -> str:
    """Render one publicize method per user type, separated by a blank line."""
    return "\n\n".join(publicize_method(ut) for ut in types)


def publicized_types(root: Optional[RootExpr] = None) -> List[UserTypeExpr]:
    """
    Object user types reachable from the response bodies of a design,
    in order of first use.

    Types referenced by fields, array elements and map values are
    included since their ``Publicize`` method is called by the methods
    of the types that contain them. Types are identified by name, as
    are the Go types generated for them.
    """
    root = root or get_root()
    found: List[UserTypeExpr] = []
    seen = set()

    def visit(dt: Optional[DataType]) -> None:
        while dt is not None:
            if isinstance(dt, UserTypeExpr):
                if dt.type_name in seen:
                    return
                seen.add(dt.type_name)
                if as_object(dt) is not None:
                    found.append(dt)
                dt = dt.attribute.type if dt.attribute is not None else None
            elif isinstance(dt, Object):
                for nat in dt:
                    visit(nat.attribute.type)
                return
            elif isinstance(dt, Array):
                dt = dt.elem_type.type
            elif isinstance(dt, Map):
                visit(dt.key_type.type)
                dt = dt.elem_type.type
            else:
                return

    responses = list(root.responses)
    for res in root.resources:
        responses.extend(res.responses)
        for act in res.actions:
            responses.extend(act.responses)
    for resp in responses:
        body = resp.type
        if body is None and resp.media_type:
            body = root.media_type(resp.media_type)
        visit(body)
    return found
