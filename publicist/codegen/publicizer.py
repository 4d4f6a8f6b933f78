"""
Publicizer Code Generation.

Generates the Go statements that copy a private struct, as decoded from
a request or loaded from storage, into its public counterpart. The
generator walks the attribute recursively and picks one template per
node:

* primitives are assigned, dereferencing the private pointer when the
  public field is a value;
* named types delegate to their own ``Publicize`` method, which is what
  keeps recursive types from being expanded forever;
* inline objects are allocated and each field is publicized in turn,
  optional fields guarded by a nil check;
* arrays and maps are allocated with the length of the source and
  filled in a loop whose variables are suffixed with the depth.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..design.types import (
    AttributeExpr,
    UserTypeExpr,
    Bytes,
    Any as AnyType,
    is_primitive,
    is_object,
    is_array,
    is_map,
    as_object,
    as_array,
    as_map,
    resolve,
    underlying_attribute,
)
from ..utils.config import get_config
from ..utils.exceptions import UnsupportedTypeError
from ..utils.logging import PublicistLogger
from ..utils.naming import goify
from .templates.publicize import (
    PUBLICIZE_TEMPLATES,
    SIMPLE_PUBLICIZE,
    RECURSIVE_PUBLICIZE,
    OBJECT_PUBLICIZE,
    ARRAY_PUBLICIZE,
    MAP_PUBLICIZE,
    FIELD_GUARD,
)
from .templates.renderer import JinjaTemplateRenderer
from .typeref import go_type_ref, go_type_def

plog = PublicistLogger(__name__)

_renderer: Optional[JinjaTemplateRenderer] = None


def get_renderer() -> JinjaTemplateRenderer:
    """Get the renderer holding the publicizer templates."""
    global _renderer
    if _renderer is None:
        _renderer = JinjaTemplateRenderer(
            PUBLICIZE_TEMPLATES,
            {
                "publicizer": publicizer,
                "recursive_publicizer": recursive_publicizer,
                "gotyperef": go_type_ref,
                "gotypedef": go_type_def,
            },
        )
    return _renderer


def run_template(template_id: str, data: Dict[str, Any]) -> str:
    """Render a publicizer template."""
    plog.log_template_render(template_id, data.get("depth", 0))
    return get_renderer().render(template_id, data)


def recursive_publicizer(att: AttributeExpr, source: str, target: str, depth: int) -> str:
    """
    Publicize each field of the object ``att`` from ``source`` into
    ``target``, in declaration order.

    Required fields are copied unconditionally at ``depth``. Optional
    fields are wrapped in a nil check and copied one level deeper.
    """
    att = underlying_attribute(att)
    obj = as_object(att.type)
    if obj is None:
        return ""

    publications = []
    for nat in obj:
        field = goify(nat.name, True)
        source_field = f"{source}.{field}"
        target_field = f"{target}.{field}"
        child = nat.attribute
        dereference = (
            is_primitive(child.type)
            and resolve(child.type) not in (Bytes, AnyType)
            and not att.is_primitive_pointer(nat.name)
        )
        if att.is_required(nat.name):
            publications.append(
                publicizer(child, source_field, target_field, dereference, depth, False))
            continue
        publication = publicizer(child, source_field, target_field, dereference, depth + 1, False)
        publications.append(run_template(FIELD_GUARD, {
            "source_field": source_field,
            "publication": publication,
            "depth": depth,
        }))
    return "\n".join(publications)


def publicizer(att: AttributeExpr, source_field: str, target_field: str,
               dereference: bool = False, depth: int = 0, init: bool = False) -> str:
    """
    Publicize a single attribute based on its type.

    Args:
        att: Attribute to publicize
        source_field: Go expression holding the private value
        target_field: Go expression receiving the public value
        dereference: Whether the private value is a pointer to a value
            held directly by the public struct
        depth: Indentation and loop variable depth
        init: Whether the target is declared by the assignment

    Returns:
        Generated Go statements

    Raises:
        UnsupportedTypeError: if the type is not a primitive, object,
            array or map
        UnresolvableReferenceError: if a named type cannot be resolved
        TemplateRenderError: if a template fails to render
    """
    data = {
        "source_field": source_field,
        "target_field": target_field,
        "depth": depth,
        "att": att,
        "dereference": dereference,
        "init": init,
        "method_name": get_config().codegen.method_name,
    }
    dt = att.type
    if is_primitive(dt):
        return run_template(SIMPLE_PUBLICIZE, data)
    if is_object(dt):
        if isinstance(dt, UserTypeExpr):
            return run_template(RECURSIVE_PUBLICIZE, data)
        return run_template(OBJECT_PUBLICIZE, data)
    if is_array(dt):
        arr = as_array(dt)
        data["elem_type"] = arr.elem_type
        data["elem_primitive"] = is_primitive(arr.elem_type.type)
        return run_template(ARRAY_PUBLICIZE, data)
    if is_map(dt):
        m = as_map(dt)
        data["key_type"] = m.key_type
        data["elem_type"] = m.elem_type
        return run_template(MAP_PUBLICIZE, data)
    raise UnsupportedTypeError(dt.name() if dt is not None else "nil")
