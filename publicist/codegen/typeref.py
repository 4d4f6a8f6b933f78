"""
Go type rendering.

Renders the Go type expressions the publicizer needs when it allocates
public values: references to named types and inline struct definitions.
"""

from __future__ import annotations

from typing import List, Optional

from ..design.types import (
    AttributeExpr,
    DataType,
    Primitive,
    Object,
    Array,
    Map,
    UserTypeExpr,
    Bytes,
    Any,
    is_object,
    is_primitive,
    resolve,
)
from ..utils.config import get_config
from ..utils.exceptions import UnsupportedTypeError
from ..utils.naming import goify, tabs


def go_type_ref(dt: DataType, required: Optional[List[str]] = None, depth: int = 0,
                private: bool = False) -> str:
    """
    Go type used to reference values of ``dt``: objects, named or
    inline, are referenced through a pointer.
    """
    name = go_type_name(dt, required, depth, private)
    if is_object(dt):
        return f"*{name}"
    return name


def go_type_name(dt: DataType, required: Optional[List[str]] = None, depth: int = 0,
                 private: bool = False) -> str:
    """Go type name of ``dt``; inline objects render their struct definition."""
    if isinstance(dt, UserTypeExpr):
        return goify(dt.type_name, not private)
    if isinstance(dt, Primitive):
        return dt.go_type
    if isinstance(dt, Array):
        elem = dt.elem_type
        return "[]" + go_type_ref(elem.type, elem.all_required(), depth, private)
    if isinstance(dt, Map):
        key, elem = dt.key_type, dt.elem_type
        return "map[{}]{}".format(
            go_type_ref(key.type, key.all_required(), depth, private),
            go_type_ref(elem.type, elem.all_required(), depth, private),
        )
    if isinstance(dt, Object):
        return go_type_def(AttributeExpr(dt, required=list(required or [])), depth, private)
    raise UnsupportedTypeError(dt.name() if dt is not None else "nil")


def go_type_def(att: AttributeExpr, depth: int = 0, private: bool = False) -> str:
    """
    Go type definition of ``att``. Objects render as a struct whose
    fields are indented one level deeper than ``depth``.

    Public structs hold optional primitives through pointers; private
    structs hold every primitive except bytes and any through a pointer.
    """
    obj = att.type
    if not isinstance(obj, Object):
        return go_type_name(att.type, att.all_required(), depth, private)

    if not obj.fields:
        return "struct {}"

    config = get_config().codegen
    lines = ["struct {"]
    for nat in obj:
        child = nat.attribute
        field_type = go_type_ref(child.type, child.all_required(), depth + 1, private)
        if is_primitive(child.type):
            if private:
                pointer = resolve(child.type) not in (Bytes, Any)
            else:
                pointer = att.is_primitive_pointer(nat.name)
            if pointer:
                field_type = f"*{field_type}"
        line = f"{tabs(depth + 1, config.indent)}{goify(nat.name, True)} {field_type}"
        if config.json_tags:
            omit = "" if att.is_required(nat.name) else ",omitempty"
            line += f' `json:"{nat.name}{omit}"`'
        lines.append(line)
    lines.append(f"{tabs(depth, config.indent)}}}")
    return "\n".join(lines)
