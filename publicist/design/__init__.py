"""
Design expressions and types.

This package holds the expressions the DSL builds (responses, resources,
actions and the root) and the type system attributes are built from.
"""

from .types import (
    DataType,
    Primitive,
    AttributeExpr,
    NamedAttributeExpr,
    Object,
    Array,
    Map,
    UserTypeExpr,
    MediaTypeExpr,
    Boolean,
    Int,
    Int32,
    Int64,
    UInt,
    UInt32,
    UInt64,
    Float32,
    Float64,
    String,
    Bytes,
    Any,
    array_of,
    map_of,
    resolve,
    is_primitive,
    is_object,
    is_array,
    is_map,
    as_object,
    as_array,
    as_map,
    underlying_attribute,
)
from .expressions import HTTPResponseExpr, ResourceExpr, ActionExpr, HeadersExpr
from .root import RootExpr, get_root

__all__ = [
    "DataType",
    "Primitive",
    "AttributeExpr",
    "NamedAttributeExpr",
    "Object",
    "Array",
    "Map",
    "UserTypeExpr",
    "MediaTypeExpr",
    "Boolean",
    "Int",
    "Int32",
    "Int64",
    "UInt",
    "UInt32",
    "UInt64",
    "Float32",
    "Float64",
    "String",
    "Bytes",
    "Any",
    "array_of",
    "map_of",
    "resolve",
    "is_primitive",
    "is_object",
    "is_array",
    "is_map",
    "as_object",
    "as_array",
    "as_map",
    "underlying_attribute",
    "HTTPResponseExpr",
    "ResourceExpr",
    "ActionExpr",
    "HeadersExpr",
    "RootExpr",
    "get_root",
]
