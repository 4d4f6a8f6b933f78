"""
Design Type System.

This module defines the structural types attributes are built from
(primitives, objects, arrays, maps and named user types) together with
the classification predicates the code generators dispatch on.
"""

from __future__ import annotations

from typing import Iterator, List, Optional
from dataclasses import dataclass, field

from ..utils.exceptions import UnresolvableReferenceError


class DataType:
    """Base class of every design type."""

    def name(self) -> str:
        raise NotImplementedError


class Primitive(DataType):
    """A scalar type, rendered as the Go type of the same kind."""

    def __init__(self, kind: str, go_type: str):
        self.kind = kind
        self.go_type = go_type

    def name(self) -> str:
        return self.kind

    def __repr__(self) -> str:
        return f"Primitive({self.kind})"


Boolean = Primitive("boolean", "bool")
Int = Primitive("int", "int")
Int32 = Primitive("int32", "int32")
Int64 = Primitive("int64", "int64")
UInt = Primitive("uint", "uint")
UInt32 = Primitive("uint32", "uint32")
UInt64 = Primitive("uint64", "uint64")
Float32 = Primitive("float32", "float32")
Float64 = Primitive("float64", "float64")
String = Primitive("string", "string")
Bytes = Primitive("bytes", "[]byte")
Any = Primitive("any", "interface{}")


@dataclass
class AttributeExpr:
    """
    An attribute: a type plus the metadata that applies to its use site.

    ``required`` lists the names of the child attributes that must be
    present when the type is an object. Optionality of a field is
    therefore a property of the enclosing attribute, not of the field.
    """

    type: Optional[DataType] = None
    description: str = ""
    required: List[str] = field(default_factory=list)
    default_value: object = None

    def is_required(self, name: str) -> bool:
        """Whether the child attribute ``name`` is required."""
        return name in self.required

    def all_required(self) -> List[str]:
        """Names of the required child attributes."""
        return list(self.required)

    def has_default_value(self, name: str) -> bool:
        """Whether the child attribute ``name`` declares a default."""
        obj = as_object(self.type)
        if obj is None:
            return False
        child = obj.attribute(name)
        return child is not None and child.default_value is not None

    def is_primitive_pointer(self, name: str) -> bool:
        """
        Whether the child attribute ``name`` is rendered as a pointer
        to a primitive in the public struct.

        Optional primitives without a default are pointers; bytes and
        any are reference types already and never are.
        """
        obj = as_object(self.type)
        if obj is None:
            return False
        child = obj.attribute(name)
        if child is None or not is_primitive(child.type):
            return False
        if resolve(child.type) in (Bytes, Any):
            return False
        return not self.is_required(name) and child.default_value is None

    def dup(self) -> "AttributeExpr":
        """
        Copy the attribute. Inline objects are copied field by field;
        named types are shared.
        """
        dt = self.type
        if isinstance(dt, Object):
            dt = dt.dup()
        return AttributeExpr(
            type=dt,
            description=self.description,
            required=list(self.required),
            default_value=self.default_value,
        )


@dataclass
class NamedAttributeExpr:
    """An object field."""

    name: str
    attribute: AttributeExpr


class Object(DataType):
    """An ordered list of named attributes."""

    def __init__(self, fields: Optional[List[NamedAttributeExpr]] = None):
        self.fields: List[NamedAttributeExpr] = list(fields or [])

    def name(self) -> str:
        return "object"

    def attribute(self, name: str) -> Optional[AttributeExpr]:
        for nat in self.fields:
            if nat.name == name:
                return nat.attribute
        return None

    def set(self, name: str, attribute: AttributeExpr) -> None:
        """Add or replace the field ``name`` keeping declaration order."""
        for nat in self.fields:
            if nat.name == name:
                nat.attribute = attribute
                return
        self.fields.append(NamedAttributeExpr(name, attribute))

    def dup(self) -> "Object":
        return Object([NamedAttributeExpr(nat.name, nat.attribute.dup()) for nat in self.fields])

    def __iter__(self) -> Iterator[NamedAttributeExpr]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


class Array(DataType):
    """A list of elements of the same type."""

    def __init__(self, elem_type: AttributeExpr):
        self.elem_type = elem_type

    def name(self) -> str:
        return "array"


class Map(DataType):
    """A dictionary from keys of one type to values of another."""

    def __init__(self, key_type: AttributeExpr, elem_type: AttributeExpr):
        self.key_type = key_type
        self.elem_type = elem_type

    def name(self) -> str:
        return "map"


class UserTypeExpr(DataType):
    """
    A named type defined in the design.

    The underlying attribute may itself be typed by another user type.
    A user type with no attribute is a dangling reference.
    """

    def __init__(self, type_name: str, attribute: Optional[AttributeExpr] = None):
        self.type_name = type_name
        self.attribute = attribute

    def name(self) -> str:
        return self.type_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type_name!r})"


class MediaTypeExpr(UserTypeExpr):
    """A user type that also defines the media type identifier of responses."""

    def __init__(self, type_name: str, identifier: str, attribute: Optional[AttributeExpr] = None):
        super().__init__(type_name, attribute)
        self.identifier = identifier


def array_of(dt: DataType) -> Array:
    """Shorthand for an array whose elements are of type ``dt``."""
    return Array(AttributeExpr(dt))


def map_of(key: DataType, elem: DataType) -> Map:
    """Shorthand for a map from ``key`` to ``elem``."""
    return Map(AttributeExpr(key), AttributeExpr(elem))


# =============================================================================
# Classification
# =============================================================================

def resolve(dt: Optional[DataType]) -> Optional[DataType]:
    """
    Unwrap user types until a structural type is reached.

    References are followed iteratively. A reference cycle or a user
    type without an attribute raises UnresolvableReferenceError.
    """
    seen = set()
    while isinstance(dt, UserTypeExpr):
        if id(dt) in seen:
            raise UnresolvableReferenceError(dt.type_name, "reference cycle")
        seen.add(id(dt))
        if dt.attribute is None or dt.attribute.type is None:
            raise UnresolvableReferenceError(dt.type_name, "type has no definition")
        dt = dt.attribute.type
    return dt


def is_primitive(dt: Optional[DataType]) -> bool:
    return isinstance(resolve(dt), Primitive)


def is_object(dt: Optional[DataType]) -> bool:
    return isinstance(resolve(dt), Object)


def is_array(dt: Optional[DataType]) -> bool:
    return isinstance(resolve(dt), Array)


def is_map(dt: Optional[DataType]) -> bool:
    return isinstance(resolve(dt), Map)


def as_object(dt: Optional[DataType]) -> Optional[Object]:
    """Return the object underlying ``dt`` or None."""
    resolved = resolve(dt)
    return resolved if isinstance(resolved, Object) else None


def as_array(dt: Optional[DataType]) -> Optional[Array]:
    """Return the array underlying ``dt`` or None."""
    resolved = resolve(dt)
    return resolved if isinstance(resolved, Array) else None


def as_map(dt: Optional[DataType]) -> Optional[Map]:
    """Return the map underlying ``dt`` or None."""
    resolved = resolve(dt)
    return resolved if isinstance(resolved, Map) else None


def underlying_attribute(att: AttributeExpr) -> AttributeExpr:
    """
    Return the attribute that carries the structural type of ``att``.

    For an attribute typed by a user type this is the user type's own
    attribute, which holds the required fields of the object.
    """
    resolve(att.type)
    while isinstance(att.type, UserTypeExpr):
        att = att.type.attribute
    return att
