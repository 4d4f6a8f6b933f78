"""
Go code generation.

Synthesizes the statements converting private structs into public ones
and assembles them into ``Publicize`` methods.
"""

from .publicizer import publicizer, recursive_publicizer, get_renderer
from .typeref import go_type_ref, go_type_name, go_type_def
from .generator import publicize_method, generate_publicizers, publicized_types

__all__ = [
    "publicizer",
    "recursive_publicizer",
    "get_renderer",
    "go_type_ref",
    "go_type_name",
    "go_type_def",
    "publicize_method",
    "generate_publicizers",
    "publicized_types",
]
