"""
Schema AST - immutable description of component arguments.
"""

from .nodes import ArgumentSchema, ComponentSchema, SchemaKind, SchemaType
from .parser import load_catalog, parse_argument, parse_arguments, parse_catalog, parse_component, parse_type

__all__ = [
    "ArgumentSchema",
    "ComponentSchema",
    "SchemaKind",
    "SchemaType",
    "load_catalog",
    "parse_argument",
    "parse_arguments",
    "parse_catalog",
    "parse_component",
    "parse_type",
]
