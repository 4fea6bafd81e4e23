"""
Schema AST module.

Contains the type tree node definitions and the JSON Schema parser.
"""

from __future__ import annotations

from .nodes import (
    AnyNode,
    ArrayNode,
    ConstNode,
    EnumNode,
    IntersectionNode,
    LiteralNode,
    NeverNode,
    ObjectNode,
    PrimitiveNode,
    PropertyDefinition,
    Scalar,
    TupleNode,
    TypeNode,
    UnionNode,
    is_simple,
    tree_to_dict,
)
from .parser import SchemaParser, parse_schema, validate_schema

__all__ = [
    "TypeNode",
    "Scalar",
    "PrimitiveNode",
    "ObjectNode",
    "PropertyDefinition",
    "ArrayNode",
    "TupleNode",
    "UnionNode",
    "IntersectionNode",
    "EnumNode",
    "ConstNode",
    "LiteralNode",
    "AnyNode",
    "NeverNode",
    "is_simple",
    "tree_to_dict",
    "SchemaParser",
    "parse_schema",
    "validate_schema",
]
