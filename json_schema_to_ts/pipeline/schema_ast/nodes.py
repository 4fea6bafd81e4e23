"""
Tree node definitions for parsed JSON Schema.

These nodes describe the shape of a type independently of the schema
syntax it was parsed from. The set of variants is closed: every node is
one of the dataclasses joined in ``TypeNode``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

# JSON scalar values usable as literal types
Scalar = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class PrimitiveNode:
    """A primitive type (string, number, boolean, null)."""

    type_name: str = "string"


@dataclass(frozen=True)
class PropertyDefinition:
    """A property of an object type."""

    type: TypeNode
    required: bool = False


@dataclass(frozen=True)
class ObjectNode:
    """An object type with ordered properties."""

    properties: dict[str, PropertyDefinition] = field(default_factory=dict)

    # None: absent, False: forbidden, True: any value, TypeNode: typed values
    additional_properties: TypeNode | bool | None = None


@dataclass(frozen=True)
class ArrayNode:
    """A homogeneous array."""

    items: TypeNode


@dataclass(frozen=True)
class TupleNode:
    """A fixed-length array with a type per position."""

    items: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class UnionNode:
    """A union of types (oneOf, anyOf, type lists, nullable)."""

    types: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class IntersectionNode:
    """An intersection of types (allOf)."""

    types: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class EnumNode:
    """A fixed set of literal values."""

    values: tuple[Scalar, ...] = ()


@dataclass(frozen=True)
class ConstNode:
    """A single constant value."""

    value: Scalar = None


@dataclass(frozen=True)
class LiteralNode:
    """A single literal value (used internally, renders like ConstNode)."""

    value: Scalar = None


@dataclass(frozen=True)
class AnyNode:
    """Unconstrained type."""


@dataclass(frozen=True)
class NeverNode:
    """Uninhabited type."""


TypeNode = Union[
    PrimitiveNode,
    ObjectNode,
    ArrayNode,
    TupleNode,
    UnionNode,
    IntersectionNode,
    EnumNode,
    ConstNode,
    LiteralNode,
    AnyNode,
    NeverNode,
]

# Nodes that render inline and never need parentheses
SIMPLE_NODES = (PrimitiveNode, LiteralNode, ConstNode, AnyNode, NeverNode)


def is_simple(node: TypeNode) -> bool:
    """Return True for nodes that render as a single inline token."""
    return isinstance(node, SIMPLE_NODES)


def tree_to_dict(node: TypeNode) -> dict:
    """Convert a tree into a JSON-compatible dict with a ``kind`` tag per node."""
    if isinstance(node, PrimitiveNode):
        return {"kind": "primitive", "type": node.type_name}
    if isinstance(node, ObjectNode):
        result: dict = {
            "kind": "object",
            "properties": {
                name: {"type": tree_to_dict(prop.type), "required": prop.required}
                for name, prop in node.properties.items()
            },
        }
        if isinstance(node.additional_properties, bool):
            result["additionalProperties"] = node.additional_properties
        elif node.additional_properties is not None:
            result["additionalProperties"] = tree_to_dict(node.additional_properties)
        return result
    if isinstance(node, ArrayNode):
        return {"kind": "array", "items": tree_to_dict(node.items)}
    if isinstance(node, TupleNode):
        return {"kind": "tuple", "items": [tree_to_dict(item) for item in node.items]}
    if isinstance(node, UnionNode):
        return {"kind": "union", "types": [tree_to_dict(t) for t in node.types]}
    if isinstance(node, IntersectionNode):
        return {"kind": "intersection", "types": [tree_to_dict(t) for t in node.types]}
    if isinstance(node, EnumNode):
        return {"kind": "enum", "values": list(node.values)}
    if isinstance(node, ConstNode):
        return {"kind": "const", "value": node.value}
    if isinstance(node, LiteralNode):
        return {"kind": "literal", "value": node.value}
    if isinstance(node, AnyNode):
        return {"kind": "any"}
    if isinstance(node, NeverNode):
        return {"kind": "never"}
    raise TypeError(f"Unknown tree node: {node!r}")
