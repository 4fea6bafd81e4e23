"""
JSON Schema parser that builds a type tree.

Phase 1 of the pipeline: map a schema dict onto tree nodes without
following references or doing any TypeScript-specific processing.
"""

from __future__ import annotations

import logging
from typing import Any

from ..errors import ParseError
from .nodes import (
    AnyNode,
    ArrayNode,
    ConstNode,
    EnumNode,
    IntersectionNode,
    NeverNode,
    ObjectNode,
    PrimitiveNode,
    PropertyDefinition,
    TupleNode,
    TypeNode,
    UnionNode,
)

logger = logging.getLogger(__name__)


def validate_schema(schema: Any) -> None:
    """
    Check that a top-level schema is a JSON object.

    Raises:
        ParseError: If the schema is None, an array or a scalar
    """
    if schema is None:
        raise ParseError("Schema cannot be null or undefined")
    if isinstance(schema, (list, tuple)):
        raise ParseError("Schema must be an object, got array")
    if not isinstance(schema, dict):
        raise ParseError(f"Schema must be an object, got {_describe_kind(schema)}")


def _describe_kind(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


class SchemaParser:
    """Parses JSON Schema into a type tree."""

    # Scalar type names mapped to the primitive they become
    PRIMITIVE_TYPES = {
        "string": "string",
        "number": "number",
        "integer": "number",
        "boolean": "boolean",
        "null": "null",
    }

    def parse(self, schema: dict[str, Any]) -> TypeNode:
        """
        Parse a JSON Schema into a tree.

        Args:
            schema: The JSON Schema dictionary

        Returns:
            The root tree node

        Raises:
            ParseError: If the schema is not an object or uses an unknown type
        """
        validate_schema(schema)
        return self._parse_schema_node(schema)

    def _parse_schema_node(self, schema: Any) -> TypeNode:
        """Parse a nested schema, then apply ``nullable``."""
        if not isinstance(schema, dict):
            logger.debug("Treating non-object schema %r as any", schema)
            return AnyNode()

        node = self._parse_without_nullable(schema)

        if schema.get("nullable") is True:
            node = UnionNode(types=(node, PrimitiveNode(type_name="null")))

        return node

    def _parse_without_nullable(self, schema: dict[str, Any]) -> TypeNode:
        # const wins over everything, including a null value
        if "const" in schema:
            return ConstNode(value=schema["const"])

        if isinstance(schema.get("enum"), list):
            return EnumNode(values=tuple(schema["enum"]))

        if isinstance(schema.get("allOf"), list):
            types = self._parse_members(schema["allOf"])
            if len(types) == 1:
                return types[0]
            return IntersectionNode(types=types)

        variants = schema.get("oneOf")
        if not isinstance(variants, list):
            variants = schema.get("anyOf")
        if isinstance(variants, list):
            types = self._parse_members(variants)
            if len(types) == 1:
                return types[0]
            return UnionNode(types=types)

        type_value = schema.get("type")
        if type_value or isinstance(type_value, list):
            return self._parse_type(schema, type_value)

        return AnyNode()

    def _parse_members(self, schemas: list[Any]) -> tuple[TypeNode, ...]:
        return tuple(self._parse_schema_node(member) for member in schemas)

    def _parse_type(self, schema: dict[str, Any], type_value: Any) -> TypeNode:
        """Parse a type-based node, sharing sibling keywords across type lists."""
        if isinstance(type_value, list):
            if not type_value:
                return NeverNode()
            if len(type_value) == 1:
                return self._parse_type(schema, type_value[0])
            return UnionNode(types=tuple(self._parse_type(schema, t) for t in type_value))

        if isinstance(type_value, str):
            if type_value in self.PRIMITIVE_TYPES:
                return PrimitiveNode(type_name=self.PRIMITIVE_TYPES[type_value])
            if type_value == "object":
                return self._parse_object_node(schema)
            if type_value == "array":
                return self._parse_array_node(schema)

        raise ParseError(f"Unknown type: {type_value}")

    def _parse_object_node(self, schema: dict[str, Any]) -> ObjectNode:
        """Parse an object type node."""
        required = schema.get("required")
        required_fields = {name for name in required if isinstance(name, str)} if isinstance(required, list) else set()

        properties_schema = schema.get("properties")
        properties: dict[str, PropertyDefinition] = {}
        if isinstance(properties_schema, dict):
            for prop_name, prop_schema in properties_schema.items():
                properties[prop_name] = PropertyDefinition(
                    type=self._parse_schema_node(prop_schema),
                    required=prop_name in required_fields,
                )

        additional = schema.get("additionalProperties")
        if isinstance(additional, bool):
            additional_properties: TypeNode | bool | None = additional
        elif isinstance(additional, dict):
            additional_properties = self._parse_schema_node(additional)
        else:
            additional_properties = None

        return ObjectNode(properties=properties, additional_properties=additional_properties)

    def _parse_array_node(self, schema: dict[str, Any]) -> TypeNode:
        """Parse an array type node."""
        items_schema = schema.get("items")

        if isinstance(items_schema, list):
            # Tuple type
            return TupleNode(items=self._parse_members(items_schema))

        if isinstance(items_schema, dict):
            return ArrayNode(items=self._parse_schema_node(items_schema))

        return ArrayNode(items=AnyNode())


def parse_schema(schema: dict[str, Any]) -> TypeNode:
    """Parse a JSON Schema into a type tree."""
    return SchemaParser().parse(schema)
