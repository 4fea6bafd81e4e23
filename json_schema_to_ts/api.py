"""
Public conversion API.

Composes the parser and the TypeScript backend into one-call helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .pipeline import ConversionOptions, TypeNode, generate_typescript, parse_schema
from .pipeline.schema_ast import validate_schema


@dataclass
class ConversionResult:
    """Result of a conversion: TypeScript code, or the parsed tree when requested."""

    code: str | None = None
    tree: TypeNode | None = None


def json_schema_to_typescript(schema: Any, options: ConversionOptions | dict | None = None) -> ConversionResult:
    """
    Convert a JSON Schema into TypeScript.

    Args:
        schema: The JSON Schema, validated to be an object
        options: Conversion options (or a dict accepted by ``ConversionOptions.from_dict``)

    Returns:
        ConversionResult with ``tree`` set when ``return_tree`` is enabled,
        ``code`` otherwise

    Raises:
        ParseError: If the schema is not an object or uses an unknown type

    Example:
        >>> result = json_schema_to_typescript(
        ...     {"type": "object", "properties": {"name": {"type": "string"}}, "required": ["name"]},
        ...     {"type_name": "User"},
        ... )
        >>> print(result.code)
        export type User = {
          name: string;
        };
    """
    if options is None:
        options = ConversionOptions()
    elif isinstance(options, dict):
        options = ConversionOptions.from_dict(options)

    validate_schema(schema)
    tree = parse_schema(schema)

    if options.return_tree:
        return ConversionResult(tree=tree)

    return ConversionResult(code=generate_typescript(tree, options))


def convert(schema: Any, type_name: str | None = None) -> str:
    """Convert a JSON Schema into TypeScript code, optionally as a named declaration."""
    result = json_schema_to_typescript(schema, ConversionOptions(type_name=type_name))
    return result.code or ""
