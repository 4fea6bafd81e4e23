"""JSON Schema to TypeScript Generator

A Python package for converting JSON Schema definitions into TypeScript
type declarations, and for describing tool parameter schemas as
TypeScript function signatures.
"""

__version__ = "1.0.0"

from .api import ConversionResult, convert, json_schema_to_typescript
from .pipeline import (
    ConversionOptions,
    GeneratorOptions,
    ParseError,
    SchemaParser,
    TypeNode,
    TypeScriptBackend,
    generate_typescript,
    parse_schema,
)
from .tool_types import ToolDefinition, ToolTypeGenerator, generate_tool_summary, generate_tool_types

__all__ = [
    "convert",
    "json_schema_to_typescript",
    "ConversionResult",
    "ConversionOptions",
    "GeneratorOptions",
    "ParseError",
    "SchemaParser",
    "TypeScriptBackend",
    "TypeNode",
    "parse_schema",
    "generate_typescript",
    "ToolDefinition",
    "ToolTypeGenerator",
    "generate_tool_types",
    "generate_tool_summary",
]
