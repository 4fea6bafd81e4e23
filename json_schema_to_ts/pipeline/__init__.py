"""
Pipeline - JSON Schema to TypeScript generator.

This module converts JSON Schema into TypeScript in two phases:

1. Phase 1 (Parser): Parse JSON Schema into a type tree
2. Phase 2 (Backend): Render the type tree as TypeScript source
"""

from __future__ import annotations

from .backends import TypeScriptBackend, generate_typescript
from .config import ConversionOptions, GeneratorOptions
from .errors import ParseError
from .schema_ast import SchemaParser, TypeNode, parse_schema

__all__ = [
    "SchemaParser",
    "TypeScriptBackend",
    "TypeNode",
    "GeneratorOptions",
    "ConversionOptions",
    "ParseError",
    "parse_schema",
    "generate_typescript",
]
