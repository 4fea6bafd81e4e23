"""
TypeScript code generation backend.

Renders a type tree as a TypeScript type expression, optionally wrapped
in an exported ``type`` or ``interface`` declaration.
"""

from __future__ import annotations

from typing import assert_never

from ...utils import format_property_key, to_json_literal
from ..config import GeneratorOptions
from ..schema_ast.nodes import (
    AnyNode,
    ArrayNode,
    ConstNode,
    EnumNode,
    IntersectionNode,
    LiteralNode,
    NeverNode,
    ObjectNode,
    PrimitiveNode,
    Scalar,
    TupleNode,
    TypeNode,
    UnionNode,
    is_simple,
)
from .base import CodeBackend


class TypeScriptBackend(CodeBackend):
    """TypeScript code generation backend."""

    TYPE_MAP = {
        "string": "string",
        "number": "number",
        "boolean": "boolean",
        "null": "null",
        "any": "any",
        "never": "never",
    }

    UNION_SEPARATOR = " | "
    INTERSECTION_SEPARATOR = " & "

    def generate(self, node: TypeNode) -> str:
        """Generate TypeScript code for a tree, with a declaration when named."""
        type_definition = self.translate_type(node, self.options.indent)

        if self.options.type_name:
            # interface is only used for objects when aliases are not wanted
            if self.options.use_type_alias or not isinstance(node, ObjectNode):
                keyword, assignment = "type", " = "
            else:
                keyword, assignment = "interface", " "
            return f"export {keyword} {self.options.type_name}{assignment}{type_definition};"

        return type_definition

    def translate_type(self, node: TypeNode, indent: int) -> str:
        """Translate a tree node to a TypeScript type expression."""
        if isinstance(node, PrimitiveNode):
            return self.TYPE_MAP[node.type_name]
        if isinstance(node, AnyNode):
            return self.TYPE_MAP["any"]
        if isinstance(node, NeverNode):
            return self.TYPE_MAP["never"]
        if isinstance(node, (ConstNode, LiteralNode)):
            return self.format_literal(node.value)
        if isinstance(node, EnumNode):
            return self.UNION_SEPARATOR.join(self.format_literal(v) for v in node.values)
        if isinstance(node, UnionNode):
            return self._translate_union(node, indent)
        if isinstance(node, IntersectionNode):
            return self._translate_intersection(node, indent)
        if isinstance(node, ArrayNode):
            return self._translate_array(node, indent)
        if isinstance(node, TupleNode):
            return self._translate_tuple(node, indent)
        if isinstance(node, ObjectNode):
            return self._translate_object(node, indent)
        assert_never(node)

    def format_literal(self, value: Scalar) -> str:
        """Format a scalar as a TypeScript literal type."""
        return to_json_literal(value)

    def _translate_union(self, node: UnionNode, indent: int) -> str:
        if not node.types:
            return self.TYPE_MAP["never"]
        if len(node.types) == 1:
            return self.translate_type(node.types[0], indent)

        if all(is_simple(t) for t in node.types):
            return self.UNION_SEPARATOR.join(self.translate_type(t, indent) for t in node.types)

        parts = []
        for t in node.types:
            generated = self.translate_type(t, indent)
            # Multi-line object literals are parenthesized inside unions
            if "\n" in generated and isinstance(t, ObjectNode):
                generated = f"({generated})"
            parts.append(generated)
        return self.UNION_SEPARATOR.join(parts)

    def _translate_intersection(self, node: IntersectionNode, indent: int) -> str:
        if not node.types:
            return self.TYPE_MAP["never"]
        if len(node.types) == 1:
            return self.translate_type(node.types[0], indent)

        parts = []
        for t in node.types:
            generated = self.translate_type(t, indent)
            if isinstance(t, UnionNode) or ("\n" in generated and isinstance(t, ObjectNode)):
                generated = f"({generated})"
            parts.append(generated)
        return self.INTERSECTION_SEPARATOR.join(parts)

    def _translate_array(self, node: ArrayNode, indent: int) -> str:
        item_type = self.translate_type(node.items, indent)

        if isinstance(node.items, (UnionNode, IntersectionNode, EnumNode)):
            return f"({item_type})[]"

        # Simple items, objects, nested arrays and tuples all use T[]
        return f"{item_type}[]"

    def _translate_tuple(self, node: TupleNode, indent: int) -> str:
        if not node.items:
            return "[]"
        elements = [self.translate_type(item, indent) for item in node.items]
        return f"[{', '.join(elements)}]"

    def _translate_object(self, node: ObjectNode, indent: int) -> str:
        additional = node.additional_properties

        if not node.properties and (additional is None or additional is False):
            return "{}"

        current_indent = self._indent(indent)
        next_indent = self._indent(indent + 1)

        lines = ["{"]
        for key, prop in node.properties.items():
            optional = "" if prop.required else "?"
            prop_type = self.translate_type(prop.type, indent + 1)
            lines.append(f"{next_indent}{format_property_key(key)}{optional}: {prop_type};")

        if additional is True:
            lines.append(f"{next_indent}[key: string]: {self.TYPE_MAP['any']};")
        elif additional is not None and additional is not False:
            additional_type = self.translate_type(additional, indent + 1)
            lines.append(f"{next_indent}[key: string]: {additional_type};")

        lines.append(f"{current_indent}}}")
        return "\n".join(lines)


def generate_typescript(node: TypeNode, options: GeneratorOptions | dict | None = None) -> str:
    """Render a type tree as TypeScript."""
    if isinstance(options, dict):
        options = GeneratorOptions.from_dict(options)
    return TypeScriptBackend(options).generate(node)
