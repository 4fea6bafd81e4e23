"""
Tool type generation.

Renders tool definitions as TypeScript ``declare function`` signatures so
that the parameter types of each tool can be described in an LLM prompt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jinja2

from .pipeline import ParseError, generate_typescript, parse_schema

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates" / "typescript"


@dataclass
class ToolDefinition:
    """A callable tool described by a name, a description and a parameters schema."""

    name: str = ""
    description: str = ""
    parameters: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: dict) -> ToolDefinition:
        """Create a tool definition from a dictionary."""
        return ToolDefinition(
            name=d.get("name", ""),
            description=d.get("description", ""),
            parameters=d.get("parameters", {}),
        )


class ToolTypeGenerator:
    """Generates TypeScript function signatures for tools."""

    # Type used when a tool's parameters schema cannot be parsed
    FALLBACK_TYPE = "any"

    def __init__(self):
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.signature_template = self.jinja_env.get_template("tool_signature.ts.jinja2")

    def generate(self, tools: list[ToolDefinition]) -> str:
        """Generate signatures for all tools, separated by blank lines."""
        return "\n\n".join(self.generate_signature(tool) for tool in tools)

    def generate_signature(self, tool: ToolDefinition) -> str:
        """Generate the signature of a single tool."""
        return self.signature_template.render(
            name=tool.name,
            description_lines=tool.description.split("\n"),
            params=self._param_docs(tool.parameters),
            params_type=self.params_type(tool),
        )

    def params_type(self, tool: ToolDefinition) -> str:
        """Render the parameters type of a tool, falling back to ``any``."""
        try:
            return generate_typescript(parse_schema(tool.parameters))
        except ParseError as e:
            logger.warning("Invalid parameters schema for tool '%s', using %s: %s", tool.name, self.FALLBACK_TYPE, e)
            return self.FALLBACK_TYPE

    def _param_docs(self, schema: Any) -> list[dict[str, Any]]:
        """Collect @param documentation for the top-level properties."""
        if not isinstance(schema, dict) or not isinstance(schema.get("properties"), dict):
            return []

        required = schema.get("required")
        required_fields = {n for n in required if isinstance(n, str)} if isinstance(required, list) else set()

        params = []
        for name, prop_schema in schema["properties"].items():
            description = prop_schema.get("description") if isinstance(prop_schema, dict) else None
            params.append(
                {
                    "name": name,
                    "required": name in required_fields,
                    "description": description or "",
                }
            )
        return params


def generate_tool_types(tools: list[ToolDefinition]) -> str:
    """Generate TypeScript signatures for a list of tools."""
    return ToolTypeGenerator().generate(tools)


def generate_tool_summary(tools: list[ToolDefinition]) -> str:
    """Generate a one-line summary per tool: ``- name: first description line``."""
    lines = []
    for tool in tools:
        first_line = tool.description.split("\n")[0]
        lines.append(f"- {tool.name}: {first_line}")
    return "\n".join(lines)
