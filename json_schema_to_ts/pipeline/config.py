"""
Configuration for the TypeScript generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class GeneratorOptions:
    """Rendering options for TypeScript generation."""

    # Name for an exported declaration (no declaration when empty)
    type_name: str | None = None

    # Use 'type' instead of 'interface' for objects
    use_type_alias: bool = True

    # Initial indentation level (two spaces per level)
    indent: int = 0

    # Add explanatory comments (reserved, currently has no effect)
    add_comments: bool = False

    # camelCase spellings accepted by from_dict
    ALIASES = {
        "typeName": "type_name",
        "useTypeAlias": "use_type_alias",
        "addComments": "add_comments",
    }

    @classmethod
    def from_dict(cls, d: dict):
        """Create options from a dictionary, ignoring unknown keys."""
        options = cls()
        for k, v in d.items():
            k = cls.ALIASES.get(k, k)
            if k in {f.name for f in fields(options)}:
                setattr(options, k, v)
        return options

    def to_dict(self) -> dict:
        """Convert options to a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class ConversionOptions(GeneratorOptions):
    """Options for a full schema conversion."""

    # Return the parsed tree instead of TypeScript code
    return_tree: bool = False

    ALIASES = {
        **GeneratorOptions.ALIASES,
        "returnTree": "return_tree",
        "returnAST": "return_tree",
    }
