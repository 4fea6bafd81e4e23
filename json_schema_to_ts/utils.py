"""
Utility functions for the JSON Schema to TypeScript generator.
"""

import json
import math
import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")

# Property keys that can be written without quotes
_IDENTIFIER_PATTERN = re.compile(r"[a-zA-Z_$][a-zA-Z0-9_$]*")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots) to spaces."""
    return text.replace("_", " ").replace("-", " ").replace(".", " ")


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, kebab-case or camelCase text to PascalCase.

    Examples:
        "user_profile" -> "UserProfile"
        "order-item.schema" -> "OrderItemSchema"
        "actionTemplate" -> "ActionTemplate"
    """
    if not text:
        return ""
    words = _WORD_PATTERN.findall(_normalize_separators(text))
    return "".join(word.capitalize() for word in words if word)


def is_valid_identifier(key: str) -> bool:
    """Check whether a property key can be written unquoted in TypeScript."""
    return bool(_IDENTIFIER_PATTERN.fullmatch(key))


def to_json_literal(value) -> str:
    """Render a scalar the way JSON.stringify does.

    Examples:
        "a\"b" -> '"a\\"b"'
        2.0 -> "2"
        None -> "null"
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            return "null"
        if value.is_integer():
            return str(int(value))
    return json.dumps(value, ensure_ascii=False)


def format_property_key(key: str) -> str:
    """Quote a property key when it is not a valid identifier."""
    return key if is_valid_identifier(key) else to_json_literal(key)
