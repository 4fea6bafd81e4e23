"""
Errors raised by the schema conversion pipeline.
"""

from __future__ import annotations


class ParseError(Exception):
    """Raised when a JSON Schema cannot be parsed.

    This happens when:
    - The top-level schema is missing or is not an object
    - A ``type`` keyword names a type that is not supported
    """
