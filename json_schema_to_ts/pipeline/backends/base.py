"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import GeneratorOptions
from ..schema_ast.nodes import Scalar, TypeNode


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from primitive type names to language types
    TYPE_MAP: dict[str, str] = {}

    # Indentation unit
    INDENT: str = "  "

    def __init__(self, options: GeneratorOptions | None = None):
        """
        Initialize the backend.

        Args:
            options: Rendering options
        """
        self.options = options or GeneratorOptions()

    @abstractmethod
    def generate(self, node: TypeNode) -> str:
        """
        Generate code for a type tree.

        Args:
            node: The root tree node

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def translate_type(self, node: TypeNode, indent: int) -> str:
        """
        Translate a tree node to a language-specific type expression.

        Args:
            node: The tree node
            indent: Current indentation level

        Returns:
            Language-specific type string
        """

    @abstractmethod
    def format_literal(self, value: Scalar) -> str:
        """
        Format a scalar value as a literal type.

        Args:
            value: The literal value

        Returns:
            Formatted literal string
        """

    def _indent(self, level: int) -> str:
        return self.INDENT * level
