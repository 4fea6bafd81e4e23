"""
Code generation backends.
"""

from __future__ import annotations

from .base import CodeBackend
from .typescript_backend import TypeScriptBackend, generate_typescript

__all__ = [
    "CodeBackend",
    "TypeScriptBackend",
    "generate_typescript",
]
