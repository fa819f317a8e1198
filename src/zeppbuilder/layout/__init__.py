"""Natural-language layout generation."""

from .generator import JSONModel, LayoutGenerationError, LayoutGenerator
from .parser import parse_layout, validate_layout
from .prompt import LAYOUT_WIDGET_TYPES, RESPONSE_SCHEMA, SYSTEM_PROMPT

__all__ = [
    "JSONModel",
    "LayoutGenerationError",
    "LayoutGenerator",
    "parse_layout",
    "validate_layout",
    "LAYOUT_WIDGET_TYPES",
    "RESPONSE_SCHEMA",
    "SYSTEM_PROMPT",
]
