"""
Parsing helpers for model output
"""

from .json_parser import (
    parse_json_object,
    strip_markdown_fences,
    fix_json_escapes,
    extract_largest_balanced_object,
)

__all__ = [
    "parse_json_object",
    "strip_markdown_fences",
    "fix_json_escapes",
    "extract_largest_balanced_object",
]
