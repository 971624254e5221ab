"""
Narration drafting
"""

from .drafter import (
    ScriptDrafter,
    ScriptDraft,
    parse_script_draft,
    build_user_content,
    estimate_duration_from_words,
    DEFAULT_TARGET_AUDIENCE,
)

__all__ = [
    "ScriptDrafter",
    "ScriptDraft",
    "parse_script_draft",
    "build_user_content",
    "estimate_duration_from_words",
    "DEFAULT_TARGET_AUDIENCE",
]
