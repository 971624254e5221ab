"""
JSON recovery for LLM replies.

Models asked for JSON still wrap it in markdown fences, surround it with
prose, or emit stray backslashes. These helpers recover a JSON object from
such text or report that none is present.
"""

import json
import re
from typing import Any, Dict, List, Optional

# A backslash and the character it escapes
_ESCAPE_SEQUENCE = re.compile(r"\\(.?)", re.DOTALL)
_VALID_ESCAPE_CHARS = '"\\/bfnrtu'


def strip_markdown_fences(text: str) -> str:
    """Remove ``` fence lines, keeping the content between them."""
    stripped = text.strip()
    if "```" not in stripped:
        return stripped
    lines = [line for line in stripped.split("\n") if not line.strip().startswith("```")]
    return "\n".join(lines).strip()


def fix_json_escapes(text: str) -> str:
    """Double any backslash that does not start a valid JSON escape.

    Valid pairs such as an escaped backslash are consumed whole, so they
    are left untouched.
    """
    def _repair(match: "re.Match[str]") -> str:
        escaped = match.group(1)
        if escaped and escaped in _VALID_ESCAPE_CHARS:
            return match.group(0)
        return "\\\\" + escaped

    return _ESCAPE_SEQUENCE.sub(_repair, text)


def extract_largest_balanced_object(text: str) -> Optional[str]:
    """Return the largest balanced {...} span in `text`.

    Braces inside string literals are ignored. A mismatched closing
    bracket resets the scan.
    """
    if not text:
        return None

    in_string = False
    escape = False
    stack: List[str] = []
    start: Optional[int] = None
    best: Optional[str] = None

    for i, ch in enumerate(text):
        if in_string:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch in "{[":
            if not stack:
                start = i
            stack.append(ch)
        elif ch in "}]":
            if not stack:
                continue
            if (stack[-1] == "{") != (ch == "}"):
                stack.clear()
                start = None
                continue
            stack.pop()
            if not stack and start is not None:
                candidate = text[start:i + 1]
                if candidate.startswith("{") and (best is None or len(candidate) > len(best)):
                    best = candidate
                start = None

    return best


def _loads_object(text: str) -> Optional[Dict[str, Any]]:
    for candidate in (text, fix_json_escapes(text)):
        try:
            value = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        return value if isinstance(value, dict) else None
    return None


def parse_json_object(text: Optional[str]) -> Optional[Dict[str, Any]]:
    """Parse a JSON object out of an LLM reply.

    Tries the whole (fence-stripped) text first, then the largest balanced
    object inside it. Returns None when no object can be recovered; a
    top-level array or scalar counts as no object.
    """
    if not text or not text.strip():
        return None

    body = strip_markdown_fences(text)
    parsed = _loads_object(body)
    if parsed is not None:
        return parsed

    candidate = extract_largest_balanced_object(body)
    if candidate and candidate != body:
        return _loads_object(candidate)
    return None
