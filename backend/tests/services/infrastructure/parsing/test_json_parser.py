"""
Tests for contentcraft.services.infrastructure.parsing.json_parser

Recovery of JSON objects from model replies.
"""

import json

from contentcraft.services.infrastructure.parsing.json_parser import (
    extract_largest_balanced_object,
    fix_json_escapes,
    parse_json_object,
    strip_markdown_fences,
)


class TestJsonEscapes:

    def test_invalid_escapes_are_doubled(self):
        fixed = fix_json_escapes(r'{"key": "value\nwith\invalid\escape"}')
        assert r"\n" in fixed
        assert r"\\i" in fixed
        assert json.loads(fixed)["key"] == "value\nwith\\invalid\\escape"

    def test_lone_backslash_path(self):
        assert fix_json_escapes(r"C:\Users\Name") == r"C:\\Users\\Name"

    def test_escaped_backslash_untouched(self):
        text = r'{"path": "a\\b"}'
        assert fix_json_escapes(text) == text

    def test_trailing_backslash(self):
        assert fix_json_escapes("abc\\") == "abc\\\\"


class TestMarkdownFences:

    def test_strips_fences(self):
        assert strip_markdown_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain_text_untouched(self):
        assert strip_markdown_fences('  {"a": 1}  ') == '{"a": 1}'


class TestBalancedObject:

    def test_ignores_braces_in_strings(self):
        text = 'prefix {"a": "}{", "b": {"c": 1}} suffix'
        assert extract_largest_balanced_object(text) == '{"a": "}{", "b": {"c": 1}}'

    def test_picks_largest(self):
        text = '{"a": 1} and {"b": 2, "c": 3}'
        assert extract_largest_balanced_object(text) == '{"b": 2, "c": 3}'

    def test_none_without_object(self):
        assert extract_largest_balanced_object("no json here") is None
        assert extract_largest_balanced_object("") is None


class TestParseJsonObject:

    def test_plain_object(self):
        assert parse_json_object('{"script": "Hi", "duration": 7}') == {"script": "Hi", "duration": 7}

    def test_fenced_object(self):
        assert parse_json_object('```json\n{"passed": true}\n```') == {"passed": True}

    def test_object_inside_prose(self):
        reply = 'Here is the verdict: {"passed": false, "score": 40} Hope this helps.'
        assert parse_json_object(reply) == {"passed": False, "score": 40}

    def test_invalid_escape_recovered(self):
        assert parse_json_object(r'{"script": "dose \mg"}') == {"script": "dose \\mg"}

    def test_array_is_not_an_object(self):
        assert parse_json_object("[1, 2, 3]") is None

    def test_empty_and_garbage(self):
        assert parse_json_object(None) is None
        assert parse_json_object("   ") is None
        assert parse_json_object("not json at all") is None
