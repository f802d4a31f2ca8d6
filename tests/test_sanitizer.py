"""Tests for candidate sanitization."""

import pytest

from fauxson.sanitizer import find_disallowed_character, sanitize, strip_trailing_commas


class TestStripTrailingCommas:
    """Tests for strip_trailing_commas."""

    def test_object_trailing_comma(self):
        assert strip_trailing_commas('{"a":1,}') == '{"a":1}'

    def test_array_trailing_comma_with_whitespace(self):
        assert strip_trailing_commas("[1, 2,\n  ]") == "[1, 2\n  ]"

    def test_inner_commas_kept(self):
        assert strip_trailing_commas("[1, 2, 3]") == "[1, 2, 3]"


class TestFindDisallowedCharacter:
    """Tests for find_disallowed_character."""

    @pytest.mark.parametrize("text", ['{a => 1}', '{"a": 1};', "{'a': 1}"])
    def test_rejects_non_json_syntax(self, text):
        assert find_disallowed_character(text) != -1

    def test_characters_inside_strings_allowed(self):
        assert find_disallowed_character('{"eq": "a=b; it\'s"}') == -1

    def test_escaped_quote_keeps_string_open(self):
        assert find_disallowed_character(r'{"a": "x\"=y"}') == -1


class TestSanitize:
    """Tests for sanitize."""

    def test_clean_candidate(self):
        result = sanitize('{"a": [1,],}')
        assert result.ok
        assert result.text == '{"a": [1]}'

    def test_rejected_candidate(self):
        result = sanitize('{"a" = 1}')
        assert not result.ok
        assert result.rejected_character == "="
        assert result.rejected_at == 5
