"""Tests for JSONL aggregation."""

from fauxson.document import REASON_BLANK, REASON_EXTRA_TEXT, REASON_INVALID_FORMAT
from fauxson.jsonl import parse_jsonl
from fauxson.schemas import ErrorKind


class TestParseJsonl:
    """Tests for parse_jsonl."""

    def test_all_valid_lines(self):
        outcome = parse_jsonl('{"a": 1}\n{"b": 2}\n[3]\n')
        assert outcome.success is True
        assert outcome.valid is True
        assert outcome.data == [{"a": 1}, {"b": 2}, [3]]
        assert outcome.reason == ""
        assert outcome.reasons == []
        assert len(outcome.lines) == 3

    def test_blank_lines_skipped(self):
        outcome = parse_jsonl('\n{"a": 1}\n   \n\n{"b": 2}')
        assert outcome.valid is True
        assert outcome.data == [{"a": 1}, {"b": 2}]
        assert len(outcome.lines) == 2

    def test_failed_line_invalidates_aggregate(self):
        outcome = parse_jsonl('{"a": 1}\nnot json at all\n{"c": 3}')
        assert outcome.success is True
        assert outcome.valid is False
        assert outcome.data == [{"a": 1}, {"c": 3}]
        assert outcome.has_no_structure

    def test_reasons_joined_in_line_order(self):
        outcome = parse_jsonl('{"a" = 1}\nnote: {"b": 2}\n{"c": 3}')
        assert outcome.data == [{"b": 2}, {"c": 3}]
        assert outcome.reasons == [REASON_INVALID_FORMAT, REASON_EXTRA_TEXT]
        assert outcome.reason == REASON_INVALID_FORMAT + "\n" + REASON_EXTRA_TEXT
        assert outcome.error_codes == [ErrorKind.INVALID_FORMAT, ErrorKind.EXTRA_TEXT]

    def test_annotated_success_line_invalidates(self):
        outcome = parse_jsonl('{"a": 1}\n{"b": [1, 2')
        assert outcome.success is True
        assert outcome.valid is False
        assert outcome.data == [{"a": 1}, {"b": [1, 2]}]
        assert outcome.has_incomplete

    def test_no_successful_lines(self):
        outcome = parse_jsonl("nothing\nhere either")
        assert outcome.success is False
        assert outcome.valid is False
        assert outcome.data is None
        assert len(outcome.reasons) == 2

    def test_empty_input(self):
        outcome = parse_jsonl("")
        assert outcome.success is False
        assert outcome.valid is False
        assert outcome.reason == ""
        assert outcome.lines == []

    def test_lines_are_independent(self):
        outcome = parse_jsonl('["unclosed\n{"a": 1}')
        assert outcome.lines[0].has_unclosed_string
        assert outcome.lines[1].valid is True
        assert outcome.lines[1].error_codes == []

    def test_whitespace_only_line_not_reasoned_about(self):
        outcome = parse_jsonl('{"a": 1}\n \t \n')
        assert REASON_BLANK not in outcome.reasons
        assert outcome.valid is True


class TestDeepLines:
    """A deeply nested line does not disturb its neighbours."""

    def test_deep_truncated_line_beside_good_line(self):
        outcome = parse_jsonl('{"a": 1}\n' + "[" * 3000)
        assert outcome.success is True
        assert outcome.valid is False
        assert len(outcome.data) == 2
        assert outcome.data[0] == {"a": 1}
        assert outcome.lines[0].valid is True
        assert outcome.lines[1].has_incomplete

    def test_deep_complete_line_beside_good_line(self):
        outcome = parse_jsonl("[" * 3000 + "]" * 3000 + '\n{"b": 2}')
        assert outcome.valid is True
        assert len(outcome.data) == 2
        assert outcome.data[1] == {"b": 2}
