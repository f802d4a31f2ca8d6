import pytest
from pydantic import ValidationError

from fauxson.schemas import (
    ErrorKind,
    FauxsonErrorCode,
    ParseOutcome,
    ParserConfig,
    get_schema_json,
)
from fauxson.validation import validate


def test_outcome_defaults() -> None:
    outcome = ParseOutcome()
    assert outcome.data is None
    assert outcome.success is False
    assert outcome.valid is False
    assert outcome.reason == ""
    assert outcome.error_codes == []


def test_outcome_record_keeps_trace() -> None:
    outcome = ParseOutcome()
    outcome.record(ErrorKind.INCOMPLETE, "first")
    outcome.record(ErrorKind.EXTRA_TEXT, "second")
    outcome.record(ErrorKind.EXTRA_TEXT)
    assert outcome.reason == "second"
    assert outcome.error_codes == [ErrorKind.INCOMPLETE, ErrorKind.EXTRA_TEXT, ErrorKind.EXTRA_TEXT]


def test_outcome_predicates() -> None:
    outcome = ParseOutcome(error_codes=[ErrorKind.UNCLOSED_STRING, ErrorKind.INVALID_STRUCTURE])
    assert outcome.has_unclosed_string
    assert outcome.has_invalid_structure
    assert not outcome.has_no_structure
    assert not outcome.has_extra_text
    assert not outcome.has_invalid_format
    assert not outcome.has_incomplete
    assert outcome.has_error(ErrorKind.UNCLOSED_STRING)


def test_parser_config_rejects_zero_tokens() -> None:
    with pytest.raises(ValidationError):
        ParserConfig(max_tokens=0)


def test_validate_unknown_schema() -> None:
    obj, err = validate("nope", {})
    assert obj is None
    assert err.code == FauxsonErrorCode.VALIDATION


def test_validate_parser_config() -> None:
    obj, err = validate("parser_config", {"jsonl": True})
    assert err is None
    assert obj.jsonl is True


def test_schema_json_export() -> None:
    schema = get_schema_json("parser_config")
    assert "max_tokens" in schema["properties"]
    with pytest.raises(KeyError):
        get_schema_json("missing")


def test_validate_reports_rejected_fields() -> None:
    obj, err = validate("parser_config", {"jsonl": "maybe", "max_tokens": -1})
    assert obj is None
    assert err.error_id == "parser_config_invalid"
    assert err.details["schema"] == "parser_config"
    assert set(err.details["fields"]) == {"jsonl", "max_tokens"}
    assert err.message == "parser_config rejected fields: jsonl, max_tokens"


def test_validate_non_mapping_payload() -> None:
    obj, err = validate("parser_config", [1, 2])
    assert obj is None
    assert "<root>" in err.details["fields"]


def test_error_enums_limited_to_produced_members() -> None:
    from fauxson.schemas import FauxsonErrorSource, Severity

    assert {code.value for code in FauxsonErrorCode} == {"config", "validation"}
    assert {source.value for source in FauxsonErrorSource} == {"config_loader", "validation"}
    assert [severity.value for severity in Severity] == ["error"]
