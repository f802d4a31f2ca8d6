"""Ensure the public API surface is exposed from the package root."""


def test_public_exports():
    import fauxson

    required = [
        "FauxSON",
        "parse",
        "load_parser_config",
        "ParseOutcome",
        "ParserConfig",
        "ErrorKind",
        "FauxsonError",
        "__version__",
    ]
    for name in required:
        assert hasattr(fauxson, name), f"Missing public export: {name}"


def test_error_kinds_complete():
    from fauxson import ErrorKind

    assert {kind.value for kind in ErrorKind} == {
        "no_structure",
        "extra_text",
        "invalid_format",
        "invalid_structure",
        "unclosed_string",
        "incomplete",
    }
