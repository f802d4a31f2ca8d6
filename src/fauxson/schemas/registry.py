"""Schema registry and JSON Schema export."""

from __future__ import annotations

from typing import Dict, Type

from .config import ParserConfig
from .errors import FauxsonError
from .outcome import ParseOutcome

SchemaType = Type


SCHEMA_REGISTRY: Dict[str, SchemaType] = {
    "parser_config": ParserConfig,
    "parse_outcome": ParseOutcome,
    "fauxson_error": FauxsonError,
}


def get_schema_json(name: str) -> Dict:
    model = SCHEMA_REGISTRY.get(name)
    if model is None:
        raise KeyError(f"Unknown schema '{name}'")
    return model.model_json_schema()
