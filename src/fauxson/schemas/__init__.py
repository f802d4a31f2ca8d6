"""Schema exports."""

from .base import SchemaBase, Severity
from .config import DEFAULT_MAX_TOKENS, ParserConfig
from .errors import ErrorKind, FauxsonError, FauxsonErrorCode, FauxsonErrorSource
from .outcome import ParseOutcome
from .registry import SCHEMA_REGISTRY, get_schema_json

__all__ = [
    "SchemaBase",
    "Severity",
    "DEFAULT_MAX_TOKENS",
    "ParserConfig",
    "ErrorKind",
    "FauxsonError",
    "FauxsonErrorCode",
    "FauxsonErrorSource",
    "ParseOutcome",
    "SCHEMA_REGISTRY",
    "get_schema_json",
]
