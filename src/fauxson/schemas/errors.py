"""Parse error kinds and library error signatures."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field

from .base import SchemaBase, Severity


class ErrorKind(str, Enum):
    """Why a document deviates from strict JSON.

    - NO_STRUCTURE: nothing JSON-shaped was found
    - EXTRA_TEXT: non-JSON content surrounds or follows the structure
    - INVALID_FORMAT: characters indicative of non-JSON syntax were found
    - INVALID_STRUCTURE: tokens were present but no value could be built
    - UNCLOSED_STRING: a string literal was never terminated
    - INCOMPLETE: an array/object closer was never reached
    """
    NO_STRUCTURE = "no_structure"
    EXTRA_TEXT = "extra_text"
    INVALID_FORMAT = "invalid_format"
    INVALID_STRUCTURE = "invalid_structure"
    UNCLOSED_STRING = "unclosed_string"
    INCOMPLETE = "incomplete"


class FauxsonErrorCode(str, Enum):
    CONFIG = "config"
    VALIDATION = "validation"


class FauxsonErrorSource(str, Enum):
    CONFIG_LOADER = "config_loader"
    VALIDATION = "validation"


class FauxsonError(SchemaBase):
    error_id: str
    code: FauxsonErrorCode
    message: str
    source: FauxsonErrorSource
    severity: Severity = Field(default=Severity.ERROR)
    details: Optional[Dict[str, Any]] = Field(default=None)
