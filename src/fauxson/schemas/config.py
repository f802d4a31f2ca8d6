"""Parser configuration schema."""

from __future__ import annotations

from pydantic import Field

from .base import SchemaBase

DEFAULT_MAX_TOKENS = 10_000


class ParserConfig(SchemaBase):
    """Options fixed when a parser is constructed.

    Attributes:
        jsonl: Treat input as newline-delimited documents.
        max_tokens: Safety cap on tokens produced per document.
    """

    jsonl: bool = Field(default=False)
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, ge=1)
