"""FauxSON parser facade.

Selects document mode or line mode from options fixed at construction. The
facade holds no per-call state: every ``parse`` call returns a new
ParseOutcome, so one instance can be reused freely.
"""

from __future__ import annotations

import logging
from typing import Optional

from fauxson.document import parse_document
from fauxson.jsonl import parse_jsonl
from fauxson.schemas import DEFAULT_MAX_TOKENS, ParseOutcome, ParserConfig

logger = logging.getLogger(__name__)


class FauxSON:
    """Forgiving JSON extractor.

    Example:
        >>> FauxSON().parse('Here you go: {"a": 1}').data
        {'a': 1.0}
    """

    def __init__(
        self,
        jsonl: bool = False,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        config: Optional[ParserConfig] = None,
    ):
        """
        Initialize the parser.

        Args:
            jsonl: Parse each non-blank line as its own document.
            max_tokens: Token cap per document.
            config: Complete configuration; overrides the keyword options.
        """
        self.config = config or ParserConfig(jsonl=jsonl, max_tokens=max_tokens)

    @property
    def jsonl(self) -> bool:
        return self.config.jsonl

    def parse(self, text: str) -> ParseOutcome:
        """Parse ``text`` in the configured mode.

        Raises:
            TypeError: If ``text`` is not a string.
        """
        if not isinstance(text, str):
            raise TypeError(f"parse() expects str, got {type(text).__name__}")
        if self.config.jsonl:
            return parse_jsonl(text, self.config)
        return parse_document(text, self.config)


def parse(text: str, jsonl: bool = False) -> ParseOutcome:
    """Parse ``text`` with default options."""
    return FauxSON(jsonl=jsonl).parse(text)


__all__ = ["FauxSON", "parse"]
