"""Single-document orchestrator.

Runs locator, sanitizer, tokenizer and tree builder in sequence and turns
their reports into a ParseOutcome. The decision order is fixed:

1. blank input, or no ``{``/``[`` found          -> no_structure
2. sanitizer rejects the candidate               -> invalid_format
3. tokenizer yields nothing                      -> no_structure
4. builder yields nothing                        -> invalid_structure
5. otherwise data is kept (success), then:
   a. unterminated string  -> unclosed_string, return immediately
   b. builder incomplete   -> incomplete (reason only if none set yet)
   c. extra text outside or after the structure -> extra_text, overwrites reason
   d. valid when no reason was set
"""

from __future__ import annotations

import logging
from typing import Optional

from fauxson.locator import locate_structure
from fauxson.sanitizer import sanitize
from fauxson.schemas import ErrorKind, ParseOutcome, ParserConfig
from fauxson.tokenizer import tokenize
from fauxson.tree_builder import build_tree

logger = logging.getLogger(__name__)

REASON_BLANK = "No valid JSON structure found"
REASON_NO_STRUCTURE = "Failed to parse: No valid JSON structure found"
REASON_INVALID_FORMAT = "Failed to parse: Invalid JSON format"
REASON_INVALID_STRUCTURE = "Failed to parse: Invalid JSON structure"
REASON_INCOMPLETE = "Incomplete JSON structure"
REASON_EXTRA_TEXT = "Found extra text outside JSON structure"


def unclosed_string_reason(lead_word: str) -> str:
    return f'Unclosed string starting at "{lead_word}'


def _fail(outcome: ParseOutcome, kind: ErrorKind, reason: str) -> ParseOutcome:
    outcome.success = False
    outcome.valid = False
    outcome.data = None
    outcome.record(kind, reason)
    logger.debug("Parse failed (%s): %s", kind.value, reason)
    return outcome


def parse_document(text: str, config: Optional[ParserConfig] = None) -> ParseOutcome:
    """Recover a value from one document that should be JSON.

    Args:
        text: Raw input text.
        config: Parser options; only ``max_tokens`` applies here.

    Returns:
        A fresh ParseOutcome. Malformed input never raises.
    """
    config = config or ParserConfig()
    outcome = ParseOutcome()

    stripped = text.strip()
    if not stripped:
        return _fail(outcome, ErrorKind.NO_STRUCTURE, REASON_BLANK)

    located = locate_structure(stripped)
    if located is None:
        return _fail(outcome, ErrorKind.NO_STRUCTURE, REASON_NO_STRUCTURE)

    sanitized = sanitize(located.candidate)
    if not sanitized.ok:
        logger.debug(
            "Rejected character %r at offset %d of candidate",
            sanitized.rejected_character,
            sanitized.rejected_at,
        )
        return _fail(outcome, ErrorKind.INVALID_FORMAT, REASON_INVALID_FORMAT)

    tokenized = tokenize(sanitized.text, max_tokens=config.max_tokens)
    if not tokenized.tokens:
        return _fail(outcome, ErrorKind.NO_STRUCTURE, REASON_NO_STRUCTURE)

    built = build_tree(tokenized.tokens)
    if built.value is None:
        return _fail(outcome, ErrorKind.INVALID_STRUCTURE, outcome.reason or REASON_INVALID_STRUCTURE)

    outcome.data = built.value
    outcome.success = True

    if tokenized.unterminated_lead_word is not None:
        outcome.valid = False
        outcome.record(ErrorKind.UNCLOSED_STRING, unclosed_string_reason(tokenized.unterminated_lead_word))
        logger.debug("Recovered data from unterminated string input")
        return outcome

    if not built.complete and not outcome.reason:
        outcome.record(ErrorKind.INCOMPLETE, REASON_INCOMPLETE)

    if located.has_outer_text or built.has_extra_tokens:
        outcome.valid = False
        outcome.record(ErrorKind.EXTRA_TEXT, REASON_EXTRA_TEXT)
        logger.debug(
            "Extra text around structure (outer=%s, leftover tokens=%d)",
            located.has_outer_text,
            built.extra_tokens,
        )
        return outcome

    outcome.valid = not outcome.reason
    return outcome


__all__ = [
    "REASON_BLANK",
    "REASON_NO_STRUCTURE",
    "REASON_INVALID_FORMAT",
    "REASON_INVALID_STRUCTURE",
    "REASON_INCOMPLETE",
    "REASON_EXTRA_TEXT",
    "unclosed_string_reason",
    "parse_document",
]
