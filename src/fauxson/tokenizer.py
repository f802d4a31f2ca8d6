"""
Tolerant tokenizer for sanitized candidate spans.

Converts text into structural, string, number and literal tokens. Anything
that is not recognized outside a string is skipped instead of raising, and an
unterminated string still yields its partial content so truncated output can
be recovered.

Tokenization stops once ``max_tokens`` tokens have been produced. That cap is
the only guard against pathological input size and nesting depth; tokens past
it are dropped and the resulting tree is simply incomplete.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from fauxson.schemas.config import DEFAULT_MAX_TOKENS

logger = logging.getLogger(__name__)

STRUCTURAL_CHARACTERS = "{}[]:,"
LITERAL_WORDS = ("true", "false", "null")
NUMBER_CHARACTERS = "0123456789-."

_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")
_EXPONENT_RE = re.compile(r"[eE][+-]?\d+")

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class TokenKind(str, Enum):
    STRUCTURAL = "structural"
    STRING = "string"
    NUMBER = "number"
    LITERAL = "literal"


@dataclass(frozen=True)
class Token:
    """A single token; ``value`` is the punctuation, decoded string, raw number or literal word."""
    kind: TokenKind
    value: str

    def is_structural(self, char: str) -> bool:
        return self.kind is TokenKind.STRUCTURAL and self.value == char


@dataclass
class TokenizeResult:
    """Tokens produced from a candidate span.

    Attributes:
        tokens: Tokens in input order.
        unterminated_lead_word: First whitespace-delimited word of an
            unterminated string's content ("" when that content is blank),
            or None when every string was closed.
        truncated: Whether the token cap stopped tokenization early.
    """
    tokens: List[Token] = field(default_factory=list)
    unterminated_lead_word: Optional[str] = None
    truncated: bool = False


def _read_hex_escape(text: str, index: int) -> Optional[int]:
    digits = text[index:index + 4]
    if len(digits) == 4 and all(c in "0123456789abcdefABCDEF" for c in digits):
        return int(digits, 16)
    return None


def read_string(text: str, start: int) -> Tuple[str, int, bool]:
    """Read a string literal whose opening quote is at ``start``.

    Returns:
        Tuple of (decoded content, index after the literal, closed flag).
    """
    chars: List[str] = []
    index = start + 1
    length = len(text)
    while index < length:
        char = text[index]
        if char == '"':
            return "".join(chars), index + 1, True
        if char != "\\":
            chars.append(char)
            index += 1
            continue

        if index + 1 >= length:
            # Dangling backslash at end of input
            index += 1
            break
        escape = text[index + 1]
        if escape != "u":
            chars.append(_SIMPLE_ESCAPES.get(escape, escape))
            index += 2
            continue

        code = _read_hex_escape(text, index + 2)
        if code is None:
            chars.append("u")
            index += 2
            continue
        index += 6
        if 0xD800 <= code <= 0xDBFF and text.startswith("\\u", index):
            low = _read_hex_escape(text, index + 2)
            if low is not None and 0xDC00 <= low <= 0xDFFF:
                code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                index += 6
        chars.append(chr(code))

    return "".join(chars), length, False


def read_number(text: str, start: int) -> Tuple[Optional[str], int]:
    """Read a run of number characters starting at ``start``.

    Returns:
        Tuple of (raw number text or None when the run is not numeric-shaped,
        index after the run).
    """
    index = start
    length = len(text)
    while index < length and text[index] in NUMBER_CHARACTERS:
        index += 1
    exponent = _EXPONENT_RE.match(text, index)
    if exponent:
        index = exponent.end()
    raw = text[start:index]
    if _NUMBER_RE.fullmatch(raw):
        return raw, index
    return None, index


def read_literal(text: str, start: int) -> Optional[str]:
    """Return the literal word at ``start`` when it is not followed by a letter."""
    for word in LITERAL_WORDS:
        if text.startswith(word, start):
            end = start + len(word)
            if end < len(text) and text[end].isalpha():
                return None
            return word
    return None


def tokenize(text: str, max_tokens: int = DEFAULT_MAX_TOKENS) -> TokenizeResult:
    """Tokenize a sanitized candidate span.

    Args:
        text: Candidate span, already stripped of trailing commas.
        max_tokens: Hard cap on tokens produced.

    Returns:
        TokenizeResult. Never raises for malformed input.
    """
    result = TokenizeResult()
    tokens = result.tokens
    index = 0
    length = len(text)

    while index < length:
        if len(tokens) >= max_tokens:
            result.truncated = True
            logger.warning("Token cap of %d reached; ignoring remaining input", max_tokens)
            break

        char = text[index]
        if char.isspace():
            index += 1
            continue

        if char in STRUCTURAL_CHARACTERS:
            tokens.append(Token(TokenKind.STRUCTURAL, char))
            index += 1
            continue

        if char == '"':
            content, index, closed = read_string(text, index)
            tokens.append(Token(TokenKind.STRING, content))
            if not closed:
                words = content.split()
                result.unterminated_lead_word = words[0] if words else ""
            continue

        if char in NUMBER_CHARACTERS:
            raw, index = read_number(text, index)
            if raw is not None:
                tokens.append(Token(TokenKind.NUMBER, raw))
            continue

        word = read_literal(text, index)
        if word is not None:
            tokens.append(Token(TokenKind.LITERAL, word))
            index += len(word)
            continue

        # Stray character outside a string
        index += 1

    return result


__all__ = [
    "Token",
    "TokenKind",
    "TokenizeResult",
    "read_string",
    "read_number",
    "read_literal",
    "tokenize",
]
