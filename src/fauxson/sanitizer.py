"""Candidate sanitization ahead of tokenization."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# Characters that never appear outside strings in JSON but do in Perl hashes,
# statement-terminated code and single-quoted pseudo-JSON.
DISALLOWED_CHARACTERS = frozenset("=;'")

_TRAILING_COMMA_RE = re.compile(r",(\s*[\]}])")


@dataclass(frozen=True)
class SanitizeResult:
    """Outcome of sanitizing a candidate span.

    Attributes:
        text: Candidate with trailing commas removed.
        rejected_character: First disallowed character found outside a
            string, or None when the candidate is acceptable.
        rejected_at: Offset of that character within ``text`` (-1 if none).
    """
    text: str
    rejected_character: Optional[str] = None
    rejected_at: int = -1

    @property
    def ok(self) -> bool:
        return self.rejected_character is None


def strip_trailing_commas(text: str) -> str:
    """Drop commas followed (after optional whitespace) by ``]`` or ``}``.

    The rewrite is purely textual, string literals included.
    """
    return _TRAILING_COMMA_RE.sub(r"\1", text)


def find_disallowed_character(text: str) -> int:
    """Return the offset of the first disallowed character outside strings, or -1."""
    in_string = False
    escaped = False
    for index, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char in DISALLOWED_CHARACTERS:
            return index
    return -1


def sanitize(candidate: str) -> SanitizeResult:
    """Strip trailing commas, then reject obviously non-JSON syntax."""
    cleaned = strip_trailing_commas(candidate)
    position = find_disallowed_character(cleaned)
    if position == -1:
        return SanitizeResult(text=cleaned)
    return SanitizeResult(
        text=cleaned,
        rejected_character=cleaned[position],
        rejected_at=position,
    )


__all__ = [
    "DISALLOWED_CHARACTERS",
    "SanitizeResult",
    "strip_trailing_commas",
    "find_disallowed_character",
    "sanitize",
]
