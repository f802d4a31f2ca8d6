"""Structure locator: find the first JSON-looking span in free text.

The scan starts at the first ``{`` or ``[`` and tracks string state, pending
escapes and bracket depth until depth returns to zero outside a string. When
the input ends first, the span runs to the end and is marked unterminated so
truncated model output can still be recovered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

OPENERS = "{["
CLOSERS = "}]"


@dataclass(frozen=True)
class LocatedStructure:
    """Candidate span and what surrounds it.

    Attributes:
        candidate: Text from the opening bracket through its closer (or EOF).
        leading: Text before the opening bracket.
        trailing: Text after the closer; empty when unterminated.
        terminated: Whether a depth-zero closer was found.
        start: Offset of the opening bracket in the scanned text.
        end: Offset one past the candidate's last character.
    """
    candidate: str
    leading: str
    trailing: str
    terminated: bool
    start: int
    end: int

    @property
    def has_outer_text(self) -> bool:
        """True when non-whitespace text surrounds the candidate."""
        return bool(self.leading.strip() or self.trailing.strip())


def find_structure_start(text: str) -> int:
    """Return the index of the first ``{`` or ``[``, or -1."""
    positions = [pos for pos in (text.find(ch) for ch in OPENERS) if pos != -1]
    return min(positions) if positions else -1


def find_structure_end(text: str, start: int) -> Optional[int]:
    """Return the index of the closer matching ``text[start]``.

    Returns None when the input ends before depth returns to zero.
    """
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
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
        elif char in OPENERS:
            depth += 1
        elif char in CLOSERS:
            depth -= 1
            if depth == 0:
                return index
    return None


def locate_structure(text: str) -> Optional[LocatedStructure]:
    """Locate the first JSON-like structure in ``text``.

    Args:
        text: Input text, normally already stripped by the caller.

    Returns:
        LocatedStructure, or None if the text is blank or has no ``{``/``[``.
    """
    if not text or not text.strip():
        return None

    start = find_structure_start(text)
    if start == -1:
        return None

    close = find_structure_end(text, start)
    terminated = close is not None
    end = close + 1 if close is not None else len(text)
    return LocatedStructure(
        candidate=text[start:end],
        leading=text[:start],
        trailing=text[end:],
        terminated=terminated,
        start=start,
        end=end,
    )


__all__ = [
    "LocatedStructure",
    "find_structure_start",
    "find_structure_end",
    "locate_structure",
]
