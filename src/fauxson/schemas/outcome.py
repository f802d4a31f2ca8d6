"""Parse outcome model returned by every parse call."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field

from .base import SchemaBase
from .errors import ErrorKind


class ParseOutcome(SchemaBase):
    """Result of parsing one document (or one JSONL payload).

    ``success`` is True exactly when ``data`` holds a value. ``valid`` implies
    ``success``. ``error_codes`` is an ordered trace: later ``reason`` values
    overwrite earlier ones but codes already recorded are never retracted, so
    the trace may name more failures than the final ``reason`` does.

    Attributes:
        data: Recovered value tree, or None when nothing could be built.
        success: Whether any data was recovered.
        valid: Whether the input was strict, clean JSON.
        reason: Human-readable explanation; empty means none.
        error_codes: Every error kind recorded, in order, duplicates allowed.
        reasons: Line mode only; non-empty per-line reasons in line order.
        lines: Line mode only; each non-blank line's own outcome.
    """

    data: Optional[Any] = None
    success: bool = False
    valid: bool = False
    reason: str = ""
    error_codes: List[ErrorKind] = Field(default_factory=list)
    reasons: List[str] = Field(default_factory=list)
    lines: List["ParseOutcome"] = Field(default_factory=list)

    def __bool__(self) -> bool:
        """Allow ParseOutcome to be used in boolean contexts."""
        return self.success

    def record(self, kind: ErrorKind, reason: Optional[str] = None) -> None:
        """Append ``kind`` to the trace and, if given, replace the reason."""
        self.error_codes.append(kind)
        if reason is not None:
            self.reason = reason

    def has_error(self, kind: ErrorKind) -> bool:
        return kind in self.error_codes

    @property
    def has_no_structure(self) -> bool:
        return self.has_error(ErrorKind.NO_STRUCTURE)

    @property
    def has_extra_text(self) -> bool:
        return self.has_error(ErrorKind.EXTRA_TEXT)

    @property
    def has_invalid_format(self) -> bool:
        return self.has_error(ErrorKind.INVALID_FORMAT)

    @property
    def has_invalid_structure(self) -> bool:
        return self.has_error(ErrorKind.INVALID_STRUCTURE)

    @property
    def has_unclosed_string(self) -> bool:
        return self.has_error(ErrorKind.UNCLOSED_STRING)

    @property
    def has_incomplete(self) -> bool:
        return self.has_error(ErrorKind.INCOMPLETE)


ParseOutcome.model_rebuild()
