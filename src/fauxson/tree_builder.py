"""Tolerant tree builder.

Consumes a token list through a single forward cursor and reconstructs a
native value tree (dict, list, str, float, bool) even when the token stream is
truncated or malformed. ``None`` means "no value": JSON ``null`` and any
element that failed to parse are dropped from their container rather than
stored as placeholders.

Containers are built with an explicit stack of open frames instead of Python
recursion, so nesting depth is bounded only by the tokenizer's token cap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from fauxson.tokenizer import Token, TokenKind

Container = Union[List[Any], Dict[str, Any]]

# Returned by a frame step when the frame's container is finished
_CLOSED = object()


@dataclass(frozen=True)
class BuildResult:
    """Tree built from a token stream.

    Attributes:
        value: Top-level value, or None when nothing could be built.
        complete: False when an array/object/top-level value ran out of tokens
            before its closer.
        extra_tokens: Number of tokens left over after the top-level value.
    """
    value: Optional[Any]
    complete: bool
    extra_tokens: int = 0

    @property
    def has_extra_tokens(self) -> bool:
        return self.extra_tokens > 0


@dataclass
class _Frame:
    """An open container; ``key`` is the object key awaiting a nested value."""
    container: Container
    key: Optional[str] = None


class TreeBuilder:
    """Builds one value tree from a token sequence.

    A builder owns its cursor and completeness flag; create one per token
    sequence.
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tokens
        self.position = 0
        self.complete = True

    def build(self) -> BuildResult:
        """Build the top-level value and report leftovers."""
        value = self.parse_value()
        return BuildResult(
            value=value,
            complete=self.complete,
            extra_tokens=len(self.tokens) - self.position,
        )

    def peek(self) -> Optional[Token]:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def advance(self) -> Token:
        token = self.tokens[self.position]
        self.position += 1
        return token

    def _skip_structural(self, char: str) -> bool:
        token = self.peek()
        if token is not None and token.is_structural(char):
            self.position += 1
            return True
        return False

    def parse_value(self) -> Optional[Any]:
        """Parse the value at the cursor; always consumes a token if one remains."""
        if self.peek() is None:
            self.complete = False
            return None

        token = self.advance()
        opened = self._open_container(token)
        if opened is not None:
            return self.parse_container(opened)
        return self.parse_scalar(token)

    @staticmethod
    def _open_container(token: Token) -> Optional[Container]:
        if token.is_structural("["):
            return []
        if token.is_structural("{"):
            return {}
        return None

    def parse_scalar(self, token: Token) -> Optional[Any]:
        if token.kind is TokenKind.STRUCTURAL:
            # Stray closer or separator in value position
            return None
        if token.kind is TokenKind.STRING:
            return token.value
        if token.kind is TokenKind.NUMBER:
            return float(token.value)
        if token.value == "true":
            return True
        if token.value == "false":
            return False
        return None

    def parse_container(self, root: Container) -> Container:
        """Fill ``root`` (just opened) and every container nested inside it."""
        stack = [_Frame(root)]
        while True:
            frame = stack[-1]
            if isinstance(frame.container, list):
                step = self._step_array(frame.container)
            else:
                step = self._step_object(frame)

            if step is None:
                continue
            if step is not _CLOSED:
                stack.append(_Frame(step))
                continue

            stack.pop()
            if not stack:
                return frame.container
            parent = stack[-1]
            if isinstance(parent.container, list):
                parent.container.append(frame.container)
            else:
                parent.container[parent.key] = frame.container
                parent.key = None
            self._skip_structural(",")

    def _step_array(self, items: List[Any]) -> Any:
        """Consume one array element.

        Returns None to continue, a new container to descend into, or
        ``_CLOSED`` when the array is finished.
        """
        token = self.peek()
        if token is None:
            self.complete = False
            return _CLOSED
        if token.is_structural("]"):
            self.position += 1
            return _CLOSED
        if token.is_structural(","):
            # Empty element
            self.position += 1
            return None

        token = self.advance()
        opened = self._open_container(token)
        if opened is not None:
            return opened
        value = self.parse_scalar(token)
        if value is not None:
            items.append(value)
        self._skip_structural(",")
        return None

    def _step_object(self, frame: _Frame) -> Any:
        """Consume one key/value pair.

        Tokens in key position that are not strings are skipped. A missing
        ``:`` does not abort the pair.
        """
        token = self.peek()
        if token is None:
            self.complete = False
            return _CLOSED
        if token.is_structural("}"):
            self.position += 1
            return _CLOSED
        if token.kind is not TokenKind.STRING:
            self.position += 1
            return None

        key = self.advance().value
        self._skip_structural(":")
        following = self.peek()
        if following is None:
            self.complete = False
            return _CLOSED
        if following.is_structural(",") or following.is_structural("}"):
            self._skip_structural(",")
            return None

        token = self.advance()
        opened = self._open_container(token)
        if opened is not None:
            frame.key = key
            return opened
        value = self.parse_scalar(token)
        if value is not None:
            frame.container[key] = value
        self._skip_structural(",")
        return None


def build_tree(tokens: Sequence[Token]) -> BuildResult:
    """Build a value tree from ``tokens``."""
    return TreeBuilder(tokens).build()


__all__ = ["BuildResult", "TreeBuilder", "build_tree"]
