"""
Token Diff Engine - Word/symbol level highlighting for modified lines
"""

from __future__ import annotations

import threading

from sidediff.errors import InvalidInputError
from sidediff.models.diff import SegmentKind, TokenSegment, TokenSpan

from .lcs import lcs_script

_WORD = "word"
_SPACE = "space"
_SYMBOL = "symbol"


def _char_class(ch: str) -> str:
    if ch.isalnum() or ch == "_":
        return _WORD
    if ch.isspace():
        return _SPACE
    return _SYMBOL


def tokenize(line: str) -> list[str]:
    """Split a line into word runs, whitespace runs and single symbols

    Joining the result gives back the line unchanged.
    """
    tokens: list[str] = []
    start = 0
    current = None

    for pos, ch in enumerate(line):
        cls = _char_class(ch)
        # symbols never group, every symbol is its own token
        if cls != current or cls == _SYMBOL:
            if pos > start:
                tokens.append(line[start:pos])
            start = pos
            current = cls

    if len(line) > start:
        tokens.append(line[start:])
    return tokens


class TokenDiffEngine:
    """Compute token-level spans for both sides of a modified line"""

    def __init__(self, max_cells: int | None = None):
        self.max_cells = max_cells

    def diff_tokens(
        self,
        line_a: str,
        line_b: str,
        cancel: threading.Event | None = None,
    ) -> tuple[TokenSpan, TokenSpan]:
        """Return (old-side span, new-side span)

        Shared tokens are unchanged on both sides, tokens only in line_b are
        added to the new span, tokens only in line_a are removed from the old
        span.
        """
        for name, value in (("line_a", line_a), ("line_b", line_b)):
            if not isinstance(value, str):
                raise InvalidInputError(f"{name} must be a string, got {type(value).__name__}")

        parts_a: list[TokenSegment] = []
        parts_b: list[TokenSegment] = []
        steps = lcs_script(tokenize(line_a), tokenize(line_b), max_cells=self.max_cells, cancel=cancel)

        for tag, a, b in steps:
            if tag == "equal":
                parts_a.append(TokenSegment(text=a, kind=SegmentKind.UNCHANGED))
                parts_b.append(TokenSegment(text=b, kind=SegmentKind.UNCHANGED))
            elif tag == "insert":
                parts_b.append(TokenSegment(text=b, kind=SegmentKind.ADDED))
            else:
                parts_a.append(TokenSegment(text=a, kind=SegmentKind.REMOVED))

        return TokenSpan(segments=parts_a), TokenSpan(segments=parts_b)


def diff_tokens(line_a: str, line_b: str) -> tuple[TokenSpan, TokenSpan]:
    """Token diff with no table budget"""
    return TokenDiffEngine().diff_tokens(line_a, line_b)
