"""Diff-related data models"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict


class OpType(str, Enum):
    """Kinds of line-level edit operations"""

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"
    MODIFY = "modify"


class LineOp(BaseModel):
    """One unit of the line-level edit script

    `a` is the old-side line (None for inserts), `b` the new-side line
    (None for deletes).
    """

    model_config = ConfigDict(frozen=True)

    type: OpType
    a: str | None = None
    b: str | None = None

    @classmethod
    def equal(cls, a: str, b: str) -> LineOp:
        return cls(type=OpType.EQUAL, a=a, b=b)

    @classmethod
    def insert(cls, b: str) -> LineOp:
        return cls(type=OpType.INSERT, b=b)

    @classmethod
    def delete(cls, a: str) -> LineOp:
        return cls(type=OpType.DELETE, a=a)

    @classmethod
    def modify(cls, a: str, b: str) -> LineOp:
        return cls(type=OpType.MODIFY, a=a, b=b)

    @property
    def has_old(self) -> bool:
        return self.type != OpType.INSERT

    @property
    def has_new(self) -> bool:
        return self.type != OpType.DELETE


def old_lines(ops: Iterable[LineOp]) -> list[str]:
    """Old-side lines of an edit script, in order"""
    return [op.a for op in ops if op.has_old]


def new_lines(ops: Iterable[LineOp]) -> list[str]:
    """New-side lines of an edit script, in order"""
    return [op.b for op in ops if op.has_new]


class SegmentKind(str, Enum):
    """Label of a token segment within one side of a modified line"""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


class TokenSegment(BaseModel):
    """A single token with its diff label"""

    model_config = ConfigDict(frozen=True)

    text: str
    kind: SegmentKind


class TokenSpan(BaseModel):
    """One side of a token-level diff"""

    model_config = ConfigDict(frozen=True)

    segments: list[TokenSegment] = []

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)


class DiffStats(BaseModel):
    """Per-type tally of a line-level edit script"""

    equal: int = 0
    insert: int = 0
    delete: int = 0
    modify: int = 0

    @classmethod
    def tally(cls, ops: Iterable[LineOp | DiffRow]) -> DiffStats:
        counts = {op_type.value: 0 for op_type in OpType}
        for op in ops:
            counts[op.type.value] += 1
        return cls(**counts)

    def summary(self) -> str:
        """Status line shown after a comparison"""
        return (
            f"equal:{self.equal}  added(+):{self.insert}  "
            f"deleted(-):{self.delete}  modified(±):{self.modify}"
        )


class DiffRow(BaseModel):
    """A line op with its line numbers, ready for a renderer"""

    type: OpType
    a: str | None = None
    b: str | None = None
    line_a: int | None = None  # 1-indexed
    line_b: int | None = None
    span_a: TokenSpan | None = None
    span_b: TokenSpan | None = None


class DiffResult(BaseModel):
    """Complete result of comparing two texts"""

    rows: list[DiffRow]
    stats: DiffStats
    summary: str
    rendered: str | None = None  # html or text output when requested
