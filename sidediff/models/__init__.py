"""Models module - Pydantic data models"""

from .compare import (
    CompareRequest,
    DiffOptions,
    RenderFormat,
    TextPair,
    TokenDiffRequest,
    TokenDiffResponse,
)
from .diff import (
    DiffResult,
    DiffRow,
    DiffStats,
    LineOp,
    OpType,
    SegmentKind,
    TokenSegment,
    TokenSpan,
    new_lines,
    old_lines,
)

__all__ = [
    # Compare models
    "CompareRequest",
    "DiffOptions",
    "RenderFormat",
    "TextPair",
    "TokenDiffRequest",
    "TokenDiffResponse",
    # Diff models
    "DiffResult",
    "DiffRow",
    "DiffStats",
    "LineOp",
    "OpType",
    "SegmentKind",
    "TokenSegment",
    "TokenSpan",
    "new_lines",
    "old_lines",
]
