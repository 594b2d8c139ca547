"""
Sidediff - line and token level text diffs

The engines compute an LCS edit script over lines, fuse delete/insert pairs
into modifications and, on request, highlight the changed tokens of each
modified line. A FastAPI backend exposes compare, swap and clear actions.
"""

from .errors import (
    ConfigError,
    DiffCancelledError,
    InvalidInputError,
    ResourceExceededError,
    SidediffError,
)
from .models import DiffOptions, DiffResult, DiffStats, LineOp, OpType, TokenSpan
from .services import DiffService, LineDiffEngine, TokenDiffEngine, diff_lines, diff_tokens

__version__ = "1.0.0"

__all__ = [
    "ConfigError",
    "DiffCancelledError",
    "DiffOptions",
    "DiffResult",
    "DiffService",
    "DiffStats",
    "InvalidInputError",
    "LineDiffEngine",
    "LineOp",
    "OpType",
    "ResourceExceededError",
    "SidediffError",
    "TokenDiffEngine",
    "TokenSpan",
    "diff_lines",
    "diff_tokens",
]
