"""
Line Diff Engine - Line-level edit scripts with paired modifications
"""

from __future__ import annotations

import threading

from sidediff.errors import InvalidInputError
from sidediff.models.diff import LineOp, OpType

from .lcs import lcs_script

LINE_SEPARATOR = "\n"


def split_lines(text: str) -> list[str]:
    """Split normalized text into lines; empty text is one empty line"""
    return text.split(LINE_SEPARATOR)


def pair_modifications(ops: list[LineOp]) -> list[LineOp]:
    """Fuse each delete immediately followed by an insert into a modify

    Only the last emitted op is looked at, so a delete followed by two
    inserts becomes one modify and one insert.
    """
    merged: list[LineOp] = []
    for op in ops:
        prev = merged[-1] if merged else None
        if prev is not None and prev.type == OpType.DELETE and op.type == OpType.INSERT:
            merged[-1] = LineOp.modify(prev.a, op.b)
        else:
            merged.append(op)
    return merged


class LineDiffEngine:
    """Compute line-level diffs between two normalized texts"""

    def __init__(self, max_cells: int | None = None):
        self.max_cells = max_cells

    def diff(
        self,
        old_text: str,
        new_text: str,
        cancel: threading.Event | None = None,
    ) -> list[LineOp]:
        """Return the ordered edit script turning old_text into new_text"""
        _require_text(old_text, "old_text")
        _require_text(new_text, "new_text")

        lines_a = split_lines(old_text)
        lines_b = split_lines(new_text)

        ops = []
        for tag, a, b in lcs_script(lines_a, lines_b, max_cells=self.max_cells, cancel=cancel):
            if tag == "equal":
                ops.append(LineOp.equal(a, b))
            elif tag == "insert":
                ops.append(LineOp.insert(b))
            else:
                ops.append(LineOp.delete(a))

        return pair_modifications(ops)


def _require_text(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be a string, got {type(value).__name__}")


def diff_lines(old_text: str, new_text: str) -> list[LineOp]:
    """Line diff with no table budget"""
    return LineDiffEngine().diff(old_text, new_text)
