"""
LCS Service - Longest-common-subsequence edit scripts over any two sequences

Shared by the line and token engines. The table is dense, so a comparison of
n and m elements costs O(n*m) time and memory; callers bound it with
`max_cells`.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from typing import Any, Literal, TypeVar

from sidediff.errors import DiffCancelledError, ResourceExceededError

T = TypeVar("T")

Tag = Literal["equal", "insert", "delete"]
Step = tuple[Tag, Any, Any]


def check_budget(n: int, m: int, max_cells: int | None) -> None:
    """Raise if an (n+1) x (m+1) table would exceed `max_cells`"""
    if max_cells is None:
        return
    cells = (n + 1) * (m + 1)
    if cells > max_cells:
        raise ResourceExceededError(
            f"LCS table of {n + 1}x{m + 1} ({cells} cells) exceeds limit of {max_cells}"
        )


def build_table(
    seq_a: Sequence[T],
    seq_b: Sequence[T],
    cancel: threading.Event | None = None,
) -> list[int]:
    """Fill the LCS length table as a flat row-major list

    Cell (i, j) lives at i * (len(seq_b) + 1) + j and holds the LCS length
    of seq_a[:i] and seq_b[:j].
    """
    n, m = len(seq_a), len(seq_b)
    width = m + 1
    dp = [0] * ((n + 1) * width)

    for i in range(1, n + 1):
        if cancel is not None and cancel.is_set():
            raise DiffCancelledError(f"Diff cancelled at row {i} of {n}")
        item_a = seq_a[i - 1]
        row = i * width
        prev = row - width
        for j in range(1, m + 1):
            if item_a == seq_b[j - 1]:
                dp[row + j] = dp[prev + j - 1] + 1
            else:
                up = dp[prev + j]
                left = dp[row + j - 1]
                dp[row + j] = up if up > left else left

    return dp


def backtrack(seq_a: Sequence[T], seq_b: Sequence[T], dp: list[int]) -> list[Step]:
    """Walk the table from the bottom-right corner to an edit script

    On a tie between the left and upper neighbours the B element is consumed
    first (insert), which fixes which of the equally short scripts is
    returned.
    """
    width = len(seq_b) + 1
    steps: list[Step] = []
    i, j = len(seq_a), len(seq_b)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and seq_a[i - 1] == seq_b[j - 1]:
            steps.append(("equal", seq_a[i - 1], seq_b[j - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or dp[i * width + j - 1] >= dp[(i - 1) * width + j]):
            steps.append(("insert", None, seq_b[j - 1]))
            j -= 1
        else:
            steps.append(("delete", seq_a[i - 1], None))
            i -= 1

    steps.reverse()
    return steps


def lcs_script(
    seq_a: Sequence[T],
    seq_b: Sequence[T],
    *,
    max_cells: int | None = None,
    cancel: threading.Event | None = None,
) -> list[Step]:
    """Compute the top-to-bottom edit script turning seq_a into seq_b"""
    check_budget(len(seq_a), len(seq_b), max_cells)
    dp = build_table(seq_a, seq_b, cancel)
    return backtrack(seq_a, seq_b, dp)
