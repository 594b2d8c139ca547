from __future__ import annotations

import threading

import pytest

from sidediff.errors import DiffCancelledError, ResourceExceededError
from sidediff.services.lcs import build_table, check_budget, lcs_script


def test_table_is_flat_and_row_major() -> None:
    dp = build_table("ab", "b")
    # rows: "", "a", "ab"; columns: "", "b"
    assert dp == [0, 0, 0, 0, 0, 1]


def test_table_corner_holds_lcs_length() -> None:
    assert build_table("ABCBDAB", "BDCABA")[-1] == 4
    assert build_table("", "abc")[-1] == 0
    assert build_table("abc", "abc")[-1] == 3


def test_script_equal_count_matches_table_corner() -> None:
    script = lcs_script("ABCBDAB", "BDCABA")
    assert sum(1 for tag, _, _ in script if tag == "equal") == 4


def test_script_of_empty_sequences_is_empty() -> None:
    assert lcs_script([], []) == []


def test_script_against_empty_side() -> None:
    assert lcs_script(["x", "y"], []) == [("delete", "x", None), ("delete", "y", None)]
    assert lcs_script([], ["x", "y"]) == [("insert", None, "x"), ("insert", None, "y")]


def test_tie_prefers_insert_during_backtrack() -> None:
    # Both "delete a, insert b" and "insert b, delete a" are minimal; the
    # backtrack consumes b first, which reads as delete-then-insert forward.
    assert lcs_script(["a"], ["b"]) == [("delete", "a", None), ("insert", None, "b")]


def test_script_is_deterministic_for_repeated_elements() -> None:
    script = lcs_script(["a", "b", "a"], ["b", "a", "b"])
    assert script == [
        ("delete", "a", None),
        ("equal", "b", "b"),
        ("equal", "a", "a"),
        ("insert", None, "b"),
    ]
    assert lcs_script(["a", "b", "a"], ["b", "a", "b"]) == script


def test_budget_rejects_oversized_table() -> None:
    with pytest.raises(ResourceExceededError, match="exceeds limit of 10"):
        lcs_script(["a"] * 4, ["b"] * 4, max_cells=10)


def test_budget_allows_exact_fit() -> None:
    check_budget(3, 3, 16)
    assert len(lcs_script(["a"] * 3, ["a"] * 3, max_cells=16)) == 3


def test_cancel_event_stops_table_fill() -> None:
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(DiffCancelledError):
        lcs_script(["a", "b"], ["a", "c"], cancel=cancel)
