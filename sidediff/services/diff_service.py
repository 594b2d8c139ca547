"""
Diff Service - Compare two texts and produce numbered, highlighted rows
"""

from __future__ import annotations

import logging
import threading

from sidediff.models.compare import DiffOptions, RenderFormat, TextPair
from sidediff.models.diff import DiffResult, DiffRow, DiffStats, LineOp, OpType, TokenSpan

from .line_diff import LineDiffEngine
from .normalizer import normalize
from .renderer import render_html, render_text
from .token_diff import TokenDiffEngine

logger = logging.getLogger(__name__)


class DiffService:
    """Compare, swap and clear actions over an input pair"""

    def __init__(self, max_cells: int | None = None):
        self.line_engine = LineDiffEngine(max_cells=max_cells)
        self.token_engine = TokenDiffEngine(max_cells=max_cells)

    def compare(
        self,
        left: str,
        right: str,
        options: DiffOptions | None = None,
        render: RenderFormat = RenderFormat.NONE,
        context_lines: int | None = None,
        cancel: threading.Event | None = None,
    ) -> DiffResult:
        """Normalize both texts, diff them and number the resulting rows"""
        options = options or DiffOptions()
        old_text = normalize(left, options)
        new_text = normalize(right, options)

        ops = self.line_engine.diff(old_text, new_text, cancel=cancel)
        rows = self._build_rows(ops, options.inline_token_diff, cancel)
        stats = DiffStats.tally(ops)

        rendered = None
        if render == RenderFormat.HTML:
            rendered = render_html(rows)
        elif render == RenderFormat.TEXT:
            rendered = render_text(rows, context_lines)

        logger.debug("[DiffService] Compared %d rows: %s", len(rows), stats.summary())

        return DiffResult(
            rows=rows,
            stats=stats,
            summary=stats.summary(),
            rendered=rendered,
        )

    def _build_rows(
        self,
        ops: list[LineOp],
        inline_token_diff: bool,
        cancel: threading.Event | None,
    ) -> list[DiffRow]:
        """Attach 1-indexed line numbers and, for modify ops, token spans"""
        rows = []
        line_a = 0
        line_b = 0

        for op in ops:
            num_a = None
            num_b = None
            if op.has_old:
                line_a += 1
                num_a = line_a
            if op.has_new:
                line_b += 1
                num_b = line_b

            span_a = None
            span_b = None
            if op.type == OpType.MODIFY and inline_token_diff:
                span_a, span_b = self.token_engine.diff_tokens(op.a, op.b, cancel=cancel)

            rows.append(
                DiffRow(
                    type=op.type,
                    a=op.a,
                    b=op.b,
                    line_a=num_a,
                    line_b=num_b,
                    span_a=span_a,
                    span_b=span_b,
                )
            )

        return rows

    def diff_tokens(self, a: str, b: str) -> tuple[TokenSpan, TokenSpan]:
        """Token spans for a single line pair"""
        return self.token_engine.diff_tokens(a, b)

    def swap(self, pair: TextPair) -> TextPair:
        """Exchange the left and right texts"""
        return TextPair(left=pair.right, right=pair.left)

    def clear(self) -> TextPair:
        """An empty input pair"""
        return TextPair(left="", right="")
