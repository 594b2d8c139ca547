"""
Renderer - Turn diff rows into HTML markup or plain text

Consumes the rows produced by the diff service; the engines never call it.
"""

from __future__ import annotations

import html

from sidediff.models.diff import DiffRow, OpType, SegmentKind, TokenSpan

_LEFT_CLASS = {
    OpType.EQUAL: "eq",
    OpType.INSERT: "eq",
    OpType.DELETE: "del",
    OpType.MODIFY: "mod",
}
_RIGHT_CLASS = {
    OpType.EQUAL: "eq",
    OpType.INSERT: "ins",
    OpType.DELETE: "eq",
    OpType.MODIFY: "mod",
}
_MARK_CLASS = {
    SegmentKind.ADDED: "add",
    SegmentKind.REMOVED: "del",
}


def render_span_html(span: TokenSpan) -> str:
    """Escape a token span, wrapping added/removed tokens in <mark>"""
    parts = []
    for segment in span.segments:
        text = html.escape(segment.text)
        mark = _MARK_CLASS.get(segment.kind)
        parts.append(f'<mark class="{mark}">{text}</mark>' if mark else text)
    return "".join(parts)


def _cell(css: str, line_no: int | None, code_html: str) -> str:
    ln = "" if line_no is None else str(line_no)
    return (
        f'<div class="cell {css}"><div class="ln">{ln}</div>'
        f'<div class="code">{code_html}</div></div>'
    )


def render_html(rows: list[DiffRow]) -> str:
    """Two-column grid: a left and a right cell per row"""
    cells = []
    for row in rows:
        if row.type == OpType.MODIFY and row.span_a is not None and row.span_b is not None:
            code_a = render_span_html(row.span_a)
            code_b = render_span_html(row.span_b)
        else:
            code_a = html.escape(row.a) if row.a is not None else ""
            code_b = html.escape(row.b) if row.b is not None else ""

        cells.append(_cell(_LEFT_CLASS[row.type], row.line_a, code_a))
        cells.append(_cell(_RIGHT_CLASS[row.type], row.line_b, code_b))
    return "\n".join(cells)


def render_text(rows: list[DiffRow], context_lines: int | None = None) -> str:
    """Prefix lines with '  ', '- ' or '+ '

    With context_lines set, an unchanged run keeps at most that many lines on
    each side that touches a change; the rest collapse into a single '...'.
    Leading and trailing runs therefore keep only their inner end.
    """
    result_lines: list[str] = []
    equal_run: list[str] = []
    seen_change = False

    def flush_equal(before_change: bool) -> None:
        keep_head = context_lines if seen_change else 0
        keep_tail = context_lines if before_change else 0
        if context_lines is None or len(equal_run) <= keep_head + keep_tail:
            result_lines.extend(f"  {line}" for line in equal_run)
        else:
            head = equal_run[:keep_head]
            tail = equal_run[len(equal_run) - keep_tail:] if keep_tail else []
            result_lines.extend(f"  {line}" for line in head)
            result_lines.append("...")
            result_lines.extend(f"  {line}" for line in tail)
        equal_run.clear()

    for row in rows:
        if row.type == OpType.EQUAL:
            equal_run.append(row.a)
            continue
        flush_equal(before_change=True)
        seen_change = True
        if row.type in (OpType.DELETE, OpType.MODIFY):
            result_lines.append(f"- {row.a}")
        if row.type in (OpType.INSERT, OpType.MODIFY):
            result_lines.append(f"+ {row.b}")
    flush_equal(before_change=False)

    return "\n".join(result_lines)
