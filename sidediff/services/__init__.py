"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_service import DiffService
from .lcs import lcs_script
from .line_diff import LineDiffEngine, diff_lines, pair_modifications, split_lines
from .normalizer import normalize
from .renderer import render_html, render_span_html, render_text
from .token_diff import TokenDiffEngine, diff_tokens, tokenize

__all__ = [
    "ConfigManager",
    "DiffService",
    "LineDiffEngine",
    "TokenDiffEngine",
    "diff_lines",
    "diff_tokens",
    "lcs_script",
    "normalize",
    "pair_modifications",
    "render_html",
    "render_span_html",
    "render_text",
    "split_lines",
    "tokenize",
]
