"""Compare mode request/response models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from .diff import TokenSpan


class DiffOptions(BaseModel):
    """Flags applied around the diff core

    ignore_case and trim_trailing_whitespace are applied by the normalizer
    before the texts reach the engine; inline_token_diff decides whether
    modified lines get token spans.
    """

    ignore_case: bool = False
    trim_trailing_whitespace: bool = False
    inline_token_diff: bool = True


class RenderFormat(str, Enum):
    """Optional rendering attached to a compare result"""

    NONE = "none"
    HTML = "html"
    TEXT = "text"


class CompareRequest(BaseModel):
    """Request to compare two texts"""

    left: str
    right: str
    options: DiffOptions | None = None  # None uses the configured defaults
    render: RenderFormat = RenderFormat.NONE
    context_lines: int | None = Field(default=None, ge=0)  # text rendering only


class TextPair(BaseModel):
    """The two input texts"""

    left: str = ""
    right: str = ""


class TokenDiffRequest(BaseModel):
    """Request for a token-level diff of a single line pair"""

    a: str
    b: str


class TokenDiffResponse(BaseModel):
    """Token spans for both sides of a line pair"""

    span_a: TokenSpan
    span_b: TokenSpan
