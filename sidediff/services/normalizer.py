"""
Normalizer - Prepare raw text for the diff engines
"""

from __future__ import annotations

import re

from sidediff.errors import InvalidInputError
from sidediff.models.compare import DiffOptions

_NEWLINE_RE = re.compile(r"\r\n?")


def normalize(text: str, options: DiffOptions | None = None) -> str:
    """Unify newlines to \\n, then optionally trim line ends and lower-case"""
    if not isinstance(text, str):
        raise InvalidInputError(f"text must be a string, got {type(text).__name__}")
    options = options or DiffOptions()

    result = _NEWLINE_RE.sub("\n", text)

    if options.trim_trailing_whitespace:
        result = "\n".join(line.rstrip() for line in result.split("\n"))

    if options.ignore_case:
        result = result.lower()

    return result
