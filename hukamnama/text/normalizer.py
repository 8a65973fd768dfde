"""Whitespace and entity normalization for raw page text.

Responsibilities:
- Collapse whitespace and `&nbsp;` artifacts into canonical single spacing.
- Stay total and idempotent so later stages can re-normalize safely.
"""

from __future__ import annotations

import re

_NBSP_PATTERN = re.compile(r"&nbsp;|\u00a0", flags=re.IGNORECASE)
_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize(raw: str) -> str:
    """Return `raw` with entities replaced, whitespace collapsed, and ends trimmed."""

    text = _NBSP_PATTERN.sub(" ", raw)
    return _WHITESPACE_PATTERN.sub(" ", text).strip()
