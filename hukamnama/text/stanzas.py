"""Stanza segmentation for Gurmukhi and English Hukamnama blobs.

Responsibilities:
- Recognize numbered verse endings and refrain ("Rahaao" / "Pause") markers.
- Collapse every recognized marker into one sentinel before splitting, so that
  overlapping markers never produce extra boundaries.

Marker patterns are applied longest-first. A later pattern only sees text that
earlier patterns left behind, which is how a `॥` shared between a numbered
ending and a following refrain (`॥੧॥ ਰਹਾਉ ॥`) is still handled.
"""

from __future__ import annotations

import re

VERSE_END = "॥"
SOURCE_REFRAIN_WORD = "ਰਹਾਉ"
TRANSLATION_REFRAIN_WORD = "Pause"

_SENTINEL = "\ue000"
_NUMBER = r"\s*[0-9੦-੯]+\s*"
_DELIMITER = r"\|\|"

_SOURCE_MARKERS = (
    re.compile(rf"{VERSE_END}(?:{_NUMBER}{VERSE_END}){{2,}}"),
    re.compile(rf"{VERSE_END}{_NUMBER}{VERSE_END}"),
    re.compile(rf"{VERSE_END}\s*{SOURCE_REFRAIN_WORD}\s*{VERSE_END}"),
    re.compile(rf"{SOURCE_REFRAIN_WORD}\s*{VERSE_END}"),
)

_TRANSLATION_MARKERS = (
    re.compile(rf"{_DELIMITER}(?:{_NUMBER}{_DELIMITER}){{2,}}"),
    re.compile(rf"{_DELIMITER}{_NUMBER}{_DELIMITER}"),
    re.compile(
        rf"{_DELIMITER}\s*{TRANSLATION_REFRAIN_WORD}\s*{_DELIMITER}",
        flags=re.IGNORECASE,
    ),
    re.compile(rf"\b{TRANSLATION_REFRAIN_WORD}\s*{_DELIMITER}", flags=re.IGNORECASE),
)


def split_stanzas(text: str, is_source: bool) -> list[str]:
    """Split a normalized blob into document-ordered stanzas.

    Args:
        text: Normalized Gurmukhi or English blob.
        is_source: `True` for Gurmukhi marker rules, `False` for translation rules.

    Returns:
        Trimmed non-empty stanzas. A blob without any marker yields itself as the
        only stanza; a blank blob yields an empty list.
    """

    markers = _SOURCE_MARKERS if is_source else _TRANSLATION_MARKERS
    marked = text
    for pattern in markers:
        marked = pattern.sub(_SENTINEL, marked)

    return [piece.strip() for piece in marked.split(_SENTINEL) if piece.strip()]
