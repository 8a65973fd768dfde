"""Verse-line distribution of translated sentences within one stanza.

Responsibilities:
- Split a Gurmukhi stanza into verse lines on the verse-end glyph.
- Split an English stanza into sentences on `.`, `?` and `!` runs.
- Map sentences onto verse lines with a deterministic even-distribution policy.

The Gurmukhi side decides how many pairs a stanza emits; translation text is
padded with empty strings and never truncates a verse line.
"""

from __future__ import annotations

import re

from ..models.datatypes import LinePair
from .stanzas import VERSE_END

_SENTENCE_PATTERN = re.compile(r"[^.?!]+[.?!]+")


def split_verse_lines(source_stanza: str) -> list[str]:
    """Return trimmed non-empty verse lines of a Gurmukhi stanza."""

    return [line.strip() for line in source_stanza.split(VERSE_END) if line.strip()]


def split_sentences(translation_stanza: str) -> list[str]:
    """Return trimmed sentences of an English stanza in document order.

    Only runs closed by terminal punctuation count as sentences, so text after
    the last closing run is dropped. A stanza without terminal punctuation is
    one sentence, and a blank stanza has none.
    """

    sentences = [
        match.group().strip()
        for match in _SENTENCE_PATTERN.finditer(translation_stanza)
        if match.group().strip()
    ]
    if sentences:
        return sentences

    whole = translation_stanza.strip()
    return [whole] if whole else []


def sentence_counts_per_line(sentence_count: int, line_count: int) -> list[int]:
    """Return how many consecutive sentences each verse line receives.

    With fewer sentences than lines every line gets at most one. With more, the
    first `sentence_count % line_count` lines get one extra sentence.
    """

    if line_count <= 0:
        return []
    if sentence_count <= line_count:
        return [1 if index < sentence_count else 0 for index in range(line_count)]

    base, extra = divmod(sentence_count, line_count)
    return [base + 1 if index < extra else base for index in range(line_count)]


def distribute(source_stanza: str, translation_stanza: str) -> list[LinePair]:
    """Pair each verse line of a stanza with its share of translated sentences.

    Args:
        source_stanza: One Gurmukhi stanza without stanza markers.
        translation_stanza: The positionally matching English stanza, or `""`.

    Returns:
        One `LinePair` per non-empty verse line, in order. Empty when the
        Gurmukhi stanza has no verse lines.
    """

    verse_lines = split_verse_lines(source_stanza)
    if not verse_lines:
        return []

    if len(verse_lines) == 1:
        return [LinePair(source_line=verse_lines[0], translation_line=translation_stanza)]

    sentences = split_sentences(translation_stanza)
    translations: list[str] = []
    cursor = 0
    for count in sentence_counts_per_line(len(sentences), len(verse_lines)):
        translations.append(" ".join(sentences[cursor : cursor + count]))
        cursor += count

    return [
        LinePair(source_line=line, translation_line=translation)
        for line, translation in zip(verse_lines, translations)
    ]
