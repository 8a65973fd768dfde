"""Bilingual alignment entry points.

Responsibilities:
- Normalize and segment both language blobs into stanzas.
- Pair stanzas positionally and distribute each pair into line pairs.
- Assemble the final `Transcript` from extracted page fields.
"""

from __future__ import annotations

from itertools import zip_longest

from ..models.datatypes import LinePair, RawInput, Transcript
from .distributor import distribute
from .normalizer import normalize
from .stanzas import split_stanzas


def align(source_raw: str, translation_raw: str) -> list[LinePair]:
    """Align raw Gurmukhi and English blobs into ordered line pairs.

    Stanzas missing on either side are treated as empty strings, so extra
    Gurmukhi stanzas still emit their verse lines with empty translations and
    extra English stanzas are dropped.
    """

    source_stanzas = split_stanzas(normalize(source_raw), is_source=True)
    translation_stanzas = split_stanzas(normalize(translation_raw), is_source=False)

    lines: list[LinePair] = []
    for source_stanza, translation_stanza in zip_longest(
        source_stanzas, translation_stanzas, fillvalue=""
    ):
        lines.extend(distribute(source_stanza, translation_stanza))
    return lines


def build_transcript(raw: RawInput) -> Transcript:
    """Build a fresh transcript from extracted page fields."""

    return Transcript(
        date=normalize(raw.date_text),
        ang=normalize(raw.ang_text),
        title=normalize(raw.title),
        lines=tuple(align(raw.source_raw, raw.translation_raw)),
    )
