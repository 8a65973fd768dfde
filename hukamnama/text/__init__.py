"""Text normalization, segmentation, and bilingual alignment components.

This package is pure and side-effect free: every function maps strings to
strings or line pairs and never raises on malformed input.
"""

from .aligner import align, build_transcript
from .distributor import distribute, split_sentences, split_verse_lines
from .normalizer import normalize
from .stanzas import split_stanzas

__all__ = [
    "normalize",
    "split_stanzas",
    "distribute",
    "split_verse_lines",
    "split_sentences",
    "align",
    "build_transcript",
]
