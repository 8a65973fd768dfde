"""Top-level package for Hukamnama.

This package fetches the daily Hukamnama page and aligns its Gurmukhi verse
lines with the English translation. The pure alignment entry point is
`align`; `HukamnamaPipeline` adds acquisition and extraction.
"""

from .pipeline import HukamnamaPipeline
from .text.aligner import align, build_transcript

__all__ = ["HukamnamaPipeline", "align", "build_transcript", "__version__"]

__version__ = "0.1.0"
