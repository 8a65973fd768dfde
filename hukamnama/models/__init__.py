"""Typed records exchanged between Hukamnama pipeline stages."""

from .datatypes import LinePair, RawInput, Transcript

__all__ = ["RawInput", "LinePair", "Transcript"]
