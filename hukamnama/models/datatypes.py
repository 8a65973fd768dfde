"""Core datatypes shared across Hukamnama modules.

Responsibilities:
- Represent immutable records exchanged between pipeline stages.
- Provide the outbound transcript payload shape for rendering and storage.

Key types:
- `RawInput`, `LinePair`, and `Transcript`.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class RawInput:
    """Raw page fields produced by the extraction stage.

    Attributes:
        title: Shabad heading from the Gurmukhi card.
        date_text: Date header shown on the page.
        ang_text: Ang (page of the Guru Granth Sahib) label.
        source_raw: Gurmukhi text blob with stanza and verse markers.
        translation_raw: English translation blob with `||` markers.
    """

    title: str
    date_text: str
    ang_text: str
    source_raw: str
    translation_raw: str

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-serializable mapping of the raw fields."""

        return {
            "title": self.title,
            "date_text": self.date_text,
            "ang_text": self.ang_text,
            "source_raw": self.source_raw,
            "translation_raw": self.translation_raw,
        }


@dataclass(frozen=True, slots=True)
class LinePair:
    """One Gurmukhi verse line paired with its translated sentence(s).

    Attributes:
        source_line: Non-empty verse line without the verse-end glyph.
        translation_line: Translation text, empty when none was available.
    """

    source_line: str
    translation_line: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the outbound `{gurmukhi, translation}` mapping."""

        return {"gurmukhi": self.source_line, "translation": self.translation_line}


@dataclass(frozen=True, slots=True)
class Transcript:
    """Line-aligned bilingual Hukamnama returned to callers.

    Attributes:
        date: Normalized date header.
        ang: Normalized ang label.
        title: Normalized shabad title.
        lines: Ordered line pairs in document order.
    """

    date: str
    ang: str
    title: str
    lines: tuple[LinePair, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        """Return the outbound transcript payload."""

        return {
            "date": self.date,
            "ang": self.ang,
            "title": self.title,
            "lines": [line.to_dict() for line in self.lines],
        }
