"""Structural field extraction from the Hukamnama page HTML.

Responsibilities:
- Locate the Gurmukhi and English translation cards by CSS class.
- Return raw, unnormalized text blobs as a `RawInput` record.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from ..models.datatypes import RawInput

_CARD_SELECTOR = ".hukamnama-card, .hukamnama-card2"
_TRANSLATION_TITLE_KEYWORD = "english translation"


class PageExtractionError(RuntimeError):
    """Raised when the page does not contain a usable Gurmukhi card."""


def _text_of(node: Tag | None) -> str:
    """Return concatenated trimmed text of `node`, or `""` when absent."""

    if node is None:
        return ""
    return node.get_text().strip()


class HukamnamaPageExtractor:
    """Extract date, ang, title, and both text blobs from rendered page HTML."""

    def extract(self, html: str) -> RawInput:
        """Parse `html` and return the raw fields consumed by the aligner.

        Raises:
            PageExtractionError: If no Gurmukhi card or Gurmukhi text is present.
        """

        soup = BeautifulSoup(html, "html.parser")

        gurmukhi_card = soup.select_one(".hukamnama-card") or soup.select_one(
            ".hukamnama-card2"
        )
        if gurmukhi_card is None:
            raise PageExtractionError("No Hukamnama card found on page.")

        source_raw = _text_of(gurmukhi_card.select_one(".hukamnama-text"))
        if not source_raw:
            raise PageExtractionError("Hukamnama card has no Gurmukhi text.")

        ang_nodes = gurmukhi_card.select(".customDate")
        return RawInput(
            title=_text_of(gurmukhi_card.select_one(".hukamnama-title")),
            date_text=_text_of(soup.select_one(".fs-5.customDate")),
            ang_text=_text_of(ang_nodes[-1]) if ang_nodes else "",
            source_raw=source_raw,
            translation_raw=self._translation_text(soup),
        )

    @staticmethod
    def _translation_text(soup: BeautifulSoup) -> str:
        """Return the text of the last card titled as an English translation."""

        translation = ""
        for card in soup.select(_CARD_SELECTOR):
            card_title = _text_of(card.select_one(".hukamnama-title"))
            if _TRANSLATION_TITLE_KEYWORD in card_title.lower():
                translation = _text_of(card.select_one(".hukamnama-text"))
        return translation
