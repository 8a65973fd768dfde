"""Unit tests for end-to-end bilingual alignment and transcript assembly."""

from __future__ import annotations

from hukamnama.models.datatypes import LinePair, RawInput, Transcript
from hukamnama.text.aligner import align, build_transcript


def test_align_pairs_stanzas_and_concatenates_in_order() -> None:
    source = "ਇਕ ॥ ਦੋ ॥੧॥ ਰਹਾਉ ਤੁਕ ॥ ਰਹਾਉ ॥ ਤਿੰਨ ॥ ਚਾਰ ॥੨॥੧॥"
    translation = "One. Two. Three. ||1|| Refrain meaning. It repeats. ||Pause|| Four. ||2||1||"

    lines = align(source, translation)

    assert lines == [
        LinePair("ਇਕ", "One. Two."),
        LinePair("ਦੋ", "Three."),
        LinePair("ਰਹਾਉ ਤੁਕ", "Refrain meaning. It repeats."),
        LinePair("ਤਿੰਨ", "Four."),
        LinePair("ਚਾਰ", ""),
    ]


def test_align_pads_missing_translation_stanzas_without_raising() -> None:
    """A third Gurmukhi stanza without a translation stanza gets empty translations."""

    source = "ਇਕ ॥੧॥ ਦੋ ॥੨॥ ਤਿੰਨ ॥ ਚਾਰ ॥੩॥"
    translation = "One. ||1|| Two. ||2||"

    lines = align(source, translation)

    assert lines[:2] == [LinePair("ਇਕ", "One."), LinePair("ਦੋ", "Two.")]
    assert lines[2:] == [LinePair("ਤਿੰਨ", ""), LinePair("ਚਾਰ", "")]


def test_align_drops_surplus_translation_stanzas() -> None:
    lines = align("ਇਕ ॥੧॥", "One. ||1|| Orphan. ||2||")

    assert lines == [LinePair("ਇਕ", "One.")]


def test_align_normalizes_raw_whitespace_and_entities() -> None:
    source = "\n  ਇਕ&nbsp;ਤੁਕ ॥\n\n ਦੋ   ॥੧॥ "
    translation = "  First\n line.&nbsp; Second line.  ||1||"

    assert align(source, translation) == [
        LinePair("ਇਕ ਤੁਕ", "First line."),
        LinePair("ਦੋ", "Second line."),
    ]


def test_align_is_total_on_degenerate_input() -> None:
    assert align("", "") == []
    assert align("", "Only translation. ||1||") == []
    assert align("ਇਕ ਤੁਕ", "") == [LinePair("ਇਕ ਤੁਕ", "")]
    assert align("॥ ॥੧॥", "|| ||") == []


def test_build_transcript_carries_normalized_header_fields() -> None:
    raw = RawInput(
        title="  ਸੋਰਠਿ  ਮਹਲਾ ੫ ",
        date_text="Monday,\n 19 October 2026",
        ang_text=" (ਅੰਗ: ੬੧੯) ",
        source_raw="ਇਕ ॥ ਦੋ ॥੧॥",
        translation_raw="One. Two. Three. ||1||",
    )

    transcript = build_transcript(raw)

    assert transcript == Transcript(
        date="Monday, 19 October 2026",
        ang="(ਅੰਗ: ੬੧੯)",
        title="ਸੋਰਠਿ ਮਹਲਾ ੫",
        lines=(LinePair("ਇਕ", "One. Two."), LinePair("ਦੋ", "Three.")),
    )


def test_transcript_to_dict_uses_outbound_field_names() -> None:
    transcript = Transcript(
        date="d",
        ang="a",
        title="t",
        lines=(LinePair("ਇਕ", "One."), LinePair("ਦੋ")),
    )

    assert transcript.to_dict() == {
        "date": "d",
        "ang": "a",
        "title": "t",
        "lines": [
            {"gurmukhi": "ਇਕ", "translation": "One."},
            {"gurmukhi": "ਦੋ", "translation": ""},
        ],
    }
