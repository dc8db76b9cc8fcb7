"""Tests for building documents from raw text."""

from __future__ import annotations

from txtpdf.layout import FontSpec, build_document

FONT = FontSpec(name="Test", size=10, line_height=20)


def char_width(text: str) -> float:
    return float(len(text))


def test_build_document_wraps_to_writable_width() -> None:
    doc = build_document(
        "one two three four five",
        "numbers",
        font=FONT,
        measure=char_width,
        page_size=(33, 200),
        margin=10,
    )
    assert doc.title == "numbers"
    assert doc.font == FONT
    assert [pl.text for pl in doc.pages[0].lines] == ["one two three", "four five"]


def test_build_document_paginates_with_line_height() -> None:
    text = " ".join(f"w{i}" for i in range(10))
    doc = build_document(
        text, "many", font=FONT, measure=char_width, page_size=(22, 100), margin=10
    )
    assert doc.line_count == 10
    assert doc.page_count == 3
    assert [len(p.lines) for p in doc.pages] == [4, 4, 2]


def test_empty_text_gives_single_blank_page() -> None:
    doc = build_document("", "empty", font=FONT, measure=char_width, page_size=(100, 100), margin=10)
    assert doc.page_count == 1
    assert doc.pages[0].is_blank
