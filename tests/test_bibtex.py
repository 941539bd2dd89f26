from datetime import date

from bibscraper.bibtex import render_misc_record
from bibscraper.models import ExtractionResult

ACCESSED = date(2025, 6, 1)


def test_full_record_layout() -> None:
    record = render_misc_record(
        "Jane2024Hi",
        ExtractionResult(title="Hi", author="Jane Doe", year="2024"),
        "https://example.com/post",
        "example.com",
        accessed=ACCESSED,
    )
    assert record == (
        "@misc{Jane2024Hi,\n"
        "  title = {Hi},\n"
        "  author = {Jane Doe},\n"
        "  howpublished = {\\url{https://example.com/post}},\n"
        "  note = {Accessed: 2025-06-01},\n"
        "  year = {2024},\n"
        "  urldate = {2025-06-01},\n"
        "  publisher = {example.com},\n"
        "}"
    )


def test_author_and_year_omitted_when_unknown() -> None:
    record = render_misc_record(
        "UnknownNDCool",
        ExtractionResult(title="Cool Post"),
        "https://example.com/cool",
        "example.com",
        accessed=ACCESSED,
    )
    assert "author =" not in record
    assert "year =" not in record
    assert "  title = {Cool Post},\n" in record
    assert "  publisher = {example.com},\n" in record


def test_values_are_not_escaped() -> None:
    record = render_misc_record(
        "key",
        ExtractionResult(title="Sets {a} & \\b"),
        "https://example.com/",
        "example.com",
        accessed=ACCESSED,
    )
    assert "  title = {Sets {a} & \\b},\n" in record


def test_defaults_to_today() -> None:
    record = render_misc_record(
        "key", ExtractionResult(title="T"), "https://example.com/", "example.com"
    )
    assert f"urldate = {{{date.today():%Y-%m-%d}}}" in record
    assert not record.endswith("\n")
