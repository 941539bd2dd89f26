import pytest

from bibscraper.citation_key import generate_citation_key


def test_uses_first_author_token_year_and_first_title_word() -> None:
    assert generate_citation_key("Doe", "2024", "Hi there") == "Doe2024Hi"


def test_first_whitespace_token_of_author_is_used() -> None:
    assert generate_citation_key("Jane Doe", "2024", "Hi") == "Jane2024Hi"


def test_defaults_when_everything_is_unknown() -> None:
    assert generate_citation_key("", "", "") == "UnknownNDNoTitle"


def test_missing_author_and_year_with_title() -> None:
    assert generate_citation_key("", "", "Cool Post") == "UnknownNDCool"


def test_whitespace_only_values_fall_back_to_defaults() -> None:
    assert generate_citation_key("   ", "", "\t\n") == "UnknownNDNoTitle"


def test_non_alphanumerics_stripped_from_author_and_title() -> None:
    assert generate_citation_key("O'Brien,", "2020", "Hello-World: a") == "OBrien2020HelloWorld"


def test_year_is_used_verbatim() -> None:
    assert generate_citation_key("Doe", "20-1", "Title") == "Doe20-1Title"


def test_unicode_letters_are_kept() -> None:
    assert generate_citation_key("Müller", "2019", "Über") == "Müller2019Über"


@pytest.mark.parametrize(
    "author,year,title",
    [
        ("Jane Doe", "2024", "Hi"),
        ("", "", ""),
        ("!!!", "", "???"),
    ],
)
def test_key_is_deterministic_and_non_empty(author: str, year: str, title: str) -> None:
    first = generate_citation_key(author, year, title)
    assert first == generate_citation_key(author, year, title)
    assert first
