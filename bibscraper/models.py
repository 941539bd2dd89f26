"""Data models for extracted citation metadata."""

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator


@dataclass
class ExtractionResult:
    """Metadata scraped from one page. Empty strings mean unknown."""

    title: str = ""
    author: str = ""
    year: str = ""


class SchemaAuthor(BaseModel):
    """One entry of a Schema.org ``author`` array."""

    name: str


class StructuredArticle(BaseModel):
    """A Schema.org Article decoded from a JSON-LD script block."""

    type_of: str = Field(..., alias="@type")
    headline: Optional[str] = None
    author: List[SchemaAuthor] = Field(default_factory=list)
    date_published: Optional[str] = Field(None, alias="datePublished")

    @field_validator("author", mode="before")
    @classmethod
    def _default_malformed_authors(cls, value):
        # Anything that is not a list of {name: str} objects counts as no authors
        if not isinstance(value, list):
            return []
        try:
            return [SchemaAuthor.model_validate(item) for item in value]
        except ValidationError:
            return []

    @property
    def author_names(self) -> List[str]:
        return [a.name for a in self.author]


def year_from_date(value: Optional[str]) -> str:
    """Return the first 4 characters of a date string, or "" if unavailable.

    No calendar validation is done: "abcd-01-01" gives "abcd". Strings
    shorter than 4 characters give "".
    """
    if not value or len(value) < 4:
        return ""
    return value[:4]
