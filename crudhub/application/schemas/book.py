"""Pydantic schema for Book payloads."""

from datetime import date

from pydantic import Field, field_validator

from .common import EntityPayload, ObjectIdStr, ShortLabel

FIRST_PRINTING_YEAR = 1450


class BookPayload(EntityPayload):
    """Schema for creating or replacing a book."""

    title: str = Field(..., min_length=3, max_length=200)
    isbn: str = Field(..., min_length=10, max_length=17, examples=["978-0141439518"])
    authorId: ObjectIdStr
    publishedYear: int = Field(..., ge=FIRST_PRINTING_YEAR)
    genres: list[ShortLabel] = Field(..., min_length=1, max_length=5)
    pages: int = Field(..., ge=1, le=10_000)
    language: str = Field(..., min_length=2, max_length=30)
    inPrint: bool

    @field_validator("publishedYear")
    @classmethod
    def not_in_future(cls, value: int) -> int:
        current_year = date.today().year
        if value > current_year:
            raise ValueError(f"Published year cannot be after {current_year}")
        return value
