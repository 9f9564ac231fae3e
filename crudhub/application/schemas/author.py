"""Pydantic schema for Author payloads."""

from pydantic import EmailStr, Field

from .common import CalendarDate, EntityPayload


class AuthorPayload(EntityPayload):
    """Schema for creating or replacing an author."""

    firstName: str = Field(..., min_length=2, max_length=60)
    lastName: str = Field(..., min_length=2, max_length=60)
    email: EmailStr
    country: str = Field(..., min_length=2, max_length=60)
    birthDate: CalendarDate = Field(..., examples=["1819-11-22"])
