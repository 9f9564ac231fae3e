"""Pydantic schema for Contact payloads."""

from pydantic import EmailStr, Field

from .common import EntityPayload


class ContactPayload(EntityPayload):
    """Schema for creating or replacing a contact."""

    firstName: str = Field(..., min_length=2, max_length=50)
    lastName: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    favoriteColor: str = Field(..., min_length=1, max_length=30)
    birthday: str = Field(..., min_length=1, max_length=30)
    phone: str | None = Field(None, max_length=30)
