"""Pydantic schema for User payloads."""

from pydantic import EmailStr, Field

from .common import EntityPayload, ShortLabel


class UserPayload(EntityPayload):
    """Schema for creating or replacing a user."""

    email: EmailStr = Field(..., examples=["ada@example.com"])
    displayName: str = Field(..., min_length=2, max_length=60, examples=["Ada"])
    googleId: str | None = None
    dietaryPreferences: list[ShortLabel] | None = Field(None, examples=[["vegetarian"]])
