"""Pydantic schema for Recipe payloads."""

from typing import Annotated, Literal

from pydantic import Field, StringConstraints

from .common import EntityPayload, ObjectIdStr, ShortLabel

Ingredient = Annotated[str, StringConstraints(min_length=1, max_length=200)]
InstructionStep = Annotated[str, StringConstraints(min_length=5, max_length=500)]


class RecipePayload(EntityPayload):
    """Schema for creating or replacing a recipe."""

    title: str = Field(..., min_length=3, max_length=100, examples=["Shakshuka"])
    description: str = Field(..., min_length=10, max_length=500)
    ingredients: list[Ingredient] = Field(..., min_length=1, max_length=30)
    instructions: list[InstructionStep] = Field(..., min_length=1, max_length=20)
    prepTime: int = Field(..., ge=1, le=300, description="Minutes")
    cookTime: int = Field(..., ge=1, le=600, description="Minutes")
    servingSize: int = Field(..., ge=1, le=20)
    difficulty: Literal["Easy", "Medium", "Hard"]
    cuisine: str = Field(..., min_length=2, max_length=30)
    tags: list[ShortLabel] | None = None
    authorId: ObjectIdStr
