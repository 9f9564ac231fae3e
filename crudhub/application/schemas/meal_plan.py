"""Pydantic schemas for MealPlan payloads."""

from datetime import datetime
from typing import Literal

from pydantic import Field, ValidationInfo, field_validator

from .common import EntityPayload, IsoDateTime, ObjectIdStr

Weekday = Literal[
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
]


class PlannedMeal(EntityPayload):
    day: Weekday
    mealType: Literal["Breakfast", "Lunch", "Dinner", "Snack"]
    recipeId: ObjectIdStr


class MealPlanPayload(EntityPayload):
    """Schema for creating or replacing a meal plan."""

    userId: ObjectIdStr
    name: str = Field(..., min_length=3, max_length=100, examples=["Week 12"])
    startDate: IsoDateTime
    endDate: IsoDateTime
    meals: list[PlannedMeal] = Field(..., min_length=1, max_length=50)
    notes: str | None = Field(None, max_length=500)

    @field_validator("endDate")
    @classmethod
    def end_after_start(cls, value: datetime, info: ValidationInfo) -> datetime:
        # startDate is absent from info.data when it failed its own rules
        start = info.data.get("startDate")
        if start is not None and value <= start:
            raise ValueError("End date must be after start date")
        return value
