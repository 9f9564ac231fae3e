"""Pydantic schemas for GroceryList payloads."""

from typing import Literal

from pydantic import Field

from .common import EntityPayload, IsoDateTime, ObjectIdStr

GroceryCategory = Literal[
    "Produce", "Dairy", "Meat", "Bakery", "Pantry", "Frozen", "Other"
]


class GroceryItem(EntityPayload):
    name: str = Field(..., min_length=1, max_length=100)
    quantity: str = Field(..., min_length=1, max_length=50, examples=["2 kg"])
    category: GroceryCategory | None = None
    checked: bool | None = None


class GroceryListPayload(EntityPayload):
    """Schema for creating or replacing a grocery list."""

    userId: ObjectIdStr
    mealPlanId: ObjectIdStr | None = None
    name: str = Field(..., min_length=3, max_length=100)
    items: list[GroceryItem] = Field(..., min_length=1, max_length=100)
    createdDate: IsoDateTime | None = None
