from .common import (
    CreatedResponse,
    EntityPayload,
    ErrorResponse,
    MessageResponse,
    ObjectIdStr,
)
from .user import UserPayload
from .recipe import RecipePayload
from .meal_plan import MealPlanPayload, PlannedMeal
from .grocery_list import GroceryItem, GroceryListPayload
from .author import AuthorPayload
from .book import BookPayload
from .contact import ContactPayload

__all__ = [
    "CreatedResponse",
    "EntityPayload",
    "ErrorResponse",
    "MessageResponse",
    "ObjectIdStr",
    "UserPayload",
    "RecipePayload",
    "MealPlanPayload",
    "PlannedMeal",
    "GroceryItem",
    "GroceryListPayload",
    "AuthorPayload",
    "BookPayload",
    "ContactPayload",
]
