"""Registry of managed entity types — one row of configuration per collection."""

from crudhub.application.schemas import (
    AuthorPayload,
    BookPayload,
    ContactPayload,
    GroceryListPayload,
    MealPlanPayload,
    RecipePayload,
    UserPayload,
)
from crudhub.domain.entities import DeleteGuard, EntitySpec, ForeignKey, Operation

_WRITES = frozenset({Operation.CREATE, Operation.REPLACE})

USERS = EntitySpec(
    name="user",
    path="users",
    collection="users",
    schema=UserPayload,
    tag="Users",
    delete_guards=(DeleteGuard("recipes", "authorId", "recipes", "recipe"),),
    unique_fields=("email",),
)

RECIPES = EntitySpec(
    name="recipe",
    path="recipes",
    collection="recipes",
    schema=RecipePayload,
    tag="Recipes",
    foreign_keys=(ForeignKey("authorId", "users"),),
)

MEAL_PLANS = EntitySpec(
    name="meal plan",
    path="meal-plans",
    collection="mealPlans",
    schema=MealPlanPayload,
    tag="Meal Plans",
    foreign_keys=(
        ForeignKey("userId", "users"),
        ForeignKey("meals[].recipeId", "recipes"),
    ),
    protected=_WRITES,
)

GROCERY_LISTS = EntitySpec(
    name="grocery list",
    path="grocery-lists",
    collection="groceryLists",
    schema=GroceryListPayload,
    tag="Grocery Lists",
    foreign_keys=(
        ForeignKey("userId", "users"),
        ForeignKey("mealPlanId", "mealPlans"),
    ),
    protected=_WRITES,
)

AUTHORS = EntitySpec(
    name="author",
    path="authors",
    collection="authors",
    schema=AuthorPayload,
    tag="Authors",
    delete_guards=(DeleteGuard("books", "authorId", "books", "book"),),
    protected=_WRITES | {Operation.DELETE},
)

BOOKS = EntitySpec(
    name="book",
    path="books",
    collection="books",
    schema=BookPayload,
    tag="Books",
    foreign_keys=(ForeignKey("authorId", "authors"),),
)

CONTACTS = EntitySpec(
    name="contact",
    path="contacts",
    collection="contacts",
    schema=ContactPayload,
    tag="Contacts",
)

ENTITIES: tuple[EntitySpec, ...] = (
    USERS,
    RECIPES,
    MEAL_PLANS,
    GROCERY_LISTS,
    AUTHORS,
    BOOKS,
    CONTACTS,
)
