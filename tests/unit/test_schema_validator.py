"""Unit tests for payload validation against the entity schemas."""

from datetime import datetime, timezone

import pytest
from bson import ObjectId

from crudhub.application.schemas import (
    BookPayload,
    ContactPayload,
    GroceryListPayload,
    MealPlanPayload,
    RecipePayload,
    UserPayload,
)
from crudhub.application.services import validate

USER_ID = str(ObjectId())
RECIPE_ID = str(ObjectId())


def _recipe(**overrides):
    payload = {
        "title": "Shakshuka",
        "description": "Eggs poached in a spiced tomato sauce.",
        "ingredients": ["6 eggs"],
        "instructions": ["Simmer the sauce."],
        "prepTime": 10,
        "cookTime": 25,
        "servingSize": 4,
        "difficulty": "Easy",
        "cuisine": "Maghrebi",
        "authorId": USER_ID,
    }
    payload.update(overrides)
    return payload


def _meal_plan(**overrides):
    payload = {
        "userId": USER_ID,
        "name": "Week 12",
        "startDate": "2024-03-18T00:00:00Z",
        "endDate": "2024-03-24T00:00:00Z",
        "meals": [{"day": "Monday", "mealType": "Lunch", "recipeId": RECIPE_ID}],
    }
    payload.update(overrides)
    return payload


def _fields(result):
    return {error.field for error in result.errors}


def test_valid_recipe_is_normalized():
    result = validate(RecipePayload, _recipe(prepTime="15"))

    assert result.is_valid
    assert result.value["prepTime"] == 15
    assert "tags" not in result.value


@pytest.mark.parametrize("missing", ["title", "ingredients", "authorId", "difficulty"])
def test_missing_required_field_is_named(missing):
    payload = _recipe()
    del payload[missing]

    result = validate(RecipePayload, payload)

    assert not result.is_valid
    assert result.value is None
    assert any(e.field == missing and e.message == "is required" for e in result.errors)


def test_all_violations_are_collected():
    result = validate(
        RecipePayload,
        _recipe(title="ab", prepTime=0, difficulty="Impossible", authorId="xyz"),
    )

    assert {"title", "prepTime", "difficulty", "authorId"} <= _fields(result)


def test_unknown_keys_are_rejected():
    result = validate(UserPayload, {"email": "ada@example.com", "displayName": "Ada", "isAdmin": True})

    assert [str(e) for e in result.errors] == ["isAdmin: is not allowed"]


def test_invalid_email_is_rejected():
    result = validate(ContactPayload, {
        "firstName": "Grace",
        "lastName": "Hopper",
        "email": "not-an-email",
        "favoriteColor": "blue",
        "birthday": "1906-12-09",
    })

    assert _fields(result) == {"email"}


def test_nested_errors_use_dotted_paths():
    meals = [
        {"day": "Monday", "mealType": "Lunch", "recipeId": RECIPE_ID},
        {"day": "Funday", "mealType": "Lunch", "recipeId": "short"},
    ]
    result = validate(MealPlanPayload, _meal_plan(meals=meals))

    assert _fields(result) == {"meals.1.day", "meals.1.recipeId"}


def test_end_date_must_follow_start_date():
    result = validate(MealPlanPayload, _meal_plan(endDate="2024-03-18T00:00:00Z"))

    assert [str(e) for e in result.errors] == ["endDate: End date must be after start date"]


def test_dates_are_parsed_to_utc():
    result = validate(MealPlanPayload, _meal_plan())

    assert result.value["startDate"] == datetime(2024, 3, 18, tzinfo=timezone.utc)
    assert result.value["meals"] == [{"day": "Monday", "mealType": "Lunch", "recipeId": RECIPE_ID}]


def test_optional_grocery_fields_stay_absent():
    result = validate(GroceryListPayload, {
        "userId": USER_ID,
        "name": "Weekend shop",
        "items": [{"name": "Milk", "quantity": "2 L"}],
    })

    assert result.is_valid
    assert "mealPlanId" not in result.value
    assert result.value["items"] == [{"name": "Milk", "quantity": "2 L"}]


def test_grocery_category_must_be_known():
    result = validate(GroceryListPayload, {
        "userId": USER_ID,
        "name": "Weekend shop",
        "items": [{"name": "Milk", "quantity": "2 L", "category": "Beverages"}],
    })

    assert _fields(result) == {"items.0.category"}


def test_book_year_cannot_be_in_the_future():
    result = validate(BookPayload, {
        "title": "Future Book",
        "isbn": "978-0141439518",
        "authorId": USER_ID,
        "publishedYear": datetime.now().year + 1,
        "genres": ["Fiction"],
        "pages": 300,
        "language": "English",
        "inPrint": True,
    })

    assert _fields(result) == {"publishedYear"}
    assert result.errors[0].message.startswith("Published year cannot be after")


def test_non_object_payload_is_rejected():
    result = validate(UserPayload, ["not", "an", "object"])

    assert not result.is_valid


@pytest.mark.parametrize(
    ("schema", "payload", "field"),
    [
        (RecipePayload, _recipe(tags=None), "tags"),
        (MealPlanPayload, _meal_plan(notes=None), "notes"),
        (
            GroceryListPayload,
            {"userId": USER_ID, "mealPlanId": None, "name": "Weekend shop",
             "items": [{"name": "Milk", "quantity": "2 L"}]},
            "mealPlanId",
        ),
        (
            GroceryListPayload,
            {"userId": USER_ID, "name": "Weekend shop",
             "items": [{"name": "Milk", "quantity": "2 L", "checked": None}]},
            "items.0.checked",
        ),
    ],
)
def test_explicit_null_is_not_an_omitted_field(schema, payload, field):
    result = validate(schema, payload)

    assert [str(e) for e in result.errors] == [f"{field}: must not be null"]
