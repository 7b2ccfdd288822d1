"""
Input validation tests.

Malformed input must be rejected by the schemas, before any service or
storage call happens.
"""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from domain.schemas import (
    MealPlanChanges,
    MealPlanCreate,
    MealPlanEntryUpsert,
    MealPlanUpdate,
    RecipeChanges,
    RecipeCreate,
    RecipeRead,
    RecipeUpdate,
    UPDATE_REQUIRES_FIELD,
)


# =============================================================================
# RECIPES
# =============================================================================


def test_recipe_create_accepts_camel_case_payload():
    recipe = RecipeCreate.model_validate(
        {
            "title": "Grilled Chicken",
            "mealType": "dinner",
            "calories": 450,
            "proteinGrams": 40,
            "carbsGrams": 0,
            "fatGrams": 12,
        }
    )

    assert recipe.meal_type == "dinner"
    assert recipe.protein_grams == 40
    assert recipe.carbs_grams == 0
    assert recipe.description is None


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"title": ""},
        {"title": "Soup", "calories": 0},
        {"title": "Soup", "calories": -10},
        {"title": "Soup", "calories": 120.5},
        {"title": "Soup", "calories": "120"},
        {"title": "Soup", "proteinGrams": -1},
        {"title": "Soup", "fatGrams": 2.5},
        {"title": "Soup", "calories": True},
        {"title": 42},
    ],
)
def test_recipe_create_rejects_invalid_input(payload):
    with pytest.raises(ValidationError):
        RecipeCreate.model_validate(payload)


def test_recipe_create_accepts_whole_number_floats():
    recipe = RecipeCreate.model_validate({"title": "Soup", "calories": 120.0, "fatGrams": 0.0})
    assert recipe.calories == 120
    assert isinstance(recipe.calories, int)
    assert recipe.fat_grams == 0


def test_recipe_update_requires_a_field_besides_id():
    with pytest.raises(ValidationError) as exc_info:
        RecipeUpdate.model_validate({"id": "r-1"})

    assert UPDATE_REQUIRES_FIELD in str(exc_info.value)


def test_recipe_update_requires_id():
    with pytest.raises(ValidationError):
        RecipeUpdate.model_validate({"title": "Soup"})
    with pytest.raises(ValidationError):
        RecipeUpdate.model_validate({"id": "", "title": "Soup"})


def test_recipe_update_tracks_only_sent_fields():
    update = RecipeUpdate.model_validate({"id": "r-1", "cuisine": "Italian"})
    assert update.provided_fields() == {"cuisine": "Italian"}


def test_recipe_update_explicit_null_clears_optional_field():
    update = RecipeUpdate.model_validate({"id": "r-1", "description": None})
    assert update.provided_fields() == {"description": None}


def test_recipe_update_rejects_clearing_title():
    with pytest.raises(ValidationError):
        RecipeUpdate.model_validate({"id": "r-1", "title": None})


def test_recipe_changes_body_without_fields_is_rejected():
    with pytest.raises(ValidationError):
        RecipeChanges.model_validate({})


def test_recipe_read_serializes_camel_case():
    read = RecipeRead(id="r-1", user_id="u-1", title="Oats", protein_grams=5)
    dumped = read.model_dump(by_alias=True)
    assert dumped["userId"] == "u-1"
    assert dumped["proteinGrams"] == 5


def test_recipe_read_treats_naive_timestamps_as_utc():
    stamp = datetime(2024, 1, 1, 12, 30)
    read = RecipeRead(id="r-1", user_id="u-1", title="Oats", created_at=stamp)

    assert read.created_at == stamp.replace(tzinfo=timezone.utc)
    assert read.updated_at is None


# =============================================================================
# MEAL PLANS
# =============================================================================


def test_meal_plan_create_everything_optional():
    plan = MealPlanCreate.model_validate({})
    assert plan.name is None
    assert plan.start_date is None


def test_meal_plan_create_parses_dates_without_ordering_check():
    plan = MealPlanCreate.model_validate(
        {"name": "Week 1", "startDate": "2024-01-07", "endDate": "2024-01-01"}
    )
    assert plan.start_date == date(2024, 1, 7)
    assert plan.end_date == date(2024, 1, 1)


def test_meal_plan_create_takes_date_part_of_timestamps():
    plan = MealPlanCreate.model_validate(
        {"startDate": "2024-01-07T18:30:00Z", "endDate": "2024-01-13T00:00:00"}
    )
    assert plan.start_date == date(2024, 1, 7)
    assert plan.end_date == date(2024, 1, 13)


def test_meal_plan_create_rejects_malformed_dates():
    with pytest.raises(ValidationError):
        MealPlanCreate.model_validate({"startDate": "next tuesday"})


def test_meal_plan_create_rejects_empty_name():
    with pytest.raises(ValidationError):
        MealPlanCreate.model_validate({"name": ""})


def test_meal_plan_update_requires_a_field():
    with pytest.raises(ValidationError):
        MealPlanUpdate.model_validate({"id": "p-1"})
    with pytest.raises(ValidationError):
        MealPlanChanges.model_validate({})


def test_meal_plan_update_with_single_date():
    update = MealPlanUpdate.model_validate({"id": "p-1", "endDate": "2024-02-01"})
    assert update.provided_fields() == {"end_date": date(2024, 2, 1)}


# =============================================================================
# MEAL PLAN ENTRIES
# =============================================================================


def test_entry_upsert_requires_plan_date_and_slot():
    for missing in ("mealPlanId", "date", "mealSlot"):
        payload = {"mealPlanId": "p-1", "date": "2024-01-01", "mealSlot": "breakfast"}
        payload.pop(missing)
        with pytest.raises(ValidationError):
            MealPlanEntryUpsert.model_validate(payload)


def test_entry_upsert_rejects_empty_slot_and_recipe_id():
    base = {"mealPlanId": "p-1", "date": "2024-01-01"}
    with pytest.raises(ValidationError):
        MealPlanEntryUpsert.model_validate({**base, "mealSlot": ""})
    with pytest.raises(ValidationError):
        MealPlanEntryUpsert.model_validate({**base, "mealSlot": "lunch", "recipeId": ""})


def test_entry_upsert_accepts_timestamp_for_date():
    upsert = MealPlanEntryUpsert.model_validate(
        {"mealPlanId": "p-1", "date": "2024-03-05T08:15:00+00:00", "mealSlot": "breakfast"}
    )
    assert upsert.date == date(2024, 3, 5)


def test_entry_fields_include_omitted_optionals():
    upsert = MealPlanEntryUpsert.model_validate(
        {"id": "e-1", "mealPlanId": "p-1", "date": "2024-01-01", "mealSlot": "breakfast"}
    )
    fields = upsert.entry_fields()

    assert "id" not in fields
    assert fields["notes"] is None
    assert fields["custom_title"] is None
    assert fields["recipe_id"] is None
    assert fields["date"] == date(2024, 1, 1)
