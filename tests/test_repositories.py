"""
Tests for the data access layer.

Every user-scoped query filters on both id and owner; these tests check that
rows of one user never leak into another user's results.
"""

import uuid
from datetime import date

from sqlalchemy.orm import Session

from test_fixtures import engine, db_session, unique_user_id
from domain.models import MealPlan, MealPlanEntry, Recipe
from repositories import MealPlanEntryRepository, MealPlanRepository, RecipeRepository


def _recipe(user_id: str, title: str = "Oats Upma") -> Recipe:
    return Recipe(id=str(uuid.uuid4()), user_id=user_id, title=title)


def _plan(user_id: str) -> MealPlan:
    return MealPlan(id=str(uuid.uuid4()), user_id=user_id, name="Week 1")


def _entry(plan: MealPlan, slot: str = "breakfast") -> MealPlanEntry:
    return MealPlanEntry(
        id=str(uuid.uuid4()),
        meal_plan_id=plan.id,
        user_id=plan.user_id,
        date=date(2024, 1, 1),
        meal_slot=slot,
    )


def test_recipe_repository_scopes_by_user(db_session: Session):
    repo = RecipeRepository(db_session)
    alice, bob = unique_user_id("alice"), unique_user_id("bob")

    mine = repo.create(_recipe(alice))
    repo.create(_recipe(bob, "Grilled Chicken"))

    assert repo.get_by_id_and_user(mine.id, alice).title == "Oats Upma"
    assert repo.get_by_id_and_user(mine.id, bob) is None
    assert [r.id for r in repo.list_by_user(alice)] == [mine.id]


def test_update_by_id_and_user_writes_only_owned_rows(db_session: Session):
    repo = RecipeRepository(db_session)
    alice = unique_user_id("alice")
    recipe = repo.create(_recipe(alice))
    recipe_id = recipe.id

    assert repo.update_by_id_and_user(recipe_id, unique_user_id("bob"), {"title": "Hacked"}) == 0
    assert repo.update_by_id_and_user(recipe_id, alice, {"cuisine": "Indian"}) == 1

    db_session.expire_all()
    stored = repo.get_by_id_and_user(recipe_id, alice)
    assert stored.title == "Oats Upma"
    assert stored.cuisine == "Indian"


def test_delete_by_id_and_user(db_session: Session):
    repo = MealPlanRepository(db_session)
    alice = unique_user_id("alice")
    plan = repo.create(_plan(alice))
    plan_id = plan.id

    assert repo.delete_by_id_and_user(plan_id, unique_user_id("bob")) == 0
    assert repo.get_by_id_and_user(plan_id, alice) is not None

    assert repo.delete_by_id_and_user(plan_id, alice) == 1
    assert repo.get_by_id_and_user(plan_id, alice) is None
    assert repo.delete_by_id_and_user(plan_id, alice) == 0


def test_entry_repository_lists_by_plan_and_user(db_session: Session):
    plans = MealPlanRepository(db_session)
    entries = MealPlanEntryRepository(db_session)
    alice = unique_user_id("alice")

    week1 = plans.create(_plan(alice))
    week2 = plans.create(_plan(alice))
    entries.create(_entry(week1, "breakfast"))
    entries.create(_entry(week1, "dinner"))
    entries.create(_entry(week2, "lunch"))

    week1_slots = sorted(e.meal_slot for e in entries.list_by_plan_and_user(week1.id, alice))
    assert week1_slots == ["breakfast", "dinner"]
    assert entries.list_by_plan_and_user(week1.id, unique_user_id("bob")) == []
