"""Meal plan entry routes (one meal slot on one day of a plan)"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_action_context, get_db
from api.responses import ErrorResponse, list_response, success_response
from domain.schemas.auth_schemas import ActionContext
from domain.schemas.meal_plan_schemas import MealPlanEntryUpsert
from services.meal_plan_entry_service import MealPlanEntryService

router = APIRouter(
    prefix="/meal-plan-entries",
    tags=["Meal Planning"],
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
logger = logging.getLogger("mealplanner.api.meal_plan_entries")


@router.put("")
def upsert_meal_plan_entry(
    payload: MealPlanEntryUpsert,
    db: Session = Depends(get_db),
    context: ActionContext = Depends(get_action_context),
):
    """
    Create or replace a meal plan entry.

    - Without ``id``: a new entry is created in ``mealPlanId``
    - With ``id``: the entry is fully replaced; omitted optional fields
      (``recipeId``, ``customTitle``, ``notes``) are cleared
    """
    entry = MealPlanEntryService.upsert_meal_plan_entry(db, context, payload)
    return success_response(data={"mealPlanEntry": entry})


@router.get("")
def list_meal_plan_entries(
    meal_plan_id: str = Query(..., alias="mealPlanId", min_length=1),
    db: Session = Depends(get_db),
    context: ActionContext = Depends(get_action_context),
):
    """List the entries of one of the caller's meal plans"""
    return list_response(
        MealPlanEntryService.list_meal_plan_entries(db, context, meal_plan_id)
    )


@router.delete("/{entry_id}")
def delete_meal_plan_entry(
    entry_id: str,
    db: Session = Depends(get_db),
    context: ActionContext = Depends(get_action_context),
):
    deleted_id = MealPlanEntryService.delete_meal_plan_entry(db, context, entry_id)
    return success_response(data={"id": deleted_id})
