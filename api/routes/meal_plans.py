"""Meal plan routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_action_context, get_db
from api.responses import ErrorResponse, list_response, success_response
from domain.schemas.auth_schemas import ActionContext
from domain.schemas.meal_plan_schemas import MealPlanChanges, MealPlanCreate, MealPlanUpdate
from services.meal_plan_service import MealPlanService

router = APIRouter(
    prefix="/meal-plans",
    tags=["Meal Planning"],
    responses={401: {"model": ErrorResponse}},
)
logger = logging.getLogger("mealplanner.api.meal_plans")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_meal_plan(
    payload: MealPlanCreate,
    db: Session = Depends(get_db),
    context: ActionContext = Depends(get_action_context),
):
    """Create a meal plan; name and dates are optional"""
    meal_plan = MealPlanService.create_meal_plan(db, context, payload)
    return success_response(data={"mealPlan": meal_plan})


@router.get("")
def list_meal_plans(
    db: Session = Depends(get_db),
    context: ActionContext = Depends(get_action_context),
):
    return list_response(MealPlanService.list_meal_plans(db, context))


@router.patch("/{meal_plan_id}", responses={404: {"model": ErrorResponse}})
def update_meal_plan(
    meal_plan_id: str,
    changes: MealPlanChanges,
    db: Session = Depends(get_db),
    context: ActionContext = Depends(get_action_context),
):
    """Change the name and/or dates of a meal plan"""
    payload = MealPlanUpdate(id=meal_plan_id, **changes.provided_fields())
    meal_plan = MealPlanService.update_meal_plan(db, context, payload)
    return success_response(data={"mealPlan": meal_plan})


@router.delete("/{meal_plan_id}", responses={404: {"model": ErrorResponse}})
def delete_meal_plan(
    meal_plan_id: str,
    db: Session = Depends(get_db),
    context: ActionContext = Depends(get_action_context),
):
    deleted_id = MealPlanService.delete_meal_plan(db, context, meal_plan_id)
    return success_response(data={"id": deleted_id})
