"""
Meal Plan Repository - Data access layer for meal plan operations
"""

from typing import List
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import MealPlan, MealPlanEntry


class MealPlanRepository(BaseRepository[MealPlan]):
    """Repository for meal plan data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealPlan)


class MealPlanEntryRepository(BaseRepository[MealPlanEntry]):
    """Repository for meal plan entry data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealPlanEntry)

    def list_by_plan_and_user(self, meal_plan_id: str, user_id: str) -> List[MealPlanEntry]:
        """Get all entries of a plan that belong to the user"""
        return (
            self.db.query(MealPlanEntry)
            .filter(
                MealPlanEntry.meal_plan_id == meal_plan_id,
                MealPlanEntry.user_id == user_id,
            )
            .all()
        )
