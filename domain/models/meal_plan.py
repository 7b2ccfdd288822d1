"""
Meal planning models.
"""

from sqlalchemy import Column, Text, TIMESTAMP, Date, Index
from sqlalchemy.sql import func

from domain.models.database import Base


class MealPlan(Base):
    """Weekly or daily meal plan"""

    __tablename__ = "meal_plan"

    id = Column(Text, primary_key=True)
    user_id = Column(Text, nullable=False)

    name = Column(Text)  # "Week 1 Clean Eating"
    start_date = Column(Date)
    end_date = Column(Date)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    __table_args__ = (Index("ix_meal_plan_user_id", "user_id"),)


class MealPlanEntry(Base):
    """A meal slot on a given day of a plan"""

    __tablename__ = "meal_plan_entry"

    id = Column(Text, primary_key=True)
    # References meal_plan.id and recipe.id without database-level foreign keys:
    # deleting a plan or recipe leaves its entries in place.
    meal_plan_id = Column(Text, nullable=False)
    user_id = Column(Text, nullable=False)

    date = Column(Date, nullable=False)
    meal_slot = Column(Text, nullable=False)  # breakfast, lunch, dinner, snack

    recipe_id = Column(Text)
    custom_title = Column(Text)  # "Hotel food", "Order outside"
    notes = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("ix_meal_plan_entry_plan_user", "meal_plan_id", "user_id"),
        Index("ix_meal_plan_entry_recipe_id", "recipe_id"),
    )
