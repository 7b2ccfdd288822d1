"""
Recipe library models.
"""

from sqlalchemy import Column, Text, Integer, TIMESTAMP, CheckConstraint, Index
from sqlalchemy.sql import func

from domain.models.database import Base


class Recipe(Base):
    """Reusable recipe owned by a single user"""

    __tablename__ = "recipe"

    id = Column(Text, primary_key=True)
    user_id = Column(Text, nullable=False)

    title = Column(Text, nullable=False)  # "Oats Upma", "Grilled Chicken"
    description = Column(Text)
    cuisine = Column(Text)  # "Indian", "Italian"
    meal_type = Column(Text)  # breakfast, lunch, dinner, snack
    tags = Column(Text)  # comma-separated or JSON

    ingredients = Column(Text)  # free text or markdown list
    instructions = Column(Text)

    calories = Column(Integer)
    protein_grams = Column(Integer)
    carbs_grams = Column(Integer)
    fat_grams = Column(Integer)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    __table_args__ = (
        CheckConstraint("length(title) > 0", name="ck_recipe_title_nonempty"),
        Index("ix_recipe_user_id", "user_id"),
    )
