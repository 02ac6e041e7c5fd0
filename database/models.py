"""SQLAlchemy ORM models for the protein calculator API.

Foods form the catalog, meal patterns group foods into breakfast sets, and
update history records seeding and batch generation runs. Models stay
behavior-free; scoring and generation live in `services`.
"""

from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Text, Boolean
from sqlalchemy.orm import declarative_base, relationship
from datetime import datetime

Base = declarative_base()


class Food(Base):
    """ORM model for a catalog food.

    Nutrient values are per typical serving. Only protein is required.
    """

    __tablename__ = "foods"
    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    name_kana = Column(String, nullable=True)
    protein = Column(Float, nullable=False, default=0.0, index=True)
    energy = Column(Float, nullable=True)
    fat = Column(Float, nullable=True)
    carbs = Column(Float, nullable=True)
    fiber = Column(Float, nullable=True)
    salt = Column(Float, nullable=True)
    category = Column(String, nullable=True, index=True)
    typical_amount = Column(Float, default=100.0)
    unit = Column(String, default="100g")
    image_url = Column(String, nullable=True)
    is_default = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class MealPattern(Base):
    """ORM model for a meal pattern (a named set of foods).

    Tags are stored as a JSON-encoded string.
    """

    __tablename__ = "meal_patterns"
    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    total_protein = Column(Float, nullable=False)
    total_energy = Column(Float, nullable=True)
    total_fat = Column(Float, nullable=True)
    total_carbs = Column(Float, nullable=True)
    category = Column(String, nullable=True, index=True)
    tags = Column(Text, nullable=True)
    icon = Column(String, nullable=True)
    popularity = Column(Integer, default=0, nullable=False, index=True)
    is_auto_generated = Column(Boolean, default=False)
    main_food_id = Column(String, ForeignKey("foods.id"), nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    foods = relationship(
        "MealPatternFood",
        back_populates="pattern",
        cascade="all, delete-orphan",
        order_by="MealPatternFood.position",
    )


class MealPatternFood(Base):
    """Association row linking a food to a meal pattern with a quantity."""

    __tablename__ = "meal_pattern_foods"
    pattern_id = Column(String, ForeignKey("meal_patterns.id", ondelete="CASCADE"), primary_key=True)
    food_id = Column(String, ForeignKey("foods.id", ondelete="CASCADE"), primary_key=True)
    position = Column(Integer, default=0)
    quantity = Column(Float, default=1.0)
    serving_size = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)

    pattern = relationship("MealPattern", back_populates="foods")
    food = relationship("Food")


class UpdateHistory(Base):
    """ORM model recording data loads and batch generation runs."""

    __tablename__ = "update_history"
    id = Column(Integer, primary_key=True, index=True)
    update_type = Column(String, nullable=False)
    target_table = Column(String, nullable=False)
    record_count = Column(Integer, nullable=True)
    status = Column(String, nullable=True)
    error_message = Column(Text, nullable=True)
    started_at = Column(DateTime, nullable=True)
    completed_at = Column(DateTime, nullable=True)
    created_by = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
