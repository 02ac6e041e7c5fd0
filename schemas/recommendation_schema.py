"""Schemas for recommendations, combination suggestions and progress."""

from pydantic import BaseModel
from typing import List
from .food_schema import FoodDetail


class RecommendedFood(FoodDetail):
    """Food suggested as a single addition."""

    score: float
    reason: str
    protein_gap: float


class RecommendationResponse(BaseModel):
    recommendations: List[RecommendedFood]
    remaining_protein: float
    is_target_met: bool


class CombinationSuggestion(BaseModel):
    """A full food set (selection included) that closes the gap."""

    foods: List[FoodDetail]
    total_protein: float
    description: str
    category_balance: float


class ProteinProgress(BaseModel):
    current_protein: float
    goal_protein: float
    remaining_protein: float
    progress_percentage: int
    is_goal_achieved: bool
