"""Pydantic schema package for request and response models."""

from .food_schema import FoodDetail, FoodListResponse, FoodCategoryStat, FoodSuggestion, SimilarFood
from .meal_schema import MealPatternDetail, MealPatternListResponse, GenerateMealRequest, GenerateMealResponse
from .recommendation_schema import RecommendationResponse, CombinationSuggestion, ProteinProgress

__all__ = [
    "FoodDetail",
    "FoodListResponse",
    "FoodCategoryStat",
    "FoodSuggestion",
    "SimilarFood",
    "MealPatternDetail",
    "MealPatternListResponse",
    "GenerateMealRequest",
    "GenerateMealResponse",
    "RecommendationResponse",
    "CombinationSuggestion",
    "ProteinProgress",
]
