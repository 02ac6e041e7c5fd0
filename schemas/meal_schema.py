"""Schemas for meal pattern responses and the generation request."""

from pydantic import BaseModel, Field
from typing import List, Optional
from .food_schema import FoodDetail


class MealPatternFoodDetail(BaseModel):
    """A food inside a meal pattern with its quantity."""

    food_id: str
    quantity: float = 1.0
    serving_size: Optional[float] = None
    notes: Optional[str] = None
    food: Optional[FoodDetail] = None


class MealPatternDetail(BaseModel):
    """Meal pattern payload, stored or freshly generated."""

    id: str
    name: str
    description: Optional[str] = None
    total_protein: float
    total_energy: Optional[float] = None
    total_fat: Optional[float] = None
    total_carbs: Optional[float] = None
    category: Optional[str] = None
    tags: List[str] = []
    icon: Optional[str] = None
    popularity: int = 0
    is_auto_generated: bool = False
    main_food_id: Optional[str] = None
    foods: List[MealPatternFoodDetail] = []


class PatternPagination(BaseModel):
    limit: int
    offset: int
    has_more: bool


class MealPatternListResponse(BaseModel):
    patterns: List[MealPatternDetail]
    pagination: PatternPagination


class FoodWithPatterns(BaseModel):
    """Food detail with the most popular patterns that contain it."""

    food: FoodDetail
    related_patterns: List[MealPatternDetail]


class GenerateMealRequest(BaseModel):
    """Payload for generating meal patterns."""

    target_protein: float = Field(..., ge=1, le=100, examples=[20], description="Protein target in grams (1-100)")
    main_food_id: Optional[str] = Field(None, examples=["natto_1"], description="Food included in every pattern")
    max_items: int = Field(4, ge=1, le=10, examples=[4], description="Maximum number of foods per pattern")
    exclude_categories: List[str] = Field(default=[], examples=[["meat"]], description="Categories never added")
    prefer_categories: List[str] = Field(default=[], examples=[["fish", "soy"]], description="Preferred categories, earlier first")
    count: int = Field(3, ge=1, le=10, examples=[3], description="Number of patterns to generate")


class GenerateMealResponse(BaseModel):
    patterns: List[MealPatternDetail]
    message: str
