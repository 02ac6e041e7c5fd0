"""Schemas for food catalog responses."""

from pydantic import BaseModel
from typing import List, Optional


class FoodDetail(BaseModel):
    """Representation of a catalog food in responses."""

    id: str
    name: str
    name_kana: Optional[str] = None
    protein: float
    energy: Optional[float] = None
    fat: Optional[float] = None
    carbs: Optional[float] = None
    fiber: Optional[float] = None
    salt: Optional[float] = None
    category: Optional[str] = None
    typical_amount: Optional[float] = None
    unit: Optional[str] = None
    image_url: Optional[str] = None


class Pagination(BaseModel):
    total: int
    limit: int
    offset: int
    has_more: bool


class FoodListResponse(BaseModel):
    foods: List[FoodDetail]
    pagination: Pagination


class FoodCategoryStat(BaseModel):
    """Food count and average protein for one category."""

    category: str
    count: int
    avg_protein: float


class FoodSuggestion(BaseModel):
    id: str
    name: str
    name_kana: Optional[str] = None
    protein: float


class SimilarFood(FoodDetail):
    """Food with an attached cosine similarity score."""

    score: float
