"""Small helpers shared by the generator, recommender and routers.

Foods arrive either as ORM rows or as plain attribute objects (tests use
`SimpleNamespace`), so everything is read with `getattr`.
"""

from typing import Dict, Iterable, Any

FOOD_FIELDS = (
    "id", "name", "name_kana", "protein", "energy", "fat", "carbs", "fiber", "salt",
    "category", "typical_amount", "unit", "image_url",
)


def food_to_dict(food) -> Dict[str, Any]:
    """Serialize a food object into a plain dict, skipping missing attributes."""
    return {field: getattr(food, field) for field in FOOD_FIELDS if hasattr(food, field)}


def total(foods: Iterable, nutrient: str) -> float:
    """Sum a nutrient over foods, treating missing values as 0."""
    return sum((getattr(f, nutrient, None) or 0) for f in foods)
