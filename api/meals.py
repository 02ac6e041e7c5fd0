"""Meal pattern API router.

Lists stored meal patterns, returns pattern detail (bumping its popularity)
and generates new patterns on demand from the food catalog.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
import json
from database.deps import get_db_read, get_db_write
from core.logger import get_logger
from core.repository import FoodRepository, MealPatternRepository
from core.exceptions import NotFoundError, InfeasibleMealError
from database import models
from schemas import FoodDetail, MealPatternDetail, MealPatternListResponse, GenerateMealRequest, GenerateMealResponse
from schemas.meal_schema import MealPatternFoodDetail, PatternPagination
from services.meal_generator import meal_generator
from services.nutrients import food_to_dict

logger = get_logger("api.meals")
router = APIRouter(prefix="/api/meals", tags=["meals"])

MAX_PAGE_SIZE = 100


def pattern_detail(pattern: models.MealPattern) -> MealPatternDetail:
    """Convert a stored pattern and its food rows into `MealPatternDetail`."""
    try:
        tags = json.loads(pattern.tags) if pattern.tags else []
    except ValueError:
        logger.warning("Pattern %s has malformed tags: %r", pattern.id, pattern.tags)
        tags = []
    return MealPatternDetail(
        id=pattern.id,
        name=pattern.name,
        description=pattern.description,
        total_protein=pattern.total_protein,
        total_energy=pattern.total_energy,
        total_fat=pattern.total_fat,
        total_carbs=pattern.total_carbs,
        category=pattern.category,
        tags=tags,
        icon=pattern.icon,
        popularity=pattern.popularity or 0,
        is_auto_generated=bool(pattern.is_auto_generated),
        main_food_id=pattern.main_food_id,
        foods=[
            MealPatternFoodDetail(
                food_id=pf.food_id,
                quantity=pf.quantity if pf.quantity is not None else 1.0,
                serving_size=pf.serving_size,
                notes=pf.notes,
                food=FoodDetail(**food_to_dict(pf.food)) if pf.food is not None else None,
            )
            for pf in pattern.foods
        ],
    )


@router.get("/patterns", response_model=MealPatternListResponse)
def list_patterns(
    food_id: Optional[str] = None,
    category: Optional[str] = None,
    limit: int = 20,
    offset: int = 0,
    popular: bool = False,
    db: Session = Depends(get_db_read),
):
    """List meal patterns.

    Args:
        food_id: Only patterns that contain this food.
        category: Only patterns of this category.
        limit: Page size, capped at 100.
        offset: Rows to skip.
        popular: Sort by popularity instead of total protein.
        db: Read-only SQLAlchemy session injected by dependency.
    """
    limit = max(1, min(limit, MAX_PAGE_SIZE))
    offset = max(0, offset)
    patterns = MealPatternRepository(db).list_patterns(
        food_id=food_id, category=category, popular=popular, limit=limit, offset=offset,
    )
    return MealPatternListResponse(
        patterns=[pattern_detail(p) for p in patterns],
        pagination=PatternPagination(limit=limit, offset=offset, has_more=len(patterns) == limit),
    )


@router.get("/patterns/{pattern_id}", response_model=MealPatternDetail)
def get_pattern(pattern_id: str, db: Session = Depends(get_db_write)):
    """Return one pattern and count the view.

    Raises:
        NotFoundError: If the pattern does not exist.
    """
    repo = MealPatternRepository(db)
    pattern = repo.get_by_id(pattern_id)
    if pattern is None:
        raise NotFoundError("MealPattern", pattern_id)
    repo.increment_popularity(pattern_id)
    # the commit expired the row, so popularity reloads with the new count
    return pattern_detail(pattern)


@router.post("/generate", response_model=GenerateMealResponse)
def generate_patterns(payload: GenerateMealRequest, db: Session = Depends(get_db_read)):
    """Generate meal patterns for a protein target.

    Generated patterns are returned but not stored.

    Raises:
        InfeasibleMealError: If no pattern with at least two foods fits.
    """
    foods = FoodRepository(db).get_all()
    patterns = meal_generator.generate_meal_patterns(
        foods,
        payload.target_protein,
        main_food_id=payload.main_food_id,
        max_items=payload.max_items,
        exclude_categories=payload.exclude_categories,
        prefer_categories=payload.prefer_categories,
        count=payload.count,
    )
    if not patterns:
        raise InfeasibleMealError(payload.target_protein, payload.exclude_categories, payload.max_items)
    return GenerateMealResponse(
        patterns=[MealPatternDetail(**p) for p in patterns],
        message=f"Generated {len(patterns)} meal pattern(s)",
    )
