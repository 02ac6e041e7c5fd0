"""Food catalog API router.

Search with pagination, category statistics, autocomplete, protein ranking,
food detail with related patterns and similar foods. Static paths are
declared before ``/{food_id}`` so they are not captured as ids.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from database.deps import get_db_read
from core.logger import get_logger
from core.repository import FoodRepository, MealPatternRepository
from core.exceptions import NotFoundError
from schemas import FoodDetail, FoodListResponse, FoodCategoryStat, FoodSuggestion, SimilarFood
from schemas.food_schema import Pagination
from schemas.meal_schema import FoodWithPatterns
from services.content_recommender import content_recommender
from services.nutrients import food_to_dict
from api.meals import pattern_detail

logger = get_logger("api.foods")
router = APIRouter(prefix="/api/foods", tags=["foods"])

MAX_PAGE_SIZE = 100
MAX_RANKING_SIZE = 50
RELATED_PATTERNS = 5


@router.get("", response_model=FoodListResponse)
def search_foods(
    q: str = "",
    category: str = "",
    limit: int = 20,
    offset: int = 0,
    sort: str = "protein",
    order: str = "desc",
    db: Session = Depends(get_db_read),
):
    """Search the catalog by name or reading.

    Args:
        q: Substring matched against name and reading.
        category: Exact category filter.
        limit: Page size, capped at 100.
        offset: Rows to skip.
        sort: One of protein, name, energy, fat, carbs. Anything else sorts by protein.
        order: ``asc`` or ``desc``.
        db: Read-only SQLAlchemy session injected by dependency.
    """
    limit = max(1, min(limit, MAX_PAGE_SIZE))
    offset = max(0, offset)
    foods, total = FoodRepository(db).search(q=q, category=category, sort=sort, order=order, limit=limit, offset=offset)
    logger.info("Food search q=%r category=%r -> %s/%s", q, category, len(foods), total)
    return FoodListResponse(
        foods=[FoodDetail(**food_to_dict(f)) for f in foods],
        pagination=Pagination(total=total, limit=limit, offset=offset, has_more=offset + len(foods) < total),
    )


@router.get("/categories", response_model=List[FoodCategoryStat])
def list_categories(db: Session = Depends(get_db_read)):
    """Food count and average protein per category."""
    return [FoodCategoryStat(**row) for row in FoodRepository(db).categories()]


@router.get("/search/suggestions", response_model=List[FoodSuggestion])
def search_suggestions(q: str = "", db: Session = Depends(get_db_read)):
    """Autocomplete entries for a partial name. An empty query yields nothing."""
    q = q.strip()
    if not q:
        return []
    return [
        FoodSuggestion(id=f.id, name=f.name, name_kana=f.name_kana, protein=f.protein)
        for f in FoodRepository(db).suggestions(q)
    ]


@router.get("/ranking/protein", response_model=List[FoodDetail])
def protein_ranking(limit: int = 10, db: Session = Depends(get_db_read)):
    limit = max(1, min(limit, MAX_RANKING_SIZE))
    return [FoodDetail(**food_to_dict(f)) for f in FoodRepository(db).protein_ranking(limit)]


@router.get("/{food_id}", response_model=FoodWithPatterns)
def get_food(food_id: str, db: Session = Depends(get_db_read)):
    """Return a food with its most popular patterns.

    Raises:
        NotFoundError: If the food does not exist.
    """
    food = FoodRepository(db).get_by_id(food_id)
    if food is None:
        raise NotFoundError("Food", food_id)
    related = MealPatternRepository(db).related_to_food(food_id, limit=RELATED_PATTERNS)
    return FoodWithPatterns(
        food=FoodDetail(**food_to_dict(food)),
        related_patterns=[pattern_detail(p) for p in related],
    )


@router.get("/{food_id}/similar", response_model=List[SimilarFood])
def get_similar_foods(food_id: str, top_k: int = 5, db: Session = Depends(get_db_read)):
    """Return the top-k foods with the most similar nutrient profile.

    Raises:
        NotFoundError: If the food does not exist.
    """
    repo = FoodRepository(db)
    if repo.get_by_id(food_id) is None:
        raise NotFoundError("Food", food_id)

    ranked = content_recommender.recommend_similar(db, food_id, top_k)
    foods = repo.get_many([fid for fid, _ in ranked])
    return [
        SimilarFood(score=score, **food_to_dict(foods[fid]))
        for fid, score in ranked
        if fid in foods
    ]
