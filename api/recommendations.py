"""Recommendation endpoints.

The client's current selection travels as a comma-separated
``selected_food_ids`` query parameter. Every endpoint resolves it against
the catalog first and rejects unknown ids.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from database.deps import get_db_read
from core.logger import get_logger
from core.repository import FoodRepository
from core.exceptions import NotFoundError, ValidationError
from schemas import RecommendationResponse, CombinationSuggestion, ProteinProgress
from services.meal_recommender import meal_recommender
from services.protein_calculator import ProteinCalculator, DEFAULT_PROTEIN_GOAL

logger = get_logger("api.recommendations")
router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])

MAX_TARGET_PROTEIN = 100


def _parse_ids(selected_food_ids: str) -> List[str]:
    ids = [part.strip() for part in (selected_food_ids or "").split(",") if part.strip()]
    return list(dict.fromkeys(ids))


def _check_target(target_protein: float) -> None:
    if not 0 < target_protein <= MAX_TARGET_PROTEIN:
        raise ValidationError(
            f"target_protein must be greater than 0 and at most {MAX_TARGET_PROTEIN}",
            field="target_protein",
        )


def _selected_foods(repo: FoodRepository, selected_food_ids: str):
    """Resolve the id list in request order.

    Raises:
        NotFoundError: If any id is not in the catalog.
    """
    ids = _parse_ids(selected_food_ids)
    found = repo.get_many(ids)
    missing = [i for i in ids if i not in found]
    if missing:
        raise NotFoundError("Food", ",".join(missing))
    return [found[i] for i in ids]


@router.get("", response_model=RecommendationResponse)
def get_recommendations(
    selected_food_ids: str = "",
    target_protein: float = DEFAULT_PROTEIN_GOAL,
    db: Session = Depends(get_db_read),
):
    """Rank single foods that close the protein gap of the selection.

    Raises:
        ValidationError: If the target is out of range.
        NotFoundError: If a selected id is unknown.
    """
    _check_target(target_protein)
    repo = FoodRepository(db)
    selected = _selected_foods(repo, selected_food_ids)
    result = meal_recommender.get_recommendations(selected, repo.get_all(), target_protein)
    logger.info(
        "Recommendations for %s selected foods, remaining=%.1fg",
        len(selected), result["remaining_protein"],
    )
    return RecommendationResponse(**result)


@router.get("/combinations", response_model=List[CombinationSuggestion])
def get_combinations(
    selected_food_ids: str = "",
    target_protein: float = DEFAULT_PROTEIN_GOAL,
    db: Session = Depends(get_db_read),
):
    """Suggest up to three complete food sets that reach the target."""
    _check_target(target_protein)
    repo = FoodRepository(db)
    selected = _selected_foods(repo, selected_food_ids)
    suggestions = meal_recommender.get_combination_suggestions(selected, repo.get_all(), target_protein)
    return [CombinationSuggestion(**s) for s in suggestions]


@router.get("/progress", response_model=ProteinProgress)
def get_progress(
    selected_food_ids: str = "",
    target_protein: float = DEFAULT_PROTEIN_GOAL,
    db: Session = Depends(get_db_read),
):
    """Protein total and progress toward the goal for the selection."""
    _check_target(target_protein)
    selected = _selected_foods(FoodRepository(db), selected_food_ids)
    return ProteinProgress(**ProteinCalculator(target_protein).summarize(selected))
