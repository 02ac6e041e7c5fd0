"""Administrative endpoints: batch pattern generation and update history."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from database.deps import get_db_read, get_db_write
from database import models
from core.logger import get_logger
from schemas.admin_schema import GeneratePatternsRequest, GeneratePatternsResponse, UpdateHistoryEntry
from services.pattern_batch import generate_all_meal_patterns

logger = get_logger("api.admin")
router = APIRouter(prefix="/api/admin", tags=["admin"])

MAX_HISTORY = 100


@router.post("/generate-patterns", response_model=GeneratePatternsResponse)
def generate_patterns(
    payload: GeneratePatternsRequest = GeneratePatternsRequest(),
    db: Session = Depends(get_db_write),
):
    """Regenerate auto-generated meal patterns for every eligible food.

    Args:
        payload: Batch options. Defaults apply when the body is omitted.
        db: Write session injected by dependency.

    Returns:
        `GeneratePatternsResponse` with counts and the run duration.
    """
    logger.info(
        "Batch generation requested: per_food=%s target=%s clear=%s",
        payload.patterns_per_food, payload.target_protein, payload.clear_existing,
    )
    result = generate_all_meal_patterns(
        db,
        patterns_per_food=payload.patterns_per_food,
        target_protein=payload.target_protein,
        clear_existing=payload.clear_existing,
        created_by="api",
    )
    return GeneratePatternsResponse(**result)


@router.get("/update-history", response_model=List[UpdateHistoryEntry])
def list_update_history(limit: int = 20, db: Session = Depends(get_db_read)):
    """Most recent data loads and batch runs, newest first."""
    limit = max(1, min(limit, MAX_HISTORY))
    rows = (
        db.query(models.UpdateHistory)
        .order_by(models.UpdateHistory.id.desc())
        .limit(limit)
        .all()
    )
    return [
        UpdateHistoryEntry(
            id=h.id,
            update_type=h.update_type,
            target_table=h.target_table,
            record_count=h.record_count,
            status=h.status,
            error_message=h.error_message,
            started_at=h.started_at.isoformat() if h.started_at else None,
            completed_at=h.completed_at.isoformat() if h.completed_at else None,
            created_by=h.created_by,
        )
        for h in rows
    ]
