"""Batch meal pattern generation.

Runs the generator once per eligible catalog food (as the main food) and
persists the resulting patterns. One failing food is logged and skipped so
the rest of the batch still completes.
"""

import time
from datetime import datetime
from types import SimpleNamespace
from typing import Dict

from sqlalchemy.orm import Session

from core.logger import get_logger
from core.repository import FoodRepository, MealPatternRepository, save
from database import models
from services.meal_generator import meal_generator
from services.nutrients import food_to_dict
from services.protein_calculator import DEFAULT_PROTEIN_GOAL

logger = get_logger("services.pattern_batch")

# foods at or below this protein are not used as a main food
MIN_MAIN_FOOD_PROTEIN = 2.0
BATCH_MAX_ITEMS = 4


def generate_all_meal_patterns(
    db: Session,
    patterns_per_food: int = 3,
    target_protein: float = DEFAULT_PROTEIN_GOAL,
    clear_existing: bool = True,
    created_by: str = "batch",
) -> Dict[str, int]:
    """Generate and store patterns for every eligible food.

    Args:
        db: Write session.
        patterns_per_food: Patterns attempted per main food.
        target_protein: Protein goal for every pattern.
        clear_existing: Delete previously auto-generated patterns first.
        created_by: Recorded in the update history.

    Returns:
        Dict with ``generated_count``, ``processed_foods``, ``deleted_count``
        and ``duration_ms``.
    """
    started_at = datetime.utcnow()
    start = time.perf_counter()
    foods_repo = FoodRepository(db)
    patterns_repo = MealPatternRepository(db)

    deleted = 0
    if clear_existing:
        deleted = patterns_repo.delete_auto_generated()
        logger.info("Deleted %s auto-generated patterns", deleted)

    # detached snapshots: each commit below would otherwise expire the ORM rows
    catalog = [SimpleNamespace(**food_to_dict(f)) for f in foods_repo.get_all()]
    main_foods = [SimpleNamespace(id=f.id) for f in foods_repo.for_batch_generation(MIN_MAIN_FOOD_PROTEIN)]
    logger.info("Generating patterns for %s foods (%s patterns stored)", len(main_foods), patterns_repo.count())

    generated = 0
    processed = 0
    for food in main_foods:
        try:
            patterns = meal_generator.generate_meal_patterns(
                catalog,
                target_protein,
                main_food_id=food.id,
                max_items=BATCH_MAX_ITEMS,
                count=patterns_per_food,
            )
            for pattern in patterns:
                patterns_repo.save_generated(pattern)
                generated += 1
            processed += 1
        except Exception:
            db.rollback()
            logger.exception("Pattern generation failed for %s", food.id)
        if processed and processed % 10 == 0:
            logger.info("Progress: %s/%s foods processed", processed, len(main_foods))

    duration_ms = int((time.perf_counter() - start) * 1000)
    save(db, models.UpdateHistory(
        update_type="auto",
        target_table="meal_patterns",
        record_count=generated,
        status="success" if processed == len(main_foods) else "partial",
        started_at=started_at,
        completed_at=datetime.utcnow(),
        created_by=created_by,
    ))
    logger.info("Batch generation done: %s patterns from %s foods in %sms", generated, processed, duration_ms)
    return {
        "generated_count": generated,
        "processed_foods": processed,
        "deleted_count": deleted,
        "duration_ms": duration_ms,
    }
