"""Tests for batch pattern generation and the admin endpoints."""

import pytest
from sqlalchemy.exc import SQLAlchemyError
from database import init_db, models
from core.repository import MealPatternRepository
from database.database import WriteSessionLocal, ReadSessionLocal
from services.pattern_batch import generate_all_meal_patterns, MIN_MAIN_FOOD_PROTEIN
from api.admin import generate_patterns, list_update_history
from schemas.admin_schema import GeneratePatternsRequest


@pytest.fixture(scope="module", autouse=True)
def setup_db():
    """Initialize database before tests."""
    init_db()


def auto_generated(db):
    return db.query(models.MealPattern).filter(models.MealPattern.is_auto_generated.is_(True)).all()


def test_batch_generation_stores_patterns():
    db = WriteSessionLocal()
    try:
        eligible = db.query(models.Food).filter(models.Food.protein > MIN_MAIN_FOOD_PROTEIN).count()
        result = generate_all_meal_patterns(db, patterns_per_food=1, target_protein=20)

        assert result["processed_foods"] == eligible
        assert result["generated_count"] > 0
        assert result["duration_ms"] >= 0
        stored = auto_generated(db)
        assert len(stored) == result["generated_count"]
        for pattern in stored:
            assert pattern.main_food_id is not None
            assert pattern.foods[0].food_id == pattern.main_food_id
            assert len(pattern.foods) >= 2

        history = db.query(models.UpdateHistory).order_by(models.UpdateHistory.id.desc()).first()
        assert history.update_type == "auto"
        assert history.record_count == result["generated_count"]
        assert history.status == "success"
    finally:
        db.close()


def test_batch_generation_replaces_previous_run():
    db = WriteSessionLocal()
    try:
        first = generate_all_meal_patterns(db, patterns_per_food=1)
        second = generate_all_meal_patterns(db, patterns_per_food=1, clear_existing=True)
        assert second["deleted_count"] == first["generated_count"]
        assert len(auto_generated(db)) == second["generated_count"]
        # seeded patterns survive
        assert db.get(models.MealPattern, "japanese-traditional") is not None
    finally:
        db.close()


def test_admin_endpoints():
    db = WriteSessionLocal()
    try:
        res = generate_patterns(GeneratePatternsRequest(patterns_per_food=1), db=db)
        assert res.generated_count > 0
    finally:
        db.close()

    db = ReadSessionLocal()
    try:
        history = list_update_history(limit=5, db=db)
        assert 1 <= len(history) <= 5
        assert history[0].created_by == "api"
        assert history[0].target_table == "meal_patterns"
        assert history[0].started_at is not None
    finally:
        db.close()


def test_batch_generation_isolates_failing_food(monkeypatch):
    original = MealPatternRepository.save_generated

    def failing_for_natto(self, pattern):
        if pattern.get("main_food_id") == "natto_1":
            raise SQLAlchemyError("insert failed")
        return original(self, pattern)

    monkeypatch.setattr(MealPatternRepository, "save_generated", failing_for_natto)
    db = WriteSessionLocal()
    try:
        eligible = db.query(models.Food).filter(models.Food.protein > MIN_MAIN_FOOD_PROTEIN).count()
        result = generate_all_meal_patterns(db, patterns_per_food=1, clear_existing=True)

        assert result["processed_foods"] == eligible - 1
        assert result["generated_count"] > 0
        main_ids = {p.main_food_id for p in auto_generated(db)}
        assert "natto_1" not in main_ids
        assert "salmon_1" in main_ids

        history = db.query(models.UpdateHistory).order_by(models.UpdateHistory.id.desc()).first()
        assert history.status == "partial"
        assert history.record_count == result["generated_count"]
    finally:
        db.close()
