"""Tests for the recommendation, combination and progress endpoints."""

import pytest
from database import init_db
from database.database import ReadSessionLocal
from core.exceptions import NotFoundError, ValidationError
from api.recommendations import get_recommendations, get_combinations, get_progress


@pytest.fixture(scope="module", autouse=True)
def setup_db():
    """Initialize database before tests."""
    init_db()


def test_recommendations_for_selection():
    db = ReadSessionLocal()
    try:
        res = get_recommendations(selected_food_ids="bread_1", target_protein=20, db=db)
        ids = [r.id for r in res.recommendations]
        assert "chicken_salad_1" in ids
        assert "bread_1" not in ids
        assert res.remaining_protein == pytest.approx(14.4)
        assert res.is_target_met is False
    finally:
        db.close()


def test_recommendations_unknown_id():
    db = ReadSessionLocal()
    try:
        with pytest.raises(NotFoundError) as exc_info:
            get_recommendations(selected_food_ids="bread_1,ghost_food", target_protein=20, db=db)
        assert "ghost_food" in exc_info.value.message
    finally:
        db.close()


def test_recommendations_reject_bad_target():
    db = ReadSessionLocal()
    try:
        with pytest.raises(ValidationError) as exc_info:
            get_recommendations(selected_food_ids="", target_protein=0, db=db)
        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"field": "target_protein"}
    finally:
        db.close()


def test_combinations():
    db = ReadSessionLocal()
    try:
        suggestions = get_combinations(selected_food_ids="bread_1", target_protein=20, db=db)
        assert 1 <= len(suggestions) <= 3
        for s in suggestions:
            assert s.foods[0].id == "bread_1"
            assert s.total_protein >= 20 - 1e-9
        assert get_combinations(selected_food_ids="chicken_salad_1", target_protein=20, db=db) == []
    finally:
        db.close()


def test_progress():
    db = ReadSessionLocal()
    try:
        res = get_progress(selected_food_ids="egg_1, bread_1", target_protein=20, db=db)
        assert res.current_protein == pytest.approx(11.8)
        assert res.remaining_protein == pytest.approx(8.2)
        assert res.progress_percentage == 59
        assert res.is_goal_achieved is False

        empty = get_progress(selected_food_ids="", target_protein=20, db=db)
        assert empty.current_protein == 0
        assert empty.progress_percentage == 0
    finally:
        db.close()
